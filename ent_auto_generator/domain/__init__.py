"""
Domain module for the ent schema generator.

This module contains the model document types and the decision logic that
does not depend on templates or the filesystem: type mapping, field
classification, indexing and naming.
"""

from .models import (
    FieldKind,
    EnumInfo,
    FieldInfo,
    EntityInfo,
    Document,
    ClassifiedFieldMap,
    ModelIndex,
    GeneratedFile,
    GenerationContext
)

from .field_mapping import (
    UNMAPPED,
    TypeMapper,
    DEFAULT_TYPE_MAPPER,
    map_type
)

from .classification import (
    classify_fields,
    collect_relation_keys
)

from .model_index import build_model_index

from .naming import (
    to_snake_case,
    schema_file_name,
    is_valid_go_identifier
)

__all__ = [
    # Core models
    'FieldKind',
    'EnumInfo',
    'FieldInfo',
    'EntityInfo',
    'Document',
    'ClassifiedFieldMap',
    'ModelIndex',
    'GeneratedFile',
    'GenerationContext',

    # Type mapping
    'UNMAPPED',
    'TypeMapper',
    'DEFAULT_TYPE_MAPPER',
    'map_type',

    # Classification and indexing
    'classify_fields',
    'collect_relation_keys',
    'build_model_index',

    # Naming
    'to_snake_case',
    'schema_file_name',
    'is_valid_go_identifier'
]
