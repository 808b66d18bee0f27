"""
Entity rendering: one complete ent schema file per model.
"""

import logging
from pathlib import Path
from typing import List, Optional

from jinja2 import TemplateError

from ..constants import Templates
from ..domain.classification import classify_fields
from ..domain.field_mapping import TypeMapper
from ..domain.models import EntityInfo, GeneratedFile, GenerationContext, ModelIndex
from ..domain.naming import schema_file_name
from ..exceptions import CodeGenerationError
from .base import setup_jinja_env
from .edges import render_edge
from .fields import SKIP, render_field


logger = logging.getLogger(__name__)


def schema_file_path(entity_name: str, context: GenerationContext) -> Path:
    """Deterministic output path of an entity's schema file."""
    return Path(context.output_dir) / schema_file_name(entity_name, context.file_extension)


def render_entity(
    entity: EntityInfo,
    model_index: ModelIndex,
    context: Optional[GenerationContext] = None,
    type_mapper: Optional[TypeMapper] = None,
) -> GeneratedFile:
    """
    Render the ent schema file of one entity.

    Args:
        entity: Entity to render
        model_index: Index of the whole document
        context: Output options (package name, output directory, extension)
        type_mapper: Type table; built from context.type_mappings if omitted

    Returns:
        GeneratedFile with the target path and Go source

    Raises:
        MissingEnumDefinitionError: if an enum field references an unknown enum
        CodeGenerationError: if the template fails to render
    """
    context = context or GenerationContext()
    if type_mapper is None:
        type_mapper = TypeMapper(context.type_mappings)

    classified = model_index.get_classified(entity.name) or classify_fields(entity)

    edge_list: List[str] = [render_edge(f) for f in classified.relations]

    field_list: List[str] = []
    for f in entity.fields:
        fragment = render_field(f, classified, model_index, type_mapper)
        if fragment is not SKIP:
            field_list.append(fragment)

    try:
        template = setup_jinja_env().get_template(Templates.ENT_SCHEMA)
        source = template.render(
            package_name=context.package_name,
            name=entity.name,
            fields=field_list,
            edges=edge_list,
        )
    except TemplateError as e:
        raise CodeGenerationError(
            f"Failed to render schema for '{entity.name}': {e}",
            entity=entity.name,
            template=Templates.ENT_SCHEMA,
        ) from e

    logger.debug(f"Rendered '{entity.name}': {len(field_list)} fields, {len(edge_list)} edges.")

    return GeneratedFile(
        path=schema_file_path(entity.name, context),
        content=source,
        entity_name=entity.name,
    )
