"""
Core domain models for the ent schema generator.

The source side (Document, EnumInfo, EntityInfo, FieldInfo) mirrors the
data model section of a DMMF document and is immutable once loaded. The
derived side (ClassifiedFieldMap, ModelIndex) is built once per run and is
read-only afterwards. GeneratedFile is the unit handed to persistence.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple


class FieldKind(Enum):
    """Categories of model fields."""

    SCALAR = "scalar"
    ENUM = "enum"
    RELATION = "relation"


@dataclass(frozen=True)
class EnumInfo:
    """A named, ordered set of symbolic values."""

    name: str
    values: Tuple[str, ...] = ()
    documentation: Optional[str] = None


@dataclass(frozen=True)
class FieldInfo:
    """
    One field of an entity.

    `type` holds a primitive name for scalars, an enum name for enum fields
    and the target entity name for relations. `default` is None when the
    source declares no default.
    """

    name: str
    kind: FieldKind
    type: str
    is_required: bool = True
    is_list: bool = False
    is_id: bool = False
    is_unique: bool = False
    default: Optional[Any] = None

    # Relation specific
    relation_name: Optional[str] = None
    relation_from_fields: Tuple[str, ...] = ()
    relation_to_fields: Tuple[str, ...] = ()

    documentation: Optional[str] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_relation(self) -> bool:
        return self.kind is FieldKind.RELATION


@dataclass(frozen=True)
class EntityInfo:
    """One data model type with its fields in declaration order."""

    name: str
    fields: Tuple[FieldInfo, ...] = ()
    db_name: Optional[str] = None
    documentation: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """The full source model description: enums and entities in document order."""

    enums: Tuple[EnumInfo, ...] = ()
    entities: Tuple[EntityInfo, ...] = ()


@dataclass(frozen=True)
class ClassifiedFieldMap:
    """
    Fields of one entity partitioned by kind.

    `scalars` never contains a field named in any relation's
    `relation_from_fields`; those keys are carried by the relation itself.
    """

    entity: EntityInfo
    enums: Tuple[FieldInfo, ...] = ()
    scalars: Tuple[FieldInfo, ...] = ()
    relations: Tuple[FieldInfo, ...] = ()
    relation_keys: FrozenSet[str] = frozenset()

    def is_relation_key(self, field_name: str) -> bool:
        return field_name in self.relation_keys


@dataclass(frozen=True)
class ModelIndex:
    """Read-only lookup tables derived from a Document."""

    enums: Mapping[str, EnumInfo] = field(default_factory=lambda: MappingProxyType({}))
    entities: Mapping[str, EntityInfo] = field(default_factory=lambda: MappingProxyType({}))
    classified: Mapping[str, ClassifiedFieldMap] = field(default_factory=lambda: MappingProxyType({}))

    def get_enum(self, name: str) -> Optional[EnumInfo]:
        return self.enums.get(name)

    def get_entity(self, name: str) -> Optional[EntityInfo]:
        return self.entities.get(name)

    def get_classified(self, entity_name: str) -> Optional[ClassifiedFieldMap]:
        return self.classified.get(entity_name)


@dataclass(frozen=True)
class GeneratedFile:
    """A rendered schema file waiting to be written."""

    path: Path
    content: str
    entity_name: Optional[str] = None


@dataclass(frozen=True)
class GenerationContext:
    """
    Rendering options shared by every entity of a run.

    `type_mappings` extends or overrides the built-in type table.
    """

    output_dir: Path = Path("./ent/schema")
    package_name: str = "schema"
    file_extension: str = ".go"
    type_mappings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
