"""
Field declaration rendering.

Turns one scalar or enum field into an ent `field.X(...)` builder chain.
Relations are never rendered here, see codegen.edges.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..domain.field_mapping import DEFAULT_TYPE_MAPPER, UNMAPPED, TypeMapper
from ..domain.models import ClassifiedFieldMap, FieldInfo, FieldKind, ModelIndex
from ..exceptions import MissingEnumDefinitionError
from .base import go_literal, go_string_literal, quoted_list


logger = logging.getLogger(__name__)

SKIP = None


def optional_suffix(f: FieldInfo) -> List[str]:
    if f.is_required:
        return []
    return [".Optional()"]


def default_suffix(f: FieldInfo) -> List[str]:
    if not f.has_default:
        return []

    literal = go_literal(f.default)
    if literal is None:
        logger.debug(f"Omitting unsupported default {f.default!r} on field '{f.name}'.")
        return []
    return [f".Default({literal})"]


# Applied in this order: .Optional() always precedes .Default(...)
SUFFIX_BUILDERS: Tuple[Callable[[FieldInfo], List[str]], ...] = (
    optional_suffix,
    default_suffix,
)


def build_suffixes(f: FieldInfo) -> List[str]:
    """Ordered modifier suffixes for a field."""
    suffixes: List[str] = []
    for builder in SUFFIX_BUILDERS:
        suffixes.extend(builder(f))
    return suffixes


def render_enum_field(f: FieldInfo, model_index: ModelIndex, entity_name: Optional[str] = None) -> str:
    """
    Render an enum field with the full ordered value list of its enum.

    Raises:
        MissingEnumDefinitionError: if the enum is not in the index
    """
    enum = model_index.get_enum(f.type)
    if enum is None:
        raise MissingEnumDefinitionError(f.type, entity=entity_name, field=f.name)

    values = quoted_list(enum.values)
    return f"field.Enum({go_string_literal(f.name)}).Values({values}){''.join(build_suffixes(f))}"


def render_scalar_field(
    f: FieldInfo,
    classified: ClassifiedFieldMap,
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> Optional[str]:
    """Render a scalar field, or SKIP for relation keys and unmapped types."""
    entity_name = classified.entity.name

    if classified.is_relation_key(f.name):
        logger.debug(f"Skipping '{entity_name}.{f.name}': carried by a relation.")
        return SKIP

    target_type = type_mapper.map_type(f.type)
    if target_type is UNMAPPED:
        logger.debug(f"Skipping '{entity_name}.{f.name}': type '{f.type}' has no ent mapping.")
        return SKIP

    args = go_string_literal(f.name)
    type_argument = type_mapper.type_argument(target_type)
    if type_argument:
        args = f"{args}, {type_argument}"

    return f"field.{target_type}({args}){''.join(build_suffixes(f))}"


def render_field(
    f: FieldInfo,
    classified: ClassifiedFieldMap,
    model_index: ModelIndex,
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> Optional[str]:
    """
    Render one field declaration fragment.

    Args:
        f: Field to render
        classified: Classified field map of the owning entity
        model_index: Index used for enum lookups
        type_mapper: Type table for scalar fields

    Returns:
        The declaration fragment, or SKIP
    """
    if f.kind is FieldKind.RELATION:
        return SKIP

    if f.kind is FieldKind.ENUM:
        return render_enum_field(f, model_index, classified.entity.name)

    return render_scalar_field(f, classified, type_mapper)
