"""
DMMF introspection.

Reads a Prisma DMMF (Data Model Meta Format) JSON dump and converts its
data model section into the immutable Document used by the generator.
The DMMF is produced by Prisma tooling; this module does no parsing of
schema.prisma itself.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ent_auto_generator.constants import DMMFFieldKinds
from ent_auto_generator.domain.models import (
    Document,
    EntityInfo,
    EnumInfo,
    FieldInfo,
    FieldKind,
)
from ent_auto_generator.exceptions import SchemaLoadError


logger = logging.getLogger(__name__)


_KIND_MAP = {
    DMMFFieldKinds.SCALAR: FieldKind.SCALAR,
    DMMFFieldKinds.ENUM: FieldKind.ENUM,
    DMMFFieldKinds.OBJECT: FieldKind.RELATION,
    # Unsupported("...") columns keep a type name no mapper knows
    DMMFFieldKinds.UNSUPPORTED: FieldKind.SCALAR,
}


def load_dmmf(schema_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a DMMF JSON dump from disk."""
    path = Path(schema_path)
    if not path.is_file():
        raise SchemaLoadError(f"DMMF file not found: {path}", schema_path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"DMMF file is not valid JSON: {e}", schema_path=str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Could not read DMMF file: {e}", schema_path=str(path)) from e

    if not isinstance(raw, dict):
        raise SchemaLoadError(
            f"DMMF root must be an object, got {type(raw).__name__}",
            schema_path=str(path),
        )
    return raw


def _parse_enum(raw: Dict[str, Any]) -> EnumInfo:
    values = []
    for value in raw.get("values", []):
        # Older dumps list bare names instead of {"name": ..., "dbName": ...}
        values.append(value if isinstance(value, str) else value["name"])
    return EnumInfo(
        name=raw["name"],
        values=tuple(values),
        documentation=raw.get("documentation"),
    )


def _parse_field(raw: Dict[str, Any], model_name: str) -> FieldInfo:
    dmmf_kind = raw["kind"]
    kind = _KIND_MAP.get(dmmf_kind)
    if kind is None:
        raise SchemaLoadError(
            f"Unknown field kind '{dmmf_kind}' on '{model_name}.{raw.get('name')}'",
            context={'model': model_name, 'field': raw.get('name')},
        )

    return FieldInfo(
        name=raw["name"],
        kind=kind,
        type=raw["type"],
        is_required=bool(raw.get("isRequired", False)),
        is_list=bool(raw.get("isList", False)),
        is_id=bool(raw.get("isId", False)),
        is_unique=bool(raw.get("isUnique", False)),
        default=raw.get("default"),
        relation_name=raw.get("relationName"),
        relation_from_fields=tuple(raw.get("relationFromFields") or ()),
        relation_to_fields=tuple(raw.get("relationToFields") or ()),
        documentation=raw.get("documentation"),
    )


def _parse_entity(raw: Dict[str, Any]) -> EntityInfo:
    name = raw["name"]
    return EntityInfo(
        name=name,
        fields=tuple(_parse_field(f, name) for f in raw.get("fields", [])),
        db_name=raw.get("dbName"),
        documentation=raw.get("documentation"),
    )


def parse_document(raw: Dict[str, Any]) -> Document:
    """
    Convert a DMMF dictionary into a Document.

    Accepts the full DMMF (with a top-level "datamodel" key) or the bare
    datamodel object.

    Raises:
        SchemaLoadError: if required keys are missing or have the wrong shape
    """
    datamodel = raw.get("datamodel", raw)

    try:
        enums = tuple(_parse_enum(e) for e in datamodel.get("enums", []))
        entities = tuple(_parse_entity(m) for m in datamodel["models"])
    except KeyError as e:
        raise SchemaLoadError(f"DMMF data model is missing required key {e}") from e
    except (TypeError, AttributeError) as e:
        raise SchemaLoadError(f"DMMF data model has an unexpected structure: {e}") from e

    logger.debug(f"Parsed DMMF: {len(entities)} models, {len(enums)} enums.")
    return Document(enums=enums, entities=entities)


def introspect_schema(schema_path: Union[str, Path]) -> Document:
    """Load and parse the DMMF dump at `schema_path`."""
    return parse_document(load_dmmf(schema_path))
