"""
Centralized constants for the ent schema generator.

Type tables, default configuration values and template names live here so
that adding a new type mapping never requires touching renderer logic.
"""

from typing import Dict, FrozenSet


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    SCHEMA_PATH = "prisma/dmmf.json"
    OUTPUT_DIR = "./ent/schema"
    PACKAGE_NAME = "schema"
    FILE_EXTENSION = ".go"
    WORKERS = 1

    RUN_GO_GENERATE = False
    GO_GENERATE_TARGET = "./ent"


# =============================================================================
# FIELD TYPE MAPPINGS
# =============================================================================

class EntFieldTypes:
    """Builder names of the ent `field` package."""

    STRING = "String"
    BOOL = "Bool"
    INT = "Int"
    INT64 = "Int64"
    FLOAT = "Float"
    TIME = "Time"
    JSON = "JSON"
    BYTES = "Bytes"
    ENUM = "Enum"


# Prisma scalar type -> ent field builder
ENT_FIELD_MAP: Dict[str, str] = {
    "String": EntFieldTypes.STRING,
    "Boolean": EntFieldTypes.BOOL,
    "Int": EntFieldTypes.INT,
    "BigInt": EntFieldTypes.INT64,
    "Float": EntFieldTypes.FLOAT,
    # ent has no arbitrary precision type
    "Decimal": EntFieldTypes.FLOAT,
    "DateTime": EntFieldTypes.TIME,
    "Json": EntFieldTypes.JSON,
    "Bytes": EntFieldTypes.BYTES,
}

# Builders that take a zero-value Go type argument after the field name
ENT_FIELD_TYPE_ARGUMENTS: Dict[str, str] = {
    EntFieldTypes.JSON: "map[string]interface{}{}",
}


# =============================================================================
# DMMF VOCABULARY
# =============================================================================

class DMMFFieldKinds:
    """Field kinds as they appear in a DMMF document."""

    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


# =============================================================================
# TEMPLATES
# =============================================================================

class Templates:
    """Template file names shipped in ent_auto_generator/templates."""

    ENT_SCHEMA = "ent_schema.go.j2"


class GoImports:
    """Import paths used in generated schema files."""

    ENT = "entgo.io/ent"
    EDGE = "entgo.io/ent/schema/edge"
    FIELD = "entgo.io/ent/schema/field"


GO_KEYWORDS: FrozenSet[str] = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
})
