"""
Type mapping domain logic for the ent schema generator.

Source primitive type names are looked up in a static table. Names outside
the table are UNMAPPED, which callers treat as "skip this field".
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..constants import ENT_FIELD_MAP, ENT_FIELD_TYPE_ARGUMENTS


UNMAPPED = None


class TypeMapper:
    """
    Maps source primitive type names to ent field builder names.

    Extra entries extend or override the built-in table.
    """

    def __init__(self, extra_mappings: Optional[Mapping[str, str]] = None):
        table: Dict[str, str] = dict(ENT_FIELD_MAP)
        if extra_mappings:
            table.update(extra_mappings)
        self._table = MappingProxyType(table)

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def map_type(self, source_type: str) -> Optional[str]:
        """Return the ent builder for `source_type`, or UNMAPPED."""
        return self._table.get(source_type, UNMAPPED)

    def type_argument(self, target_type: str) -> str:
        """Zero-value argument the builder needs at declaration time, or ''."""
        return ENT_FIELD_TYPE_ARGUMENTS.get(target_type, "")


DEFAULT_TYPE_MAPPER = TypeMapper()


def map_type(source_type: str) -> Optional[str]:
    """Map a source type name using the built-in table only."""
    return DEFAULT_TYPE_MAPPER.map_type(source_type)
