from ..domain.models import FieldInfo
from .base import go_string_literal


def render_edge(f: FieldInfo) -> str:
    """
    Render a relation field as an ent edge.

    Every relation becomes a unidirectional `edge.To`. Ownership of the
    foreign key and cardinality are not inspected, and no field modifiers
    are attached.
    """
    return f"edge.To({go_string_literal(f.name)}, {f.type}.Type)"
