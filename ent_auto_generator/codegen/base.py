import json
import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to the package root
TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def go_string_literal(value: str) -> str:
    """Double-quoted Go string literal. JSON string escapes are valid Go escapes."""
    return json.dumps(value, ensure_ascii=False)


def go_literal(value: Any) -> Optional[str]:
    """
    Render a default value as a Go literal.

    Returns None for shapes with no literal form (DMMF function defaults
    such as now() or autoincrement(), lists, non-finite floats).
    """
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return repr(value)
    if isinstance(value, str):
        return go_string_literal(value)
    return None


def quoted_list(values: Iterable[str]) -> str:
    """Comma-joined Go string literals, order preserved: "A","B"."""
    return ",".join(go_string_literal(v) for v in values)


@lru_cache(maxsize=None)
def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment for Go templates."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        # Go source, never HTML
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    logger.debug(f"Jinja2 environment ready, templates from {TEMPLATE_DIR}")
    return env
