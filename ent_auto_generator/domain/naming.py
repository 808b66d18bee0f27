"""
Naming convention utilities for the ent schema generator.

Model names arrive in PascalCase (sometimes with spaces) and generated
schema files are named in snake_case, the way `ent init` names them.
"""

import re

from ..constants import GO_KEYWORDS


def to_snake_case(name: str) -> str:
    """
    Convert CamelCase, PascalCase or space separated names to snake_case.

    Args:
        name: The string to convert to snake_case

    Returns:
        The converted snake_case string

    Example:
        >>> to_snake_case("GitHub")
        'git_hub'
        >>> to_snake_case("XMLHttpRequest")
        'xml_http_request'
        >>> to_snake_case("User Profile")
        'user_profile'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    # Spaces, dashes and other separators become underscores
    name = re.sub(r"[^A-Za-z0-9]+", "_", name)
    name = re.sub("_+", "_", name)
    return name.strip("_").lower()


def schema_file_name(entity_name: str, extension: str = ".go") -> str:
    """File name of the generated schema for an entity, e.g. 'git_hub.go'."""
    return f"{to_snake_case(entity_name)}{extension}"


def is_valid_go_identifier(name: str) -> bool:
    """Check if a string is a usable Go identifier (ASCII only, not a keyword)."""
    if not name:
        return False
    return re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name) is not None and name not in GO_KEYWORDS
