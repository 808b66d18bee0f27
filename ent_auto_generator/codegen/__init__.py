"""
ent Schema Code Generator Module

This module renders model document entities into ent schema Go source
files: field declarations, edge declarations and the per-entity file.
"""

from .fields import SKIP, render_field, render_enum_field, render_scalar_field, build_suffixes
from .edges import render_edge
from .entities import render_entity, schema_file_path
from .emitter import generate_schema_files, emit_schemas


__all__ = [
    'SKIP',
    'render_field',
    'render_enum_field',
    'render_scalar_field',
    'build_suffixes',
    'render_edge',
    'render_entity',
    'schema_file_path',
    'generate_schema_files',
    'emit_schemas'
]
