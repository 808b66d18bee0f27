"""
Emission driver: renders every entity of a document and hands the batch
to a persistence callback.
"""

import logging
from typing import Callable, List, Optional

from ..domain.field_mapping import TypeMapper
from ..domain.model_index import build_model_index
from ..domain.models import Document, GeneratedFile, GenerationContext
from .entities import render_entity


logger = logging.getLogger(__name__)

PersistCallback = Callable[[List[GeneratedFile]], None]


def generate_schema_files(
    document: Document,
    context: Optional[GenerationContext] = None,
) -> List[GeneratedFile]:
    """
    Render one GeneratedFile per entity, in document order.

    The ModelIndex and the type table are built once and shared by every
    entity; renderings are independent of each other.
    """
    context = context or GenerationContext()
    model_index = build_model_index(document)
    type_mapper = TypeMapper(context.type_mappings)

    files = [
        render_entity(entity, model_index, context, type_mapper)
        for entity in document.entities
    ]
    logger.debug(f"Rendered {len(files)} schema files.")
    return files


def emit_schemas(
    document: Document,
    persist: Optional[PersistCallback] = None,
    context: Optional[GenerationContext] = None,
) -> List[GeneratedFile]:
    """
    Render every entity and pass the full list to `persist` as one batch.

    Nothing is persisted if any entity fails to render.
    """
    files = generate_schema_files(document, context)
    if persist is not None:
        persist(files)
    return files
