"""
Model index builder.

Builds the three lookup tables used while rendering: enums by name,
entities by name and classified field maps by entity name. Each table is
filled by a single pass into a local dict and then frozen behind a
read-only mapping.
"""

import logging
from types import MappingProxyType
from typing import Dict

from .classification import classify_fields
from .models import ClassifiedFieldMap, Document, EntityInfo, EnumInfo, ModelIndex


logger = logging.getLogger(__name__)


def build_model_index(document: Document) -> ModelIndex:
    """
    Build the read-only ModelIndex for a document.

    Duplicate names are not rejected: the last definition wins and a
    warning is logged.
    """
    enums: Dict[str, EnumInfo] = {}
    for enum in document.enums:
        if enum.name in enums:
            logger.warning(f"Duplicate enum '{enum.name}' in model document. Last definition wins.")
        enums[enum.name] = enum

    entities: Dict[str, EntityInfo] = {}
    for entity in document.entities:
        if entity.name in entities:
            logger.warning(f"Duplicate model '{entity.name}' in model document. Last definition wins.")
        entities[entity.name] = entity

    classified: Dict[str, ClassifiedFieldMap] = {
        name: classify_fields(entity) for name, entity in entities.items()
    }

    logger.debug(f"Indexed {len(entities)} models and {len(enums)} enums.")

    return ModelIndex(
        enums=MappingProxyType(enums),
        entities=MappingProxyType(entities),
        classified=MappingProxyType(classified),
    )
