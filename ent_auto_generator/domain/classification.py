"""
Field classification for the ent schema generator.

Splits an entity's fields into enum, scalar and relation buckets and drops
from the scalar bucket every field that physically carries a relation's
foreign key.
"""

from typing import List, Set

from .models import ClassifiedFieldMap, EntityInfo, FieldInfo, FieldKind


def collect_relation_keys(entity: EntityInfo) -> Set[str]:
    """
    Names of the scalar fields that back a relation on this entity.

    A relation without `relation_from_fields` is a pure association and
    contributes nothing.
    """
    keys: Set[str] = set()
    for f in entity.fields:
        if f.kind is FieldKind.RELATION:
            keys.update(f.relation_from_fields)
    return keys


def classify_fields(entity: EntityInfo) -> ClassifiedFieldMap:
    """
    Partition the fields of `entity` by kind, preserving declaration order
    within each bucket.

    Args:
        entity: Entity to classify

    Returns:
        ClassifiedFieldMap for the entity
    """
    enums: List[FieldInfo] = []
    scalars: List[FieldInfo] = []
    relations: List[FieldInfo] = []

    for f in entity.fields:
        if f.kind is FieldKind.ENUM:
            enums.append(f)
        elif f.kind is FieldKind.RELATION:
            relations.append(f)
        else:
            scalars.append(f)

    relation_keys = collect_relation_keys(entity)

    return ClassifiedFieldMap(
        entity=entity,
        enums=tuple(enums),
        scalars=tuple(f for f in scalars if f.name not in relation_keys),
        relations=tuple(relations),
        relation_keys=frozenset(relation_keys),
    )
