from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from fambul_tik.models.entities import RelationshipType
from fambul_tik.services.access import get_by_id
from fambul_tik.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def seed_relationship_types(db: Session, names: Iterable[str]) -> int:
    """Insert any missing relationship type names. Existing rows keep their ids."""
    existing = set(db.execute(select(RelationshipType.name)).scalars().all())
    added = 0
    for name in names:
        name = name.strip()
        if not name or name in existing:
            continue
        db.add(RelationshipType(name=name))
        existing.add(name)
        added += 1
    db.commit()
    if added:
        logger.info("seeded %s relationship type(s)", added)
    return added


class RelationshipTypeCatalog:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, type_id: int) -> RelationshipType:
        relationship_type = get_by_id(self.db, RelationshipType, type_id)
        if relationship_type is None:
            raise NotFoundError(f"relationship type {type_id} not found", field="relationship_type_id")
        return relationship_type

    def exists(self, type_id: int) -> bool:
        return get_by_id(self.db, RelationshipType, type_id) is not None

    def list(self) -> list[RelationshipType]:
        return list(self.db.execute(select(RelationshipType).order_by(RelationshipType.id.asc())).scalars().all())
