from __future__ import annotations

import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from fambul_tik.models.entities import Member, Relationship
from fambul_tik.services.access import MAX_ID, get_by_id
from fambul_tik.services.errors import NotFoundError, ValidationError
from fambul_tik.services.relationship_types import RelationshipTypeCatalog

logger = logging.getLogger(__name__)


class RelationshipStore:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.catalog = RelationshipTypeCatalog(db)

    def _validate(self, member_id_1: int | None, member_id_2: int | None, relationship_type_id: int | None) -> None:
        for field, value in (
            ("member_id_1", member_id_1),
            ("member_id_2", member_id_2),
            ("relationship_type_id", relationship_type_id),
        ):
            if value is None:
                raise ValidationError(f"{field} is required", field=field)

        # Reported ahead of any lookup, even when the ids do not exist.
        if member_id_1 == member_id_2:
            raise ValidationError("a member cannot have a relationship with themselves", field="member_id_2")

        for field, member_id in (("member_id_1", member_id_1), ("member_id_2", member_id_2)):
            if get_by_id(self.db, Member, member_id) is None:
                raise NotFoundError(f"member {member_id} not found", field=field)

        if not self.catalog.exists(relationship_type_id):
            raise NotFoundError(
                f"relationship type {relationship_type_id} not found", field="relationship_type_id"
            )

    def get(self, relationship_id: int) -> Relationship:
        relationship = get_by_id(self.db, Relationship, relationship_id)
        if relationship is None:
            raise NotFoundError(f"relationship {relationship_id} not found", field="id")
        return relationship

    def list(self) -> list[Relationship]:
        return list(self.db.execute(select(Relationship).order_by(Relationship.id.asc())).scalars().all())

    def create(self, member_id_1: int | None, member_id_2: int | None, relationship_type_id: int | None) -> Relationship:
        self._validate(member_id_1, member_id_2, relationship_type_id)
        relationship = Relationship(
            member_id_1=member_id_1,
            member_id_2=member_id_2,
            relationship_type_id=relationship_type_id,
        )
        self.db.add(relationship)
        self.db.commit()
        self.db.refresh(relationship)
        logger.info(
            "created relationship %s: %s -[%s]-> %s",
            relationship.id,
            member_id_1,
            relationship_type_id,
            member_id_2,
        )
        return relationship

    def update(
        self,
        relationship_id: int,
        member_id_1: int | None,
        member_id_2: int | None,
        relationship_type_id: int | None,
    ) -> Relationship:
        relationship = self.get(relationship_id)
        self._validate(member_id_1, member_id_2, relationship_type_id)
        relationship.member_id_1 = member_id_1
        relationship.member_id_2 = member_id_2
        relationship.relationship_type_id = relationship_type_id
        self.db.commit()
        self.db.refresh(relationship)
        logger.info("updated relationship %s", relationship.id)
        return relationship

    def delete(self, relationship_id: int) -> None:
        relationship = self.get(relationship_id)
        self.db.delete(relationship)
        self.db.commit()
        logger.info("deleted relationship %s", relationship_id)

    def delete_for_member(self, member_id: int) -> int:
        """Remove every edge touching member_id. The caller owns the commit."""
        if not -MAX_ID - 1 <= member_id <= MAX_ID:
            return 0
        result = self.db.execute(
            delete(Relationship)
            .where(or_(Relationship.member_id_1 == member_id, Relationship.member_id_2 == member_id))
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
