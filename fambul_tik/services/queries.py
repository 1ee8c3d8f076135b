from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from sqlalchemy import select
from sqlalchemy.orm import Session

from fambul_tik.models.entities import Member, Relationship, RelationshipType
from fambul_tik.services.errors import ConsistencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRelationship:
    relationship_id: int
    member_id_1: int
    member1_first_name: str
    member1_last_name: str
    member_id_2: int
    member2_first_name: str
    member2_last_name: str
    relationship_type_id: int
    relationship_type_name: str


def resolve_relationships(
    relationships: Iterable[Relationship],
    members_by_id: Mapping[int, Member],
    types_by_id: Mapping[int, RelationshipType],
    strict: bool = False,
) -> list[ResolvedRelationship]:
    """
    Join relationships with the display names of their members and type.

    A relationship whose references do not resolve is left out and logged, or
    raises ConsistencyError when strict is set.
    """
    resolved: list[ResolvedRelationship] = []
    for relationship in relationships:
        member_1 = members_by_id.get(relationship.member_id_1)
        member_2 = members_by_id.get(relationship.member_id_2)
        relationship_type = types_by_id.get(relationship.relationship_type_id)
        if member_1 is None or member_2 is None or relationship_type is None:
            message = (
                f"relationship {relationship.id} has unresolved references "
                f"(member_id_1={relationship.member_id_1}, member_id_2={relationship.member_id_2}, "
                f"relationship_type_id={relationship.relationship_type_id})"
            )
            if strict:
                raise ConsistencyError(message)
            logger.warning(message)
            continue
        resolved.append(
            ResolvedRelationship(
                relationship_id=relationship.id,
                member_id_1=member_1.id,
                member1_first_name=member_1.first_name,
                member1_last_name=member_1.last_name,
                member_id_2=member_2.id,
                member2_first_name=member_2.first_name,
                member2_last_name=member_2.last_name,
                relationship_type_id=relationship_type.id,
                relationship_type_name=relationship_type.name,
            )
        )
    return resolved


class QueryService:
    def __init__(self, db: Session, strict: bool = False) -> None:
        self.db = db
        self.strict = strict

    def list_relationships_resolved(self) -> list[ResolvedRelationship]:
        relationships = self.db.execute(select(Relationship).order_by(Relationship.id.asc())).scalars().all()
        members = {member.id: member for member in self.db.execute(select(Member)).scalars().all()}
        types = {item.id: item for item in self.db.execute(select(RelationshipType)).scalars().all()}
        return resolve_relationships(relationships, members, types, strict=self.strict)
