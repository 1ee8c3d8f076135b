from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from fambul_tik.models.entities import Member
from fambul_tik.services.access import get_by_id
from fambul_tik.services.errors import NotFoundError, ValidationError
from fambul_tik.services.relationships import RelationshipStore

logger = logging.getLogger(__name__)


@dataclass
class MemberFields:
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = None
    middle_name: str | None = None
    is_alive: bool | None = True
    date_of_death: date | None = None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_member_fields(fields: MemberFields) -> MemberFields:
    """
    Check member invariants and return a normalized copy.

    Names are trimmed and a blank middle name becomes None. Raises ValidationError
    naming the first offending field.
    """
    first_name = _clean(fields.first_name)
    if first_name is None:
        raise ValidationError("first_name is required", field="first_name")
    last_name = _clean(fields.last_name)
    if last_name is None:
        raise ValidationError("last_name is required", field="last_name")
    if fields.date_of_birth is None:
        raise ValidationError("date_of_birth is required", field="date_of_birth")

    is_alive = True if fields.is_alive is None else fields.is_alive
    if is_alive and fields.date_of_death is not None:
        raise ValidationError("a living member cannot have a date_of_death", field="date_of_death")
    if not is_alive and fields.date_of_death is None:
        raise ValidationError("date_of_death is required when is_alive is false", field="date_of_death")
    if fields.date_of_death is not None and fields.date_of_death < fields.date_of_birth:
        raise ValidationError("date_of_death cannot be before date_of_birth", field="date_of_death")

    return MemberFields(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=fields.date_of_birth,
        middle_name=_clean(fields.middle_name),
        is_alive=is_alive,
        date_of_death=fields.date_of_death,
    )


def _apply(member: Member, fields: MemberFields) -> None:
    member.first_name = fields.first_name
    member.middle_name = fields.middle_name
    member.last_name = fields.last_name
    member.date_of_birth = fields.date_of_birth
    member.is_alive = fields.is_alive
    member.date_of_death = fields.date_of_death


class MemberStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, member_id: int) -> Member:
        member = get_by_id(self.db, Member, member_id)
        if member is None:
            raise NotFoundError(f"member {member_id} not found", field="id")
        return member

    def list(self) -> list[Member]:
        return list(self.db.execute(select(Member).order_by(Member.id.asc())).scalars().all())

    def create(self, fields: MemberFields) -> Member:
        clean = validate_member_fields(fields)
        member = Member()
        _apply(member, clean)
        self.db.add(member)
        self.db.commit()
        self.db.refresh(member)
        logger.info("created member %s (%s)", member.id, member.full_name)
        return member

    def update(self, member_id: int, fields: MemberFields) -> Member:
        member = self.get(member_id)
        clean = validate_member_fields(fields)
        _apply(member, clean)
        self.db.commit()
        self.db.refresh(member)
        logger.info("updated member %s", member.id)
        return member

    def delete(self, member_id: int) -> int:
        """
        Delete a member together with every relationship that references it.

        The cascade and the member delete share one transaction, so no reader sees
        a relationship pointing at a removed member. Returns the cascade count.
        """
        member = self.get(member_id)
        removed = RelationshipStore(self.db).delete_for_member(member.id)
        self.db.delete(member)
        self.db.commit()
        logger.info("deleted member %s and %s relationship(s)", member_id, removed)
        return removed
