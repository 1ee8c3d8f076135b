from datetime import date, datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from fambul_tik.models.base import Base


class Member(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(255))
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    is_alive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    date_of_death: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint(
            "(is_alive AND date_of_death IS NULL) OR (NOT is_alive AND date_of_death IS NOT NULL)",
            name="ck_members_death_matches_alive",
        ),
        CheckConstraint(
            "date_of_death IS NULL OR date_of_death >= date_of_birth",
            name="ck_members_death_after_birth",
        ),
    )

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)


class RelationshipType(Base):
    __tablename__ = "relationship_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class Relationship(Base):
    __tablename__ = "relationships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    member_id_1: Mapped[int] = mapped_column(ForeignKey("members.id"), nullable=False)
    member_id_2: Mapped[int] = mapped_column(ForeignKey("members.id"), nullable=False)
    relationship_type_id: Mapped[int] = mapped_column(ForeignKey("relationship_types.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("member_id_1 <> member_id_2", name="ck_relationships_distinct_members"),
    )


Index("ix_relationships_member_1", Relationship.member_id_1)
Index("ix_relationships_member_2", Relationship.member_id_2)
