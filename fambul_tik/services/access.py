from __future__ import annotations

from typing import TypeVar

from sqlalchemy.orm import Session

from fambul_tik.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)

# Largest value a signed 64-bit INTEGER column can hold (SQLite, PostgreSQL BIGINT).
MAX_ID = 2**63 - 1


def get_by_id(db: Session, model: type[ModelT], row_id: int) -> ModelT | None:
    """Primary-key lookup that treats ids outside the column range as missing."""
    if not -MAX_ID - 1 <= row_id <= MAX_ID:
        return None
    return db.get(model, row_id)
