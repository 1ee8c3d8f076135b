from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fambul_tik.core.db import get_db
from fambul_tik.models.entities import Member
from fambul_tik.schemas.members import MemberDeleteResponse, MemberPayload, MemberResponse
from fambul_tik.services.age import member_age
from fambul_tik.services.members import MemberFields, MemberStore

router = APIRouter(prefix="/api/members", tags=["members"])


def _to_fields(payload: MemberPayload) -> MemberFields:
    return MemberFields(
        first_name=payload.first_name,
        middle_name=payload.middle_name,
        last_name=payload.last_name,
        date_of_birth=payload.date_of_birth,
        is_alive=payload.is_alive,
        date_of_death=payload.date_of_death,
    )


def _to_member_response(member: Member) -> MemberResponse:
    return MemberResponse(
        id=member.id,
        first_name=member.first_name,
        middle_name=member.middle_name,
        last_name=member.last_name,
        full_name=member.full_name,
        date_of_birth=member.date_of_birth,
        is_alive=member.is_alive,
        date_of_death=member.date_of_death,
        age=member_age(member),
        created_at=member.created_at,
    )


@router.get("", response_model=list[MemberResponse])
def list_members(db: Session = Depends(get_db)):
    return [_to_member_response(member) for member in MemberStore(db).list()]


@router.post("", response_model=MemberResponse, status_code=201)
def create_member(payload: MemberPayload, db: Session = Depends(get_db)):
    member = MemberStore(db).create(_to_fields(payload))
    return _to_member_response(member)


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return _to_member_response(MemberStore(db).get(member_id))


@router.put("/{member_id}", response_model=MemberResponse)
def update_member(member_id: int, payload: MemberPayload, db: Session = Depends(get_db)):
    member = MemberStore(db).update(member_id, _to_fields(payload))
    return _to_member_response(member)


@router.delete("/{member_id}", response_model=MemberDeleteResponse)
def delete_member(member_id: int, db: Session = Depends(get_db)):
    removed = MemberStore(db).delete(member_id)
    return MemberDeleteResponse(message=f"member {member_id} deleted", deleted_relationships=removed)
