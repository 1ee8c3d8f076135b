from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fambul_tik.core.config import settings
from fambul_tik.core.db import get_db
from fambul_tik.models.entities import Relationship
from fambul_tik.schemas.relationships import (
    MessageResponse,
    RelationshipPayload,
    RelationshipResponse,
    ResolvedRelationshipResponse,
)
from fambul_tik.services.queries import QueryService
from fambul_tik.services.relationships import RelationshipStore

router = APIRouter(prefix="/api/relationships", tags=["relationships"])


def _to_relationship_response(relationship: Relationship) -> RelationshipResponse:
    return RelationshipResponse(
        id=relationship.id,
        member_id_1=relationship.member_id_1,
        member_id_2=relationship.member_id_2,
        relationship_type_id=relationship.relationship_type_id,
    )


@router.get("", response_model=list[ResolvedRelationshipResponse])
def list_relationships(db: Session = Depends(get_db)):
    rows = QueryService(db, strict=settings.strict_consistency).list_relationships_resolved()
    return [ResolvedRelationshipResponse(**asdict(row)) for row in rows]


@router.post("", response_model=RelationshipResponse, status_code=201)
def create_relationship(payload: RelationshipPayload, db: Session = Depends(get_db)):
    relationship = RelationshipStore(db).create(
        payload.member_id_1,
        payload.member_id_2,
        payload.relationship_type_id,
    )
    return _to_relationship_response(relationship)


@router.get("/{relationship_id}", response_model=RelationshipResponse)
def get_relationship(relationship_id: int, db: Session = Depends(get_db)):
    return _to_relationship_response(RelationshipStore(db).get(relationship_id))


@router.put("/{relationship_id}", response_model=RelationshipResponse)
def update_relationship(relationship_id: int, payload: RelationshipPayload, db: Session = Depends(get_db)):
    relationship = RelationshipStore(db).update(
        relationship_id,
        payload.member_id_1,
        payload.member_id_2,
        payload.relationship_type_id,
    )
    return _to_relationship_response(relationship)


@router.delete("/{relationship_id}", response_model=MessageResponse)
def delete_relationship(relationship_id: int, db: Session = Depends(get_db)):
    RelationshipStore(db).delete(relationship_id)
    return MessageResponse(message=f"relationship {relationship_id} deleted")
