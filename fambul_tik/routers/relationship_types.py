from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fambul_tik.core.db import get_db
from fambul_tik.schemas.relationships import RelationshipTypeResponse
from fambul_tik.services.relationship_types import RelationshipTypeCatalog

router = APIRouter(prefix="/api/relationship_types", tags=["relationship types"])


@router.get("", response_model=list[RelationshipTypeResponse])
def list_relationship_types(db: Session = Depends(get_db)):
    return [
        RelationshipTypeResponse(id=item.id, name=item.name)
        for item in RelationshipTypeCatalog(db).list()
    ]


@router.get("/{type_id}", response_model=RelationshipTypeResponse)
def get_relationship_type(type_id: int, db: Session = Depends(get_db)):
    item = RelationshipTypeCatalog(db).get(type_id)
    return RelationshipTypeResponse(id=item.id, name=item.name)
