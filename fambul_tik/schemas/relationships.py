from pydantic import BaseModel


class RelationshipTypeResponse(BaseModel):
    id: int
    name: str


class RelationshipPayload(BaseModel):
    member_id_1: int | None = None
    member_id_2: int | None = None
    relationship_type_id: int | None = None


class RelationshipResponse(BaseModel):
    id: int
    member_id_1: int
    member_id_2: int
    relationship_type_id: int


class ResolvedRelationshipResponse(BaseModel):
    relationship_id: int
    member_id_1: int
    member1_first_name: str
    member1_last_name: str
    member_id_2: int
    member2_first_name: str
    member2_last_name: str
    relationship_type_id: int
    relationship_type_name: str


class MessageResponse(BaseModel):
    message: str
