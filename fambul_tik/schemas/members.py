from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator


class MemberPayload(BaseModel):
    # Shape only: required fields and date rules are enforced by MemberStore.
    # dob/dod are accepted on input only; responses use the full field names.
    first_name: str | None = Field(default=None, max_length=255)
    middle_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    date_of_birth: date | None = Field(default=None, validation_alias=AliasChoices("date_of_birth", "dob"))
    is_alive: bool | None = None
    date_of_death: date | None = Field(default=None, validation_alias=AliasChoices("date_of_death", "dod"))

    @field_validator("date_of_birth", "date_of_death", mode="before")
    @classmethod
    def blank_date_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class MemberResponse(BaseModel):
    id: int
    first_name: str
    middle_name: str | None
    last_name: str
    full_name: str
    date_of_birth: date
    is_alive: bool
    date_of_death: date | None
    age: int
    created_at: datetime | None = None


class MemberDeleteResponse(BaseModel):
    message: str
    deleted_relationships: int
