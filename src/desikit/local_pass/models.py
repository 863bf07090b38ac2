"""Data models for the local train pass."""
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class Passenger(BaseModel):
    """Pydantic schema for a passenger record."""
    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(description="Passenger name, printed upper-cased")
    from_: StrictStr = Field(alias="from", description="Boarding station")
    to: StrictStr = Field(description="Destination station")
    class_type: StrictStr = Field(alias="classType", description="first or second")

    @field_validator("name", "from_", "to")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("class_type")
    @classmethod
    def _normalize_class(cls, value: str) -> str:
        return value.lower()
