from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnimalCreate(BaseModel):
    type: str
    name: str
    weight: float = Field(
        gt=0, allow_inf_nan=False, description="Animal weight must be greater than zero"
    )

    @field_validator("type", "name")
    @classmethod
    def ensure_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field is required")
        return v


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None
    kennel_id: int | None
    type: str
    name: str
    weight: float
