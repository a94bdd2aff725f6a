from pydantic import BaseModel, ConfigDict

from tire_pickup.Core.Models.base import CamelModel


class RequestDTO(CamelModel):
    """Form payloads: unknown keys are dropped and numeric values accepted for text fields."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class APIErrorResponse(BaseModel):
    error: str


class OkResponse(BaseModel):
    ok: bool = True
