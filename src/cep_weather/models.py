"""
cep_weather.models

Request/response models exchanged over HTTP.

Responsibilities:
- Decode inbound `{"cep": ...}` bodies.
- Build the immutable weather result and its wire representation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ZipCodeRequest(BaseModel):
    # Unknown fields are ignored; a missing `cep` decodes as empty and fails validation later.
    cep: StrictStr = ""


class WeatherResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: str
    temp_c: float = Field(alias="temp_C")
    temp_f: float = Field(alias="temp_F")
    temp_k: float = Field(alias="temp_K")

    @classmethod
    def from_celsius(cls, *, city: str, temp_c: float) -> WeatherResult:
        return cls(
            city=city,
            temp_c=temp_c,
            temp_f=temp_c * 1.8 + 32,
            temp_k=temp_c + 273,
        )

    def describe(self) -> str:
        return (
            f"Weather in {self.city}: "
            f"{self.temp_c:.1f}C, {self.temp_f:.1f}F, {self.temp_k:.1f}K"
        )

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
