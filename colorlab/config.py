from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


Direction = Literal["lab2xyz", "xyz2lab"]


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class BatchConfig(StrictModel):
    direction: Direction
    colors: list[
        tuple[float, float, float] | tuple[float, float, float, float]
    ] = Field(
        description="three components, optionally followed by alpha",
    )
    precision: int = Field(default=4, ge=0, le=17)
