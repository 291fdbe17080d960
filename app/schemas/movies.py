from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProducerInterval(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    producer: str
    interval: int = Field(..., gt=0)
    previous_win: int = Field(..., alias="previousWin")
    following_win: int = Field(..., alias="followingWin")


class PrizeIntervalsResponse(BaseModel):
    min: List[ProducerInterval] = Field(default_factory=list)
    max: List[ProducerInterval] = Field(default_factory=list)


class MovieOut(BaseModel):
    title: str
    year: int
    studios: str
    producers: List[str]
    winner: bool


class ImportRequest(BaseModel):
    paths: List[str] = Field(default_factory=list)
    csv_text: List[str] = Field(default_factory=list)
    delimiter: str = Field(default=";", min_length=1, max_length=1)

    @model_validator(mode="after")
    def ensure_payload(self) -> "ImportRequest":
        if not self.paths and not self.csv_text:
            raise ValueError(
                "Provide at least one file path or CSV text to import")
        return self


class SkippedRowOut(BaseModel):
    source: str
    line: int
    reason: str


class ImportResponse(BaseModel):
    imported: int
    skipped: List[SkippedRowOut]
