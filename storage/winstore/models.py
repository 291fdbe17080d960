"""Dataclasses representing stored award records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class WinRecord:
    """One normalised award entry with its producer credits."""

    title: str
    year: int
    studios: str = ""
    producers: Tuple[str, ...] = field(default_factory=tuple)
    winner: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "year": self.year,
            "studios": self.studios,
            "producers": list(self.producers),
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "WinRecord":
        return cls(
            title=payload.get("title", ""),
            year=int(payload["year"]),
            studios=payload.get("studios", ""),
            producers=tuple(payload.get("producers", [])),
            winner=bool(payload.get("winner", False)),
        )
