"""
Review State - per-item scheduling state.

One ReviewState exists per item per pack. It is created on first exposure
and replaced (never mutated) after each graded attempt. Persistence is the
caller's concern; ``to_dict``/``from_dict`` give the record shape it stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal, NamedTuple

SupportLevel = Literal[0, 1, 2, 3]

MIN_SUPPORT_LEVEL: SupportLevel = 0
MAX_SUPPORT_LEVEL: SupportLevel = 3


class Attempt(NamedTuple):
    """The graded outcome of one attempt, before it is timestamped."""

    correct: bool
    hints_used: int = 0


@dataclass(frozen=True)
class ReviewResult:
    """One graded attempt."""

    correct: bool
    hints_used: int
    reviewed_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "correct": self.correct,
            "hintsUsed": self.hints_used,
            "reviewedAt": self.reviewed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReviewResult:
        return cls(
            correct=bool(data["correct"]),
            hints_used=int(data["hintsUsed"]),
            reviewed_at=datetime.fromisoformat(data["reviewedAt"]),
        )


@dataclass(frozen=True)
class ReviewState:
    """Spaced-repetition state for a single item."""

    item_id: str
    due_at: datetime
    interval_days: int = 0
    streak: int = 0  # Consecutive correct answers
    support_level: SupportLevel = MAX_SUPPORT_LEVEL  # 0 = no help, 3 = max help
    last_result: ReviewResult | None = None

    def is_due(self, now: datetime) -> bool:
        """Check if this item is due for review at ``now``."""
        return self.due_at <= now

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase record shape used by persistence."""
        data: dict[str, Any] = {
            "itemId": self.item_id,
            "dueAt": self.due_at.isoformat(),
            "intervalDays": self.interval_days,
            "streak": self.streak,
            "supportLevel": self.support_level,
        }
        if self.last_result is not None:
            data["lastResult"] = self.last_result.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReviewState:
        """Rebuild a state from a persisted record. Raises KeyError/ValueError if malformed."""
        support_level = int(data["supportLevel"])
        if not MIN_SUPPORT_LEVEL <= support_level <= MAX_SUPPORT_LEVEL:
            raise ValueError(f"Support level out of range: {support_level}")

        last_result = data.get("lastResult")
        return cls(
            item_id=str(data["itemId"]),
            due_at=datetime.fromisoformat(data["dueAt"]),
            interval_days=int(data["intervalDays"]),
            streak=int(data["streak"]),
            support_level=support_level,  # type: ignore[arg-type]
            last_result=ReviewResult.from_dict(last_result) if last_result else None,
        )
