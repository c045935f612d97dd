"""
Ladder Spaced Repetition Scheduler with Adaptive Support.

Implements:
- A fixed interval ladder (no per-item ease factor)
- Immediate re-exposure after a miss
- Support level adaptation, orthogonal to the interval

Ladder (days, indexed by consecutive-correct streak):
1, 3, 7, 14, 30, 45, 60 (then stays at 60)

Support levels:
0 - No help
1 - Light hints
2 - Strong hints
3 - Maximum scaffolding (new items start here)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from loguru import logger

from .state import MAX_SUPPORT_LEVEL, MIN_SUPPORT_LEVEL, Attempt, ReviewResult, ReviewState, SupportLevel

DEFAULT_LADDER_DAYS = (1, 3, 7, 14, 30, 45, 60)


def check_ladder_days(ladder_days: tuple[int, ...]) -> tuple[int, ...]:
    """Raise ValueError unless the ladder is non-empty, positive and strictly increasing."""
    if not ladder_days:
        raise ValueError("ladder_days must not be empty")
    if any(days <= 0 for days in ladder_days):
        raise ValueError("ladder_days must be positive")
    if any(later <= earlier for earlier, later in zip(ladder_days, ladder_days[1:])):
        raise ValueError("ladder_days must be strictly increasing")
    return ladder_days


@dataclass(frozen=True)
class SchedulerConfig:
    """Configuration for the ladder scheduler."""

    ladder_days: tuple[int, ...] = DEFAULT_LADDER_DAYS
    initial_support_level: SupportLevel = MAX_SUPPORT_LEVEL
    miss_interval_days: int = 1  # Days until re-exposure after a miss

    def __post_init__(self):
        check_ladder_days(self.ladder_days)
        if self.miss_interval_days <= 0:
            raise ValueError("miss_interval_days must be positive")


def adjust_support_level(support_level: SupportLevel, correct: bool, hints_used: int) -> SupportLevel:
    """
    Adapt scaffolding to one graded attempt.

    - Correct without hints: one level less help (floor 0)
    - Incorrect: one level more help (ceiling 3)
    - Correct with hints: unchanged, only unaided success counts as mastery
    """
    if correct and hints_used == 0:
        return max(MIN_SUPPORT_LEVEL, support_level - 1)  # type: ignore[return-value]

    if not correct:
        return min(MAX_SUPPORT_LEVEL, support_level + 1)  # type: ignore[return-value]

    return support_level


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReviewScheduler:
    """
    Computes review state transitions.

    The state is the (streak, interval_days, support_level) triple; a
    transition is driven only by ``correct`` and ``hints_used`` of one
    attempt. There is no terminal state.
    """

    def __init__(self, config: SchedulerConfig | None = None):
        """
        Initialize the scheduler.

        Args:
            config: Custom configuration (uses defaults if None)
        """
        self.config = config or SchedulerConfig()

    def create_initial_state(self, item_id: str, now: datetime | None = None) -> ReviewState:
        """State for an item on first exposure: due immediately, full support."""
        return ReviewState(
            item_id=item_id,
            due_at=now if now is not None else _utcnow(),
            interval_days=0,
            streak=0,
            support_level=self.config.initial_support_level,
        )

    def next_interval(self, streak: int) -> int:
        """Interval in days for a streak of consecutive correct answers."""
        if streak <= 0:
            return self.config.miss_interval_days
        ladder = self.config.ladder_days
        return ladder[min(streak - 1, len(ladder) - 1)]

    def compute_next_state(
        self,
        current: ReviewState,
        attempt: Attempt,
        now: datetime | None = None,
    ) -> ReviewState:
        """
        Calculate the state after one graded attempt.

        Args:
            current: State before the attempt (not modified)
            attempt: Whether the attempt was correct and how many hints it used
            now: Time of the attempt (defaults to current UTC time)

        Returns:
            New ReviewState with updated streak, interval, due date and support
        """
        if now is None:
            now = _utcnow()
        correct, hints_used = attempt

        streak = current.streak + 1 if correct else 0
        interval_days = self.next_interval(streak)

        next_state = ReviewState(
            item_id=current.item_id,
            due_at=now + timedelta(days=interval_days),
            interval_days=interval_days,
            streak=streak,
            support_level=adjust_support_level(current.support_level, correct, hints_used),
            last_result=ReviewResult(correct=correct, hints_used=hints_used, reviewed_at=now),
        )

        logger.debug(
            f"Review of {current.item_id}: correct={correct}, hints={hints_used}, "
            f"streak={next_state.streak}, interval={interval_days}d, support={next_state.support_level}"
        )

        return next_state


_default_scheduler = ReviewScheduler()


def create_initial_review_state(item_id: str, now: datetime | None = None) -> ReviewState:
    """Create the first-exposure state for an item using the default ladder."""
    return _default_scheduler.create_initial_state(item_id, now)


def compute_next_review_state(
    current: ReviewState,
    attempt: Attempt,
    now: datetime | None = None,
) -> ReviewState:
    """Compute the next state for an item using the default ladder."""
    return _default_scheduler.compute_next_state(current, attempt, now)
