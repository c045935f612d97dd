"""
BrightSteps core: content packs and adaptive review.

- content: pack schema and referential-integrity validation
- review: spaced-repetition state machine, session composition, grading
- config: settings and logging setup

Nothing here performs I/O; callers supply raw pack data, persisted review
state and the current time.
"""

from brightsteps.content import ValidationIssue, ValidationResult, validate_pack
from brightsteps.review import (
    Attempt,
    ReviewState,
    adjust_support_level,
    compute_next_review_state,
    create_initial_review_state,
    matches_any_sentence,
    normalize_sentence,
    select_fact_card_session_items,
)

__version__ = "1.0.0"

__all__ = [
    "Attempt",
    "ReviewState",
    "ValidationIssue",
    "ValidationResult",
    "adjust_support_level",
    "compute_next_review_state",
    "create_initial_review_state",
    "matches_any_sentence",
    "normalize_sentence",
    "select_fact_card_session_items",
    "validate_pack",
]
