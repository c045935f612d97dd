"""
Review Module - scheduling, session composition and response checks.

Components:
- state: ReviewState / ReviewResult records and the Attempt input
- scheduler: interval ladder and support level adaptation
- composer: due-weighted session selection and session sizing
- matching: sentence normalization and response grading
- pronunciation: vocab pronunciation scoring from a transcript

Everything here is pure: callers pass ``now`` and persisted state in, and
persist the returned state themselves.
"""

from brightsteps.review.composer import (
    SessionSlot,
    build_fact_card_session_item_order,
    build_picture_phrase_session_item_order,
    estimate_item_count,
    get_default_review_duration,
    get_review_duration_options,
    partition_due_and_new,
    select_fact_card_session_items,
    select_session_items,
)
from brightsteps.review.matching import (
    check_picture_phrase_response,
    check_picture_phrase_response_for_group,
    grade_fact_card_response,
    matches_any_sentence,
    normalize_sentence,
    to_sentence,
)
from brightsteps.review.pronunciation import PronunciationCheckResult, SyllableMatch, check_vocab_pronunciation
from brightsteps.review.scheduler import (
    ReviewScheduler,
    SchedulerConfig,
    adjust_support_level,
    compute_next_review_state,
    create_initial_review_state,
)
from brightsteps.review.state import Attempt, ReviewResult, ReviewState, SupportLevel

__all__ = [
    # State
    "Attempt",
    "ReviewResult",
    "ReviewState",
    "SupportLevel",
    # Scheduler
    "ReviewScheduler",
    "SchedulerConfig",
    "adjust_support_level",
    "compute_next_review_state",
    "create_initial_review_state",
    # Composer
    "SessionSlot",
    "build_fact_card_session_item_order",
    "build_picture_phrase_session_item_order",
    "estimate_item_count",
    "get_default_review_duration",
    "get_review_duration_options",
    "partition_due_and_new",
    "select_fact_card_session_items",
    "select_session_items",
    # Matching
    "check_picture_phrase_response",
    "check_picture_phrase_response_for_group",
    "grade_fact_card_response",
    "matches_any_sentence",
    "normalize_sentence",
    "to_sentence",
    # Pronunciation
    "PronunciationCheckResult",
    "SyllableMatch",
    "check_vocab_pronunciation",
]
