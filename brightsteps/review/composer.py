"""
Session Composer - decide which items go into a practice session.

Key principles:
1. Due items get at least ``due_ratio`` of the slots when enough exist
   (``Settings.due_ratio`` unless the caller passes one)
2. New items fill the remaining slots (rate-limited introduction)
3. Leftover due items backfill if the target is still not met
4. Ids are never repeated and the session is never padded
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import NamedTuple, assert_never

from loguru import logger

from brightsteps.config import get_settings
from brightsteps.content.schema import ModuleType, Pack

from .state import ReviewState

# Seconds a learner typically spends per item, by module
FACTCARD_SECONDS_PER_ITEM = 20
PICTUREPHRASE_SECONDS_PER_ITEM = 45
VOCABVOICE_SECONDS_PER_ITEM = 35
MIN_SESSION_ITEMS = 3

# Most sentence groups cycled per picture phrase item
MAX_GROUPS_PER_ITEM = 5


def check_due_ratio(due_ratio: float) -> float:
    if not 0 < due_ratio <= 1:
        raise ValueError(f"due_ratio must be in (0, 1], got {due_ratio}")
    return due_ratio


class SessionSlot(NamedTuple):
    """One picture phrase prompt: an item and which sentence group to ask for."""

    item_id: str
    group_index: int


def select_session_items(
    due_item_ids: Iterable[str],
    new_item_ids: Iterable[str],
    target_count: int,
    due_ratio: float | None = None,
) -> list[str]:
    """
    Compose a due-weighted session.

    Args:
        due_item_ids: Due items, in the caller's priority order
        new_item_ids: Never-seen items, in introduction order
        target_count: Desired session size
        due_ratio: Share of slots reserved for due items, in (0, 1]
            (defaults to ``Settings.due_ratio``)

    Returns:
        Ordered unique ids, at most ``target_count`` long
    """
    due_ratio = check_due_ratio(get_settings().due_ratio if due_ratio is None else due_ratio)
    due = list(due_item_ids)
    new = list(new_item_ids)
    if target_count <= 0:
        return []

    due_target = min(len(due), math.ceil(target_count * due_ratio))
    picks: dict[str, None] = dict.fromkeys(due[:due_target])

    for item_id in new:
        if len(picks) >= target_count:
            break
        picks.setdefault(item_id)

    for item_id in due:
        if len(picks) >= target_count:
            break
        picks.setdefault(item_id)

    selected = list(picks)
    logger.debug(
        f"Session composed: {len(selected)}/{target_count} items "
        f"from {len(due)} due + {len(new)} new"
    )
    return selected


def select_fact_card_session_items(
    due_item_ids: Iterable[str],
    new_item_ids: Iterable[str],
    target_count: int,
    due_ratio: float | None = None,
) -> list[str]:
    """Compose a fact card session; see ``select_session_items``."""
    return select_session_items(due_item_ids, new_item_ids, target_count, due_ratio)


def partition_due_and_new(
    item_ids: Iterable[str],
    states: Mapping[str, ReviewState],
    now: datetime,
) -> tuple[list[str], list[str]]:
    """
    Split item ids into due and new, keeping the given order.

    Items with a state that is not yet due are in neither list.
    """
    due: list[str] = []
    new: list[str] = []
    for item_id in item_ids:
        state = states.get(item_id)
        if state is None:
            new.append(item_id)
        elif state.is_due(now):
            due.append(item_id)
    return due, new


def build_fact_card_session_item_order(
    pack: Pack,
    states: Iterable[ReviewState],
    target_count: int,
    now: datetime,
    due_ratio: float | None = None,
) -> list[str]:
    """Session order for a fact cards pack from persisted states; [] for other modules."""
    if pack.module_type != "factcards":
        return []

    by_id = {state.item_id: state for state in states}
    due, new = partition_due_and_new((item.id for item in pack.items), by_id, now)
    return select_fact_card_session_items(due, new, target_count, due_ratio)


def build_picture_phrase_session_item_order(pack: Pack, target_count: int) -> list[SessionSlot]:
    """
    Round-robin over picture phrase items until the session is full.

    Every item appears at least once; repeated appearances cycle through
    the item's sentence groups (at most MAX_GROUPS_PER_ITEM of them).
    """
    if pack.module_type != "picturephrases":
        return []

    slots: list[SessionSlot] = []
    seen: dict[str, int] = {}
    total = max(target_count, len(pack.items))

    while len(slots) < total:
        for item in pack.items:
            attempts_for_item = min(MAX_GROUPS_PER_ITEM, max(1, len(item.sentence_groups)))
            count = seen.get(item.id, 0)
            slots.append(SessionSlot(item.id, count % attempts_for_item))
            seen[item.id] = count + 1
            if len(slots) >= total:
                break

    return slots


def seconds_per_item(module_type: ModuleType) -> int:
    match module_type:
        case "factcards":
            return FACTCARD_SECONDS_PER_ITEM
        case "picturephrases":
            return PICTUREPHRASE_SECONDS_PER_ITEM
        case "vocabvoice":
            return VOCABVOICE_SECONDS_PER_ITEM
        case _:
            assert_never(module_type)


def estimate_item_count(duration_minutes: float, module_type: ModuleType) -> int:
    """Target session size for a session length, never below MIN_SESSION_ITEMS."""
    return max(MIN_SESSION_ITEMS, math.floor(duration_minutes * 60 / seconds_per_item(module_type)))


def get_review_duration_options(item_count: int) -> list[int]:
    """Session lengths (minutes) to offer for a pack of ``item_count`` items."""
    if item_count < 5:
        return [2, 3, 5]
    if item_count < 10:
        return [7, 10, 15]
    if item_count <= 20:
        return [15, 17, 20]
    return [20, 25, 30]


def get_default_review_duration(item_count: int) -> int:
    """Middle option from ``get_review_duration_options``."""
    return get_review_duration_options(item_count)[1]
