"""
Unit tests for session composition and sizing.

Tests:
- Due-priority selection policy
- Partitioning persisted states into due/new
- Picture phrase round-robin ordering
- Session size estimates and duration options
"""

import itertools
import math
from datetime import timedelta

import pytest

from brightsteps.config import get_settings
from brightsteps.content import validate_pack
from brightsteps.review import (
    Attempt,
    SessionSlot,
    build_fact_card_session_item_order,
    build_picture_phrase_session_item_order,
    compute_next_review_state,
    create_initial_review_state,
    estimate_item_count,
    get_default_review_duration,
    get_review_duration_options,
    partition_due_and_new,
    select_fact_card_session_items,
    select_session_items,
)


class TestSelectSessionItems:
    def test_due_heavy_composition(self):
        selected = select_fact_card_session_items(
            due_item_ids=["d1", "d2", "d3", "d4"],
            new_item_ids=["n1", "n2", "n3"],
            target_count=5,
        )

        assert len(selected) == 5
        assert len([item_id for item_id in selected if item_id.startswith("d")]) >= 3

    def test_exact_order(self):
        selected = select_session_items(["d1", "d2", "d3", "d4"], ["n1", "n2", "n3"], 5)

        assert selected == ["d1", "d2", "d3", "n1", "n2"]

    def test_backfills_with_remaining_due(self):
        selected = select_session_items(["d1", "d2", "d3", "d4"], ["n1"], 5)

        assert selected == ["d1", "d2", "d3", "n1", "d4"]

    def test_short_pools_give_short_session(self):
        assert select_session_items(["d1"], ["n1"], 10) == ["d1", "n1"]

    def test_never_pads_or_repeats(self):
        selected = select_session_items(["a", "a", "b"], ["b", "c", "a"], 10)

        assert selected == ["a", "b", "c"]

    @pytest.mark.parametrize("target", [0, -3])
    def test_non_positive_target(self, target):
        assert select_session_items(["d1"], ["n1"], target) == []

    def test_empty_pools(self):
        assert select_fact_card_session_items([], [], 5) == []

    def test_only_new_items(self):
        assert select_session_items([], ["n1", "n2", "n3"], 2) == ["n1", "n2"]

    def test_properties_hold_across_inputs(self):
        due_pool = [f"d{i}" for i in range(8)]
        new_pool = [f"n{i}" for i in range(8)]
        for due_len, new_len, target in itertools.product(range(0, 8, 2), range(0, 8, 3), range(1, 12)):
            due, new = due_pool[:due_len], new_pool[:new_len]
            selected = select_session_items(due, new, target)

            assert len(selected) <= target
            assert len(selected) == len(set(selected))
            assert len(selected) == min(target, due_len + new_len)
            reserve = math.ceil(target * 0.6)
            if due_len >= reserve:
                assert len([s for s in selected if s in due]) >= reserve

    def test_idempotent(self):
        args = (["d1", "d2"], ["n1", "n2", "n3"], 4)

        assert select_session_items(*args) == select_session_items(*args)

    def test_custom_due_ratio(self):
        selected = select_session_items(["d1", "d2", "d3"], ["n1", "n2", "n3"], 4, due_ratio=0.25)

        assert selected == ["d1", "n1", "n2", "n3"]

    @pytest.mark.parametrize("ratio", [0, -0.5, 1.01, 2])
    def test_rejects_due_ratio_outside_unit_interval(self, ratio):
        with pytest.raises(ValueError):
            select_session_items([f"d{i}" for i in range(10)], [], 3, due_ratio=ratio)

    def test_full_due_ratio_stays_within_target(self):
        selected = select_session_items([f"d{i}" for i in range(10)], ["n1"], 3, due_ratio=1)

        assert selected == ["d0", "d1", "d2"]

    def test_due_ratio_from_settings(self, monkeypatch):
        args = (["d1", "d2", "d3"], ["n1", "n2"], 3)
        assert select_session_items(*args) == ["d1", "d2", "n1"]

        monkeypatch.setenv("BRIGHTSTEPS_DUE_RATIO", "1.0")
        get_settings.cache_clear()

        assert select_session_items(*args) == ["d1", "d2", "d3"]


class TestPartitionDueAndNew:
    def test_partition(self, now):
        overdue = create_initial_review_state("a", now - timedelta(days=2))
        later = compute_next_review_state(create_initial_review_state("b", now), Attempt(True, 0), now)
        states = {"a": overdue, "b": later}

        due, new = partition_due_and_new(["a", "b", "c", "d"], states, now)

        assert due == ["a"]
        assert new == ["c", "d"]

    def test_due_exactly_now(self, now):
        due, new = partition_due_and_new(["a"], {"a": create_initial_review_state("a", now)}, now)

        assert due == ["a"]
        assert new == []


class TestBuildFactCardSessionItemOrder:
    def test_uses_pack_order_and_states(self, factcards_pack, now):
        factcards_pack["items"] += [
            dict(factcards_pack["items"][0], id="fc_2"),
            dict(factcards_pack["items"][0], id="fc_3"),
        ]
        pack = validate_pack(factcards_pack).data
        seen = compute_next_review_state(create_initial_review_state("fc_2", now), Attempt(True, 0), now)

        order = build_fact_card_session_item_order(pack, [seen], 5, now + timedelta(days=1))

        assert order == ["fc_2", "fc_1", "fc_3"]

    def test_not_due_items_excluded(self, factcards_pack, now):
        pack = validate_pack(factcards_pack).data
        seen = compute_next_review_state(create_initial_review_state("fc_1", now), Attempt(True, 0), now)

        assert build_fact_card_session_item_order(pack, [seen], 5, now) == []

    def test_other_modules_get_nothing(self, picturephrases_pack, now):
        pack = validate_pack(picturephrases_pack).data

        assert build_fact_card_session_item_order(pack, [], 5, now) == []


class TestBuildPicturePhraseSessionItemOrder:
    def test_cycles_sentence_groups(self, picturephrases_pack):
        pack = validate_pack(picturephrases_pack).data

        slots = build_picture_phrase_session_item_order(pack, 3)

        assert slots == [SessionSlot("pp_1", 0), SessionSlot("pp_1", 1), SessionSlot("pp_1", 0)]

    def test_round_robin_across_items(self, picturephrases_pack):
        second = dict(picturephrases_pack["items"][0], id="pp_2")
        second["sentenceGroups"] = second["sentenceGroups"][:1]
        picturephrases_pack["items"].append(second)
        pack = validate_pack(picturephrases_pack).data

        slots = build_picture_phrase_session_item_order(pack, 5)

        assert slots == [("pp_1", 0), ("pp_2", 0), ("pp_1", 1), ("pp_2", 0), ("pp_1", 0)]

    def test_every_item_appears_even_with_small_target(self, picturephrases_pack):
        picturephrases_pack["items"].append(dict(picturephrases_pack["items"][0], id="pp_2"))
        pack = validate_pack(picturephrases_pack).data

        slots = build_picture_phrase_session_item_order(pack, 1)

        assert [slot.item_id for slot in slots] == ["pp_1", "pp_2"]

    def test_other_modules_get_nothing(self, factcards_pack):
        pack = validate_pack(factcards_pack).data

        assert build_picture_phrase_session_item_order(pack, 5) == []


class TestSessionSizing:
    @pytest.mark.parametrize(
        ("minutes", "module_type", "expected"),
        [
            (5, "factcards", 15),
            (10, "picturephrases", 13),
            (15, "vocabvoice", 25),
            (0.5, "factcards", 3),
            (1, "picturephrases", 3),
        ],
    )
    def test_estimate_item_count(self, minutes, module_type, expected):
        assert estimate_item_count(minutes, module_type) == expected

    @pytest.mark.parametrize(
        ("item_count", "options"),
        [
            (0, [2, 3, 5]),
            (4, [2, 3, 5]),
            (5, [7, 10, 15]),
            (9, [7, 10, 15]),
            (10, [15, 17, 20]),
            (20, [15, 17, 20]),
            (21, [20, 25, 30]),
        ],
    )
    def test_review_duration_options(self, item_count, options):
        assert get_review_duration_options(item_count) == options
        assert get_default_review_duration(item_count) == options[1]
