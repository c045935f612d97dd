"""
Sentence normalization and response checks.

Matching is exact after normalization: no substring or fuzzy comparison.
Paraphrase tolerance comes from the acceptable-sentence lists authored in
the pack, not from the comparison.
"""

from __future__ import annotations

from collections.abc import Iterable

from brightsteps.content.schema import FactCardItem, PicturePhraseItem

_TRAILING_PUNCTUATION = " .!?"


def normalize_sentence(sentence: str) -> str:
    """
    Lower-case, drop trailing ``.``/``!``/``?`` runs and collapse whitespace.

    Whitespace inside the trailing punctuation run is dropped with it, so
    normalizing twice gives the same result as normalizing once.
    """
    return " ".join(sentence.lower().split()).rstrip(_TRAILING_PUNCTUATION)


def matches_any_sentence(user_sentence: str, acceptable_sentences: Iterable[str]) -> bool:
    """Check whether the user's sentence equals any acceptable sentence after normalization."""
    normalized = normalize_sentence(user_sentence)
    return any(normalize_sentence(candidate) == normalized for candidate in acceptable_sentences)


def to_sentence(tokens: Iterable[str]) -> str:
    """Join word bank tiles picked by the learner into a sentence."""
    return " ".join(tokens).strip()


def grade_fact_card_response(item: FactCardItem, response: str) -> bool:
    return item.answer.strip().lower() == response.strip().lower()


def check_picture_phrase_response(item: PicturePhraseItem, candidate_sentence: str) -> bool:
    """Accept a sentence that matches any group's acceptable sentences."""
    acceptable = [sentence for group in item.sentence_groups for sentence in group.acceptable]
    return matches_any_sentence(candidate_sentence, acceptable)


def check_picture_phrase_response_for_group(
    item: PicturePhraseItem,
    candidate_sentence: str,
    group_index: int,
) -> bool:
    """Check against one sentence group; an out-of-range index checks all groups."""
    if not 0 <= group_index < len(item.sentence_groups):
        return check_picture_phrase_response(item, candidate_sentence)

    group = item.sentence_groups[group_index]
    return matches_any_sentence(candidate_sentence, [group.canonical, *group.acceptable])
