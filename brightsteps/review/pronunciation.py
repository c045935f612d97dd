"""
Pronunciation scoring for vocab words.

Scores a transcript of the learner's attempt (typed, or produced by an
external speech-to-text service) against the word, its syllables and its
accepted pronunciations.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger

# Score given to a correct attempt whose syllable hit ratio is lower
CORRECT_SCORE_FLOOR = 0.95

_NOT_COMPARABLE = re.compile(r"[^a-z0-9' ]")
_NOT_SYLLABLE = re.compile(r"[^a-z0-9']")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class SyllableMatch:
    syllable: str
    correct: bool


@dataclass
class PronunciationCheckResult:
    """Outcome of one pronunciation attempt."""

    transcript: str
    expected_word: str
    is_correct: bool
    score: float  # 0.0 to 1.0
    syllable_matches: list[SyllableMatch] = field(default_factory=list)


def normalize_for_compare(value: str) -> str:
    value = _NOT_COMPARABLE.sub("", value.lower())
    return _WHITESPACE.sub(" ", value).strip()


def _flat(value: str) -> str:
    return _WHITESPACE.sub("", value)


def match_syllables(transcript: str, syllables: Iterable[str]) -> list[SyllableMatch]:
    """Find each syllable in order in the space-free transcript."""
    flattened = _flat(normalize_for_compare(transcript))
    cursor = 0
    matches = []
    for raw in syllables:
        syllable = _NOT_SYLLABLE.sub("", raw.lower())
        found_at = flattened.find(syllable, cursor) if syllable else -1
        if found_at < 0:
            matches.append(SyllableMatch(raw, False))
            continue
        cursor = found_at + len(syllable)
        matches.append(SyllableMatch(raw, True))
    return matches


def check_vocab_pronunciation(
    word: str,
    syllables: Iterable[str],
    accepted_pronunciations: Iterable[str],
    transcript: str,
) -> PronunciationCheckResult:
    """
    Grade a pronunciation attempt.

    Correct when the transcript equals the word or an accepted pronunciation
    (with or without spaces), or when every syllable was heard in order.

    Args:
        word: The vocab word being practised
        syllables: The word's syllables, in order
        accepted_pronunciations: Alternative accepted forms
        transcript: What the learner said or typed

    Returns:
        PronunciationCheckResult with score and per-syllable matches
    """
    expected = normalize_for_compare(word)
    accepted = list(dict.fromkeys(
        value for value in [expected, *(normalize_for_compare(v) for v in accepted_pronunciations)] if value
    ))
    heard = normalize_for_compare(transcript)

    syllable_matches = match_syllables(heard, syllables)
    hits = sum(1 for match in syllable_matches if match.correct)
    raw_score = hits / max(1, len(syllable_matches))

    heard_flat = _flat(heard)
    is_correct = heard in accepted or heard_flat in {_flat(value) for value in accepted}
    if not is_correct and heard_flat and _flat(expected) and raw_score >= 1:
        is_correct = True

    score = round(max(raw_score, CORRECT_SCORE_FLOOR) if is_correct else raw_score, 2)

    logger.debug(f"Pronunciation of {word!r}: heard={heard!r}, correct={is_correct}, score={score}")

    return PronunciationCheckResult(
        transcript=heard,
        expected_word=word,
        is_correct=is_correct,
        score=score,
        syllable_matches=syllable_matches,
    )
