"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Give every test freshly loaded settings, free of BRIGHTSTEPS_* overrides."""
    from brightsteps.config import get_settings

    for name in ("BRIGHTSTEPS_REVIEW_LADDER_DAYS", "BRIGHTSTEPS_DUE_RATIO", "BRIGHTSTEPS_INITIAL_SUPPORT_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def now():
    """A fixed, timezone-aware 'current time'."""
    return datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def factcards_pack():
    """Provide a minimal valid fact cards pack."""
    return {
        "schemaVersion": "2.0.0",
        "packId": "geo-factcards-001",
        "moduleType": "factcards",
        "title": "Geography Basics",
        "version": "1.0.0",
        "language": "en",
        "ageBand": "6-10",
        "topics": ["geography"],
        "assets": [
            {"id": "img_france", "kind": "image", "path": "assets/images/france.svg", "alt": "France map"},
        ],
        "items": [
            {
                "id": "fc_1",
                "type": "factcard",
                "topic": "geography",
                "prompt": "What is the capital of France?",
                "answer": "Paris",
                "media": {"imageRef": "img_france"},
            },
        ],
    }


@pytest.fixture
def picturephrases_pack():
    """Provide a minimal valid picture phrases pack."""
    return {
        "schemaVersion": "2.0.0",
        "packId": "park-phrases-001",
        "moduleType": "picturephrases",
        "title": "At the Park",
        "version": "1.0.0",
        "language": "en",
        "ageBand": "4-7",
        "topics": ["outdoors"],
        "assets": [
            {"id": "img_park", "kind": "image", "path": "assets/images/park.png", "alt": "A dog in a park"},
            {"id": "audio_park", "kind": "audio", "path": "assets/audio/park.mp3", "durationMs": 2400},
        ],
        "items": [
            {
                "id": "pp_1",
                "type": "picturephrase",
                "topic": "outdoors",
                "media": {"imageRef": "img_park", "promptAudioRef": "audio_park"},
                "wordBank": [
                    {"id": "w1", "text": "The"},
                    {"id": "w2", "text": "dog", "pos": "noun"},
                    {"id": "w3", "text": "runs", "pos": "verb"},
                ],
                "sentenceGroups": [
                    {
                        "intent": "action",
                        "canonical": "The dog runs",
                        "acceptable": ["The dog runs", "A dog is running"],
                        "requiredWordIds": ["w2", "w3"],
                        "minWords": 2,
                        "maxWords": 6,
                    },
                    {
                        "intent": "describe",
                        "canonical": "The dog is happy",
                        "acceptable": ["The dog is happy"],
                        "minWords": 3,
                        "maxWords": 5,
                    },
                ],
            },
        ],
    }


@pytest.fixture
def vocabvoice_pack():
    """Provide a minimal valid vocab voice pack."""
    return {
        "schemaVersion": "2.0.0",
        "packId": "animals-vocab-001",
        "moduleType": "vocabvoice",
        "title": "Animal Words",
        "version": "1.0.0",
        "language": "en",
        "ageBand": "6-10",
        "topics": ["animals"],
        "assets": [
            {"id": "audio_elephant", "kind": "audio", "path": "assets/audio/elephant.mp3"},
            {"id": "audio_elephant_slow", "kind": "audio", "path": "assets/audio/elephant-slow.mp3"},
            {"id": "img_elephant", "kind": "image", "path": "assets/images/elephant.png", "alt": "An elephant"},
        ],
        "items": [
            {
                "id": "vw_1",
                "type": "vocabword",
                "topic": "animals",
                "word": "Elephant",
                "syllables": ["el", "e", "phant"],
                "definition": "A very large grey animal with a long trunk.",
                "exampleSentence": "The elephant sprayed water with its trunk.",
                "review": {
                    "sentencePrompt": "The ____ sprayed water with its trunk.",
                    "acceptedPronunciations": ["elephant"],
                },
                "media": {
                    "pronunciationAudioRef": "audio_elephant",
                    "slowAudioRef": "audio_elephant_slow",
                    "imageRef": "img_elephant",
                },
            },
        ],
    }
