"""
Content Module - pack schema, validation and summaries.

Components:
- schema: pydantic models for packs, assets and the three item variants
- validator: validate_pack() with collect-all reference checks
- summary: pack listing summaries and thumbnail resolution
"""

from brightsteps.content.schema import (
    Asset,
    BasePack,
    FactCardItem,
    FactCardsPack,
    Item,
    ModuleType,
    Pack,
    PicturePhraseItem,
    PicturePhrasesPack,
    SentenceGroup,
    Token,
    VocabVoicePack,
    VocabWordItem,
)
from brightsteps.content.summary import PackSummary, PackThumbnail, resolve_pack_thumbnail, summarize_pack
from brightsteps.content.validator import ValidationIssue, ValidationResult, check_references, validate_pack

__all__ = [
    # Schema
    "Asset",
    "BasePack",
    "FactCardItem",
    "FactCardsPack",
    "Item",
    "ModuleType",
    "Pack",
    "PicturePhraseItem",
    "PicturePhrasesPack",
    "SentenceGroup",
    "Token",
    "VocabVoicePack",
    "VocabWordItem",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "check_references",
    "validate_pack",
    # Summaries
    "PackSummary",
    "PackThumbnail",
    "resolve_pack_thumbnail",
    "summarize_pack",
]
