"""
Content Pack Schema.

Pydantic models for a BrightSteps content pack and its three item variants:
- FactCardItem: prompt/answer cards with optional media
- PicturePhraseItem: picture + word bank sentence building
- VocabWordItem: vocabulary words with pronunciation review

A pack is a tagged union keyed by ``moduleType``; each pack model only admits
its own item type, so a pack with mixed item types fails structural
validation. JSON keys are camelCase, Python attributes are snake_case.

Cross-references (asset ids, word bank ids) are checked separately in
``brightsteps.content.validator`` once the structure is known to be sound.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter
from pydantic.alias_generators import to_camel

ModuleType = Literal["factcards", "picturephrases", "vocabvoice"]
AssetKind = Literal["image", "audio"]


def _integral_float_to_int(value: Any) -> Any:
    # JSON numbers such as 2400.0 count as integers; strings and bools do not
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


JsonInt = Annotated[StrictInt, BeforeValidator(_integral_float_to_int)]

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
PositiveInt = Annotated[JsonInt, Field(gt=0)]
WordCount = Annotated[JsonInt, Field(ge=1)]
SupportLevelInt = Annotated[JsonInt, Field(ge=0, le=3)]


class PackModel(BaseModel):
    """Base for all pack models: camelCase JSON keys, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Assets
# =============================================================================


class Asset(PackModel):
    """An image or audio resource owned by a pack."""

    id: NonEmptyStr
    kind: AssetKind
    path: NonEmptyStr
    alt: StrictStr | None = None
    transcript: StrictStr | None = None
    duration_ms: PositiveInt | None = None


# =============================================================================
# FactCards
# =============================================================================


class FactCardMedia(PackModel):
    image_ref: StrictStr | None = None
    prompt_audio_ref: StrictStr | None = None
    answer_audio_ref: StrictStr | None = None


class FactCardItem(PackModel):
    """One prompt/answer card."""

    id: NonEmptyStr
    type: Literal["factcard"]
    topic: NonEmptyStr
    prompt: NonEmptyStr
    answer: NonEmptyStr
    variants: list[NonEmptyStr] | None = None
    distractors: list[NonEmptyStr] | None = None
    hints: list[NonEmptyStr] | None = None
    media: FactCardMedia | None = None


# =============================================================================
# PicturePhrases
# =============================================================================


class Token(PackModel):
    """A word bank tile."""

    id: NonEmptyStr
    text: NonEmptyStr
    pos: StrictStr | None = None


class SentenceGroup(PackModel):
    """One intent the learner can express about the picture."""

    intent: NonEmptyStr
    canonical: NonEmptyStr
    acceptable: Annotated[list[NonEmptyStr], Field(min_length=1)]
    required_word_ids: list[NonEmptyStr] = Field(default_factory=list)
    min_words: WordCount
    max_words: WordCount


class PicturePhraseMedia(PackModel):
    image_ref: NonEmptyStr
    prompt_audio_ref: StrictStr | None = None


class HintLevels(PackModel):
    level3: StrictStr | None = None
    level2: StrictStr | None = None
    level1: StrictStr | None = None
    level0: StrictStr | None = None


class PicturePhraseItem(PackModel):
    """A picture with a word bank and one or more target sentences."""

    id: NonEmptyStr
    type: Literal["picturephrase"]
    topic: NonEmptyStr
    media: PicturePhraseMedia
    word_bank: Annotated[list[Token], Field(min_length=1)]
    sentence_groups: Annotated[list[SentenceGroup], Field(min_length=1)]
    distractors: list[Token] | None = None
    hint_levels: HintLevels | None = None


# =============================================================================
# VocabVoice
# =============================================================================


class VocabReview(PackModel):
    sentence_prompt: NonEmptyStr
    accepted_pronunciations: list[NonEmptyStr] = Field(default_factory=list)


class VocabMedia(PackModel):
    pronunciation_audio_ref: NonEmptyStr
    image_ref: StrictStr | None = None
    slow_audio_ref: StrictStr | None = None


class VocabAiMeta(PackModel):
    """Provenance of AI-generated vocab content."""

    provider: Literal["openai", "gemini", "manual"] = "manual"
    model: NonEmptyStr = "manual"
    prompt_version: NonEmptyStr = "manual"
    generated_at: NonEmptyStr = "manual"


class VocabWordItem(PackModel):
    """A vocabulary word with syllables, definition and pronunciation review."""

    id: NonEmptyStr
    type: Literal["vocabword"]
    topic: NonEmptyStr
    word: NonEmptyStr
    syllables: Annotated[list[NonEmptyStr], Field(min_length=1)]
    definition: NonEmptyStr
    part_of_speech: StrictStr | None = None
    example_sentence: NonEmptyStr
    review: VocabReview
    hints: list[NonEmptyStr] = Field(default_factory=list)
    media: VocabMedia
    ai_meta: VocabAiMeta | None = None


Item = Union[FactCardItem, PicturePhraseItem, VocabWordItem]


# =============================================================================
# Packs
# =============================================================================


class PackSettings(PackModel):
    default_support_level: SupportLevelInt | None = None
    audio_enabled_by_default: StrictBool | None = None
    pack_thumbnail_image_ref: NonEmptyStr | None = None


class BasePack(PackModel):
    """Fields shared by every pack regardless of module type."""

    schema_version: NonEmptyStr
    pack_id: NonEmptyStr
    title: NonEmptyStr
    description: StrictStr | None = None
    version: NonEmptyStr
    language: NonEmptyStr
    age_band: NonEmptyStr
    topics: Annotated[list[NonEmptyStr], Field(min_length=1)]
    settings: PackSettings | None = None
    assets: list[Asset]


class FactCardsPack(BasePack):
    module_type: Literal["factcards"]
    items: Annotated[list[FactCardItem], Field(min_length=1)]


class PicturePhrasesPack(BasePack):
    module_type: Literal["picturephrases"]
    items: Annotated[list[PicturePhraseItem], Field(min_length=1)]


class VocabVoicePack(BasePack):
    module_type: Literal["vocabvoice"]
    items: Annotated[list[VocabWordItem], Field(min_length=1)]


Pack = Annotated[
    Union[FactCardsPack, PicturePhrasesPack, VocabVoicePack],
    Field(discriminator="module_type"),
]

PACK_ADAPTER: TypeAdapter[Pack] = TypeAdapter(Pack)
