"""
Pack Validator - collect every problem with a content pack in one pass.

Philosophy:
- Malformed input is a result, not a fault: ``validate_pack`` never raises
- Structural checks (pydantic) run first; cross-reference checks run only
  once the structure is sound
- Cross-reference checks never short-circuit, so authoring tools can show
  all problems at once
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, assert_never

from loguru import logger
from pydantic import ValidationError

from brightsteps.content.schema import (
    PACK_ADAPTER,
    Asset,
    AssetKind,
    FactCardItem,
    Pack,
    PicturePhraseItem,
    VocabWordItem,
)

ASSETS_PATH = "/assets"
ITEMS_PATH = "/items"
THUMBNAIL_PATH = "/settings/packThumbnailImageRef"


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a pack, tagged with the section it belongs to."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Outcome of ``validate_pack``: either ``data`` or a non-empty ``issues`` list."""

    success: bool
    data: Pack | None = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @classmethod
    def ok(cls, pack: Pack) -> ValidationResult:
        return cls(success=True, data=pack)

    @classmethod
    def failed(cls, issues: list[ValidationIssue]) -> ValidationResult:
        return cls(success=False, issues=issues)


def validate_pack(raw: Any) -> ValidationResult:
    """
    Validate raw pack data (typically parsed JSON).

    Args:
        raw: Anything; non-dict input is reported as an issue

    Returns:
        ValidationResult with the parsed pack or every issue found
    """
    try:
        pack = PACK_ADAPTER.validate_python(raw)
    except ValidationError as e:
        issues = _structural_issues(e, raw)
        logger.info(f"Pack failed structural validation with {len(issues)} issue(s)")
        return ValidationResult.failed(issues)

    issues = check_references(pack)
    if issues:
        logger.info(f"Pack {pack.pack_id} failed reference validation with {len(issues)} issue(s)")
        return ValidationResult.failed(issues)

    logger.debug(f"Pack {pack.pack_id} is valid ({pack.module_type}, {len(pack.items)} items)")
    return ValidationResult.ok(pack)


def _structural_issues(error: ValidationError, raw: Any) -> list[ValidationIssue]:
    """Convert pydantic errors to issues, dropping the union tag from locations."""
    tag = raw.get("moduleType") if isinstance(raw, dict) else None
    issues = []
    for err in error.errors():
        loc = list(err["loc"])
        if loc and tag is not None and loc[0] == tag:
            loc = loc[1:]
        path = "/" + "/".join(str(part) for part in loc)
        issues.append(ValidationIssue(path=path, message=err["msg"]))
    return issues


# =============================================================================
# Reference checks
# =============================================================================


def check_references(pack: Pack) -> list[ValidationIssue]:
    """Run every cross-reference check on a structurally valid pack."""
    issues: list[ValidationIssue] = []
    assets = _check_assets(pack.assets, issues)
    _check_items(pack, assets, issues)
    _check_thumbnail(pack, assets, issues)
    return issues


def _check_assets(assets: list[Asset], issues: list[ValidationIssue]) -> dict[str, Asset]:
    """Check asset ids and alt text; return the first asset seen for each id."""
    by_id: dict[str, Asset] = {}
    for asset in assets:
        if asset.id in by_id:
            issues.append(ValidationIssue(ASSETS_PATH, f"Duplicate asset id: {asset.id}"))
        else:
            by_id[asset.id] = asset

        if asset.kind == "image" and not asset.alt:
            issues.append(ValidationIssue(ASSETS_PATH, f"Image asset {asset.id} must include alt text"))
    return by_id


def _check_items(pack: Pack, assets: dict[str, Asset], issues: list[ValidationIssue]) -> None:
    seen: set[str] = set()
    for item in pack.items:
        if item.id in seen:
            issues.append(ValidationIssue(ITEMS_PATH, f"Duplicate item id: {item.id}"))
        seen.add(item.id)

        match item:
            case FactCardItem():
                _check_fact_card(item, assets, issues)
            case PicturePhraseItem():
                _check_picture_phrase(item, assets, issues)
            case VocabWordItem():
                _check_vocab_word(item, assets, issues)
            case _:
                assert_never(item)


def _check_fact_card(item: FactCardItem, assets: dict[str, Asset], issues: list[ValidationIssue]) -> None:
    if item.media is None:
        return
    refs = [item.media.image_ref, item.media.prompt_audio_ref, item.media.answer_audio_ref]
    for ref in filter(None, refs):
        if ref not in assets:
            issues.append(ValidationIssue(ITEMS_PATH, f"FactCard item {item.id} references missing asset {ref}"))


def _check_picture_phrase(
    item: PicturePhraseItem, assets: dict[str, Asset], issues: list[ValidationIssue]
) -> None:
    for ref in filter(None, [item.media.image_ref, item.media.prompt_audio_ref]):
        if ref not in assets:
            issues.append(
                ValidationIssue(ITEMS_PATH, f"PicturePhrase item {item.id} references missing asset {ref}")
            )

    word_ids = {token.id for token in item.word_bank}
    for group in item.sentence_groups:
        if group.min_words > group.max_words:
            issues.append(ValidationIssue(ITEMS_PATH, f"PicturePhrase item {item.id} has invalid min/max words"))

        for word_id in group.required_word_ids:
            if word_id not in word_ids:
                issues.append(
                    ValidationIssue(
                        ITEMS_PATH,
                        f"PicturePhrase item {item.id} required word {word_id} not found in wordBank",
                    )
                )


def _check_vocab_word(item: VocabWordItem, assets: dict[str, Asset], issues: list[ValidationIssue]) -> None:
    for ref in filter(None, [item.media.pronunciation_audio_ref, item.media.slow_audio_ref]):
        if ref not in assets:
            issues.append(ValidationIssue(ITEMS_PATH, f"VocabWord item {item.id} references missing asset {ref}"))
        elif not _is_kind(assets, ref, "audio"):
            issues.append(
                ValidationIssue(ITEMS_PATH, f"VocabWord item {item.id} audio ref {ref} must point to an audio asset")
            )

    ref = item.media.image_ref
    if ref:
        if ref not in assets:
            issues.append(
                ValidationIssue(ITEMS_PATH, f"VocabWord item {item.id} references missing image asset {ref}")
            )
        elif not _is_kind(assets, ref, "image"):
            issues.append(
                ValidationIssue(ITEMS_PATH, f"VocabWord item {item.id} image ref {ref} must point to an image asset")
            )

    # Case- and whitespace-insensitive
    accepted = {value.strip().lower() for value in item.review.accepted_pronunciations}
    if item.word.strip().lower() not in accepted:
        issues.append(
            ValidationIssue(
                ITEMS_PATH,
                f"VocabWord item {item.id} must include the base word in review.acceptedPronunciations",
            )
        )


def _check_thumbnail(pack: Pack, assets: dict[str, Asset], issues: list[ValidationIssue]) -> None:
    ref = pack.settings.pack_thumbnail_image_ref if pack.settings else None
    if not ref:
        return
    if ref not in assets:
        issues.append(ValidationIssue(THUMBNAIL_PATH, f"Pack thumbnail references missing asset {ref}"))
    elif not _is_kind(assets, ref, "image"):
        issues.append(ValidationIssue(THUMBNAIL_PATH, f"Pack thumbnail asset {ref} must be an image"))


def _is_kind(assets: dict[str, Asset], ref: str, kind: AssetKind) -> bool:
    return assets[ref].kind == kind
