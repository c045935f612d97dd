"""Pack summaries and thumbnail resolution for pack listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from brightsteps.content.schema import ModuleType, Pack
from brightsteps.content.validator import validate_pack

RENDERABLE_PREFIXES = ("http://", "https://", "data:", "blob:", "/")


@dataclass(frozen=True)
class PackThumbnail:
    """Thumbnail source and alt text; both None when the pack has none usable."""

    src: str | None = None
    alt: str | None = None


@dataclass
class PackSummary:
    """Listing entry for one pack, valid or not."""

    pack_id: str
    title: str
    module_type: ModuleType | None
    topics: list[str] = field(default_factory=list)
    item_count: int = 0
    description: str | None = None
    thumbnail: PackThumbnail = field(default_factory=PackThumbnail)
    valid: bool = True
    issues: list[str] = field(default_factory=list)


def resolve_pack_thumbnail(pack: Pack) -> PackThumbnail:
    """
    Resolve the pack thumbnail to something a renderer can use directly.

    Only image assets with absolute, rooted or inline paths are returned;
    pack-relative paths need a storage layer to become URLs.
    """
    ref = pack.settings.pack_thumbnail_image_ref if pack.settings else None
    if not ref:
        return PackThumbnail()

    asset = next((a for a in pack.assets if a.id == ref and a.kind == "image"), None)
    if asset is None or not asset.path.startswith(RENDERABLE_PREFIXES):
        return PackThumbnail()

    return PackThumbnail(src=asset.path, alt=asset.alt)


def summarize_pack(pack_id: str, raw: Any) -> PackSummary:
    """Validate raw pack data and summarize it for a pack listing."""
    result = validate_pack(raw)
    if not result.success or result.data is None:
        module_type = raw.get("moduleType") if isinstance(raw, dict) else None
        return PackSummary(
            pack_id=pack_id,
            title=pack_id,
            module_type=module_type if module_type in ("factcards", "picturephrases", "vocabvoice") else None,
            valid=False,
            issues=[str(issue) for issue in result.issues],
        )

    pack = result.data
    return PackSummary(
        pack_id=pack.pack_id,
        title=pack.title,
        module_type=pack.module_type,
        topics=list(pack.topics),
        item_count=len(pack.items),
        description=pack.description,
        thumbnail=resolve_pack_thumbnail(pack),
    )
