"""Bundle statistics derived from an asset manifest."""

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .core.mime import get_file_category
from .core.types import AssetEntry, AssetManifest


@dataclass(frozen=True)
class InlineOverhead:
    """Size cost of inlining.

    Attributes:
        inlined_original_size: Total bytes of inlined files
        inlined_encoded_size: Total length of their data URIs
        inline_overhead_percent: ((encoded - original) / original) * 100
    """

    inlined_original_size: int
    inlined_encoded_size: int
    inline_overhead_percent: float


@dataclass(frozen=True)
class ManifestSummary:
    assets_inlined: int
    assets_copied: int
    images_inlined: int
    images_copied: int
    copied_size: int
    overhead: InlineOverhead


def calculate_inline_overhead(assets: Iterable[AssetEntry]) -> InlineOverhead:
    """Calculate the overhead introduced by inlining.

    Base64 adds roughly a third to the size of a file, plus the data URI
    prefix. Percent-encoded SVG can come out smaller or larger.

    Args:
        assets: Asset entries (typically ``manifest.assets.values()``)

    Returns:
        InlineOverhead; the percentage is 0 when nothing was inlined
    """
    original = 0
    encoded = 0

    for asset in assets:
        if asset.inline:
            original += asset.size
            encoded += len(asset.data_uri or "")

    percent = ((encoded - original) / original) * 100 if original > 0 else 0.0
    return InlineOverhead(original, encoded, percent)


def summarize_manifest(manifest: AssetManifest) -> ManifestSummary:
    inlined = manifest.inlined()
    copied = manifest.copied()

    def images(entries: list[AssetEntry]) -> int:
        return sum(
            1
            for entry in entries
            if get_file_category(os.path.splitext(entry.source_path)[1]) == "image"
        )

    return ManifestSummary(
        assets_inlined=len(inlined),
        assets_copied=len(copied),
        images_inlined=images(inlined),
        images_copied=images(copied),
        copied_size=sum(entry.size for entry in copied),
        overhead=calculate_inline_overhead(manifest.assets.values()),
    )
