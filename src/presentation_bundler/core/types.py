"""Type definitions for bundle asset manifests.

This module defines the records produced by asset collection. The JSON
form returned by ``AssetManifest.to_dict()`` mirrors the schema in
schemas/asset-manifest.schema.json.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Sentinel file identifiers for references that did not come from a stylesheet
CONFIGURATION_SOURCE = "configuration"
LAYOUT_TEMPLATE_SOURCE = "layoutTemplate"


class SourceKind(str, Enum):
    """Kind of reference that pointed at an asset."""

    STYLESHEET_URL = "css-url"  # url() in a stylesheet
    LAYOUT_HTML_URL = "html-url"  # src/poster/srcset in the layout template
    LAYOUT_HTML_SRC = "html-src"  # src attribute in other HTML content
    CONFIGURATION = "config"  # provider settings (video, audio, lottie)


@dataclass(frozen=True)
class SourceLocation:
    """Position of a reference inside a source file."""

    file: str
    line: int
    column: int = 0


@dataclass(frozen=True)
class AssetSource:
    """One place that referenced an asset.

    Attributes:
        file: Absolute path of the referencing file, or a sentinel such as
            ``"configuration"`` / ``"layoutTemplate"``
        kind: Kind of reference
        line: 1-indexed line number (stylesheet references only)
    """

    file: str
    kind: SourceKind
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"file": self.file, "type": self.kind.value}
        if self.line is not None:
            data["line"] = self.line
        return data


@dataclass
class AssetEntry:
    """A single physical file collected for the bundle.

    ``inline`` is true exactly when ``data_uri`` is set.
    """

    original_ref: str  # Reference text as it appeared in the source
    source_path: str  # Absolute path to the source file
    output_path: str  # Bundle-relative path, e.g. 'assets/hero.png'
    size: int  # File size in bytes
    inline: bool
    mime_type: str
    sources: list[AssetSource] = field(default_factory=list)
    data_uri: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "original_ref": self.original_ref,
            "source_path": self.source_path,
            "output_path": self.output_path,
            "size": self.size,
            "inline": self.inline,
            "mime_type": self.mime_type,
            "sources": [source.to_dict() for source in self.sources],
        }
        if self.data_uri is not None:
            data["data_uri"] = self.data_uri
        return data


@dataclass
class AssetManifest:
    """Manifest of all assets to be included in the bundle.

    Attributes:
        assets: Absolute source path -> asset entry, in discovery order
        css_source_files: Stylesheets that were scanned, in input order
        combined_css: Combined stylesheet text, filled in downstream
    """

    assets: dict[str, AssetEntry] = field(default_factory=dict)
    css_source_files: list[str] = field(default_factory=list)
    combined_css: str = ""

    def inlined(self) -> list[AssetEntry]:
        return [entry for entry in self.assets.values() if entry.inline]

    def copied(self) -> list[AssetEntry]:
        return [entry for entry in self.assets.values() if not entry.inline]

    def to_dict(self) -> dict[str, Any]:
        return {
            "assets": [entry.to_dict() for entry in self.assets.values()],
            "css_source_files": list(self.css_source_files),
            "combined_css": self.combined_css,
        }
