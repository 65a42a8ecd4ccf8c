"""Stylesheet combination with url() rewriting.

Stylesheets are concatenated in bundle order and every local url() that
the manifest knows about is rewritten to its data URI or output path.
"""

import os
import re
from collections.abc import Sequence

from .core.errors import StylesheetReadError
from .core.types import AssetManifest
from .extractors.base import is_local_reference
from .extractors.stylesheet import URL_PATTERN
from .filesystem import FileSystem, LocalFileSystem
from .resolver import resolve_asset_path


def rewrite_css_urls(css_content: str, css_file: str, manifest: AssetManifest) -> str:
    """Rewrite a stylesheet's url() references using the manifest.

    Remote references, data URIs and references that are not in the
    manifest are left exactly as written.

    Args:
        css_content: CSS content string
        css_file: Absolute path of the stylesheet (for resolving references)
        manifest: Manifest with output paths and inline decisions

    Returns:
        CSS with rewritten url() values
    """
    if not css_content.strip():
        return css_content

    def replace(match: re.Match[str]) -> str:
        url = match.group(2).strip()
        if not is_local_reference(url):
            return match.group(0)

        asset = manifest.assets.get(resolve_asset_path(url, css_file))
        if asset is None:
            return match.group(0)

        if asset.inline and asset.data_uri:
            return f"url('{asset.data_uri}')"
        return f"url('{asset.output_path}')"

    return URL_PATTERN.sub(replace, css_content)


def process_css(
    css_files: Sequence[str],
    manifest: AssetManifest,
    fs: FileSystem | None = None,
) -> str:
    """Combine stylesheets in order and rewrite their url() references.

    Each file is preceded by a ``/* === Source: <name> === */`` comment.

    Args:
        css_files: Absolute stylesheet paths, in order
        manifest: Manifest produced by asset collection
        fs: Filesystem to read from

    Returns:
        Combined CSS, or an empty string when there are no stylesheets

    Raises:
        StylesheetReadError: If a stylesheet cannot be read
    """
    fs = fs or LocalFileSystem()
    parts: list[str] = []

    for css_file in css_files:
        try:
            css_content = fs.read_text(css_file)
        except (OSError, UnicodeDecodeError) as e:
            raise StylesheetReadError(f"Failed to read CSS file: {css_file}: {e}", css_file) from e

        parts.append(f"/* === Source: {os.path.basename(css_file)} === */")
        parts.append(rewrite_css_urls(css_content, css_file, manifest))
        parts.append("")

    return "\n".join(parts).strip()
