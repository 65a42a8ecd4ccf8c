"""Inline decisions and data URI encoding.

Small images and fonts are embedded as data URIs instead of being copied
into the bundle. Video and audio files are never embedded.
"""

import base64
import os
from dataclasses import dataclass
from typing import Literal
from urllib.parse import quote

from .core.mime import can_inline, get_mime_type, is_vector_markup
from .filesystem import FileSystem, LocalFileSystem

InlineReason = Literal["never-inline-type", "inlining-disabled", "over-threshold", "under-threshold"]

# Characters encodeURIComponent leaves alone, minus the single quote
_SVG_SAFE_CHARS = "-_.!~*()"


@dataclass(frozen=True)
class InlineDecision:
    """Result of an inline check, with the reason behind it."""

    should_inline: bool
    size: int
    mime_type: str
    reason: InlineReason


def should_inline_asset(extension: str, size: int, threshold: int) -> bool:
    """Determine if an asset should be inlined based on size and type.

    Args:
        extension: File extension (e.g., ".png")
        size: File size in bytes
        threshold: Size threshold for inlining, 0 disables inlining

    Returns:
        True if the asset should be inlined
    """
    if not can_inline(extension):
        return False
    return threshold > 0 and size <= threshold


def decide_inline(extension: str, size: int, threshold: int) -> InlineDecision:
    mime_type = get_mime_type(extension)

    if not can_inline(extension):
        return InlineDecision(False, size, mime_type, "never-inline-type")
    if threshold <= 0:
        return InlineDecision(False, size, mime_type, "inlining-disabled")
    if size > threshold:
        return InlineDecision(False, size, mime_type, "over-threshold")
    return InlineDecision(True, size, mime_type, "under-threshold")


def encode_svg(svg_content: str, mime_type: str = "image/svg+xml") -> str:
    """Percent-encode SVG markup into a data URI.

    Quote characters are escaped (%27, %22) so the result is safe inside
    quoted HTML attributes and CSS url() values.
    """
    return f"data:{mime_type},{quote(svg_content, safe=_SVG_SAFE_CHARS)}"


def encode_base64(content: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(content).decode('ascii')}"


def create_data_uri(
    file_path: str,
    mime_type: str | None = None,
    fs: FileSystem | None = None,
) -> str:
    """Create a data URI for a file.

    SVG files are percent-encoded, which is smaller than base64 for text.
    All other formats are base64 encoded.

    Args:
        file_path: Absolute path to the file
        mime_type: MIME type; derived from the extension when omitted
        fs: Filesystem to read from (defaults to the local disk)

    Returns:
        Data URI string

    Raises:
        OSError: If the file cannot be read
    """
    fs = fs or LocalFileSystem()
    extension = os.path.splitext(file_path)[1]
    mime_type = mime_type or get_mime_type(extension)

    if is_vector_markup(extension):
        # Stray non-UTF-8 bytes are replaced rather than failing the build
        svg_content = fs.read_bytes(file_path).decode("utf-8", errors="replace")
        return encode_svg(svg_content, mime_type)

    return encode_base64(fs.read_bytes(file_path), mime_type)
