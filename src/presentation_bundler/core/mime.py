"""MIME types and file categories for bundle assets.

Extension arguments include the leading dot (e.g. '.png') and are
matched case-insensitively.
"""

from typing import Literal

FileCategory = Literal["html", "javascript", "css", "image", "font", "media", "other"]

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    # Images
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
    ".bmp": "image/bmp",
    # Fonts
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
    # Media (never inlined)
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".ogg": "video/ogg",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".mkv": "video/x-matroska",
}

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico", ".bmp"}
FONT_EXTENSIONS = {".woff", ".woff2", ".ttf", ".otf", ".eot"}

# Video and audio containers are copied regardless of size
NEVER_INLINE_EXTENSIONS = {
    ".mp4",
    ".webm",
    ".ogg",
    ".mov",
    ".avi",
    ".mkv",
    ".mp3",
    ".wav",
    ".m4a",
    ".aac",
    ".flac",
}

# Vector markup is percent-encoded instead of base64 encoded
VECTOR_MARKUP_EXTENSIONS = {".svg"}


def get_mime_type(extension: str) -> str:
    """Get the MIME type for a file extension.

    Args:
        extension: File extension including dot (e.g., '.png')

    Returns:
        MIME type string, or 'application/octet-stream' for unknown types
    """
    return MIME_TYPES.get(extension.lower(), DEFAULT_MIME_TYPE)


def can_inline(extension: str) -> bool:
    return extension.lower() not in NEVER_INLINE_EXTENSIONS


def is_vector_markup(extension: str) -> bool:
    return extension.lower() in VECTOR_MARKUP_EXTENSIONS


def get_file_category(extension: str) -> FileCategory:
    """Determine the file category for an extension.

    Args:
        extension: File extension including dot

    Returns:
        One of 'html', 'javascript', 'css', 'image', 'font', 'media', 'other'
    """
    ext = extension.lower()

    if ext in IMAGE_EXTENSIONS:
        return "image"
    if ext in FONT_EXTENSIONS:
        return "font"
    if ext in NEVER_INLINE_EXTENSIONS:
        return "media"
    if ext in (".js", ".mjs"):
        return "javascript"
    if ext == ".css":
        return "css"
    if ext in (".html", ".htm"):
        return "html"
    return "other"
