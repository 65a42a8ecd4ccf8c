"""Extraction of asset references from layout template HTML.

Collects src attributes on img/source/video/audio elements, poster
attributes on video elements and every URL listed in srcset attributes.
"""

import re

from .base import is_local_reference, unique_in_order

SRC_PATTERN = re.compile(
    r"""<(?:img|source|video|audio)[^>]*\ssrc\s*=\s*(['"])([^'"]+)\1""", re.IGNORECASE
)
POSTER_PATTERN = re.compile(r"""<video[^>]*\sposter\s*=\s*(['"])([^'"]+)\1""", re.IGNORECASE)
SRCSET_PATTERN = re.compile(r"""srcset\s*=\s*(['"])([^'"]+)\1""", re.IGNORECASE)


def parse_srcset(srcset_value: str) -> list[str]:
    """Extract the URLs from a srcset attribute value.

    Example:
        "hero-1x.png 1x, hero-2x.png 2x" -> ["hero-1x.png", "hero-2x.png"]

    Args:
        srcset_value: The raw attribute value

    Returns:
        URLs in order, descriptors dropped
    """
    urls: list[str] = []
    for candidate in srcset_value.split(","):
        parts = candidate.split()
        if parts:
            urls.append(parts[0])
    return urls


def extract_html_urls(html_content: str) -> list[str]:
    """Extract unique local asset URLs from HTML.

    Args:
        html_content: HTML content string

    Returns:
        Unique references: src attributes first, then posters, then srcset
        entries, each group in document order
    """
    candidates: list[str] = []

    for match in SRC_PATTERN.finditer(html_content):
        candidates.append(match.group(2).strip())

    for match in POSTER_PATTERN.finditer(html_content):
        candidates.append(match.group(2).strip())

    for match in SRCSET_PATTERN.finditer(html_content):
        candidates.extend(parse_srcset(match.group(2)))

    return unique_in_order(url for url in candidates if is_local_reference(url))
