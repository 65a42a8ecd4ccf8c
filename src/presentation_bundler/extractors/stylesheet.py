"""Extraction of url() references from stylesheets.

Covers background images and @font-face sources, including several
comma-separated url() values in a single declaration.
"""

import re
from dataclasses import dataclass

from .base import is_local_reference, unique_in_order

# url(x), url('x'), url("x"); the closing quote must match the opening one
URL_PATTERN = re.compile(r"""url\(\s*(['"]?)([^'")]+)\1\s*\)""", re.IGNORECASE)


@dataclass(frozen=True)
class CssUrlRef:
    """A url() reference with its 1-indexed line number."""

    url: str
    line: int


def extract_css_urls_with_lines(css_content: str) -> list[CssUrlRef]:
    """Extract local url() references from CSS with line numbers.

    Duplicates are kept so every occurrence can be reported with its
    own location.

    Args:
        css_content: CSS content string

    Returns:
        List of CssUrlRef in encounter order
    """
    results: list[CssUrlRef] = []

    for line_number, line in enumerate(css_content.split("\n"), start=1):
        for match in URL_PATTERN.finditer(line):
            url = match.group(2).strip()
            if is_local_reference(url):
                results.append(CssUrlRef(url=url, line=line_number))

    return results


def extract_css_urls(css_content: str) -> list[str]:
    """Extract unique local url() references from CSS.

    Args:
        css_content: CSS content string

    Returns:
        Unique references in order of first occurrence
    """
    return unique_in_order(
        url
        for url in (match.group(2).strip() for match in URL_PATTERN.finditer(css_content))
        if is_local_reference(url)
    )
