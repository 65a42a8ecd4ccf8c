"""Shared reference filtering for all extractors.

Every extractor applies the same predicate so stylesheet, layout and
configuration references agree on what counts as a local file.
"""

from collections.abc import Iterable


def is_external_url(url: str) -> bool:
    return url.startswith(("http://", "https://", "//"))


def is_data_uri(url: str) -> bool:
    return url.startswith("data:")


def is_local_reference(url: str) -> bool:
    """Check whether a reference points at a local file.

    Args:
        url: Reference text (already stripped)

    Returns:
        False for empty, remote (http, https, protocol-relative) and data URIs
    """
    return bool(url) and not is_external_url(url) and not is_data_uri(url)


def unique_in_order(urls: Iterable[str]) -> list[str]:
    """Deduplicate references, keeping the first occurrence's position."""
    return list(dict.fromkeys(urls))
