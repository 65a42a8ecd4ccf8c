"""Resolution of asset references to absolute filesystem paths.

Resolution is purely lexical: '.' and '..' segments are collapsed and
nothing is checked against the filesystem.
"""

import os
from pathlib import Path


def resolve_from_directory(reference: str, directory: str | Path) -> str:
    """Resolve a reference against a directory.

    Args:
        reference: Relative or absolute reference (e.g., './media/intro.mp4')
        directory: Directory to resolve against

    Returns:
        Absolute, normalized path
    """
    return os.path.abspath(os.path.join(os.fspath(directory), reference))


def resolve_asset_path(reference: str, origin_file: str | Path) -> str:
    """Resolve a reference relative to the file that contains it.

    Example:
        ("../images/hero.png", "/site/styles/main.css") -> "/site/images/hero.png"

    Args:
        reference: The URL reference (e.g., "./images/hero.png")
        origin_file: Path of the referencing stylesheet or template

    Returns:
        Absolute path to the referenced asset
    """
    return resolve_from_directory(reference, os.path.dirname(os.fspath(origin_file)))
