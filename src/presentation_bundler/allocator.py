"""Output path allocation for bundle assets.

All assets are flattened into ``assets/<filename>``. When two different
source files share a filename, the one allocated later gets a short hash
of its source path appended to the stem. Allocation is therefore
order-sensitive: whichever source claims a filename first keeps the
plain name.
"""

import hashlib
import itertools
import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

ASSETS_DIR = "assets"
HASH_LENGTH = 8


@dataclass(frozen=True)
class Collision:
    """Two distinct source files that wanted the same output filename."""

    file_name: str
    source1: str  # Source that kept the plain name
    source2: str  # Source that received the suffixed name
    resolved_path: str


@dataclass
class OutputPathTracker:
    """Allocation state for one collection run.

    Attributes:
        used_paths: Output path -> source path that claimed it
        collisions: Detected collisions, in allocation order
    """

    used_paths: dict[str, str] = field(default_factory=dict)
    collisions: list[Collision] = field(default_factory=list)


def path_hash(source_path: str) -> str:
    """Return the 8-character hex suffix used to disambiguate a source path."""
    return hashlib.md5(source_path.encode("utf-8")).hexdigest()[:HASH_LENGTH]


def generate_unique_output_path(source_path: str, tracker: OutputPathTracker) -> str:
    """Allocate a bundle-relative output path for a source file.

    Args:
        source_path: Absolute path to the source file
        tracker: Allocation state, updated in place

    Returns:
        Output path relative to bundle root, e.g. "assets/hero.png" or
        "assets/hero-a1b2c3d4.png"
    """
    file_name = os.path.basename(source_path)
    output_path = f"{ASSETS_DIR}/{file_name}"

    existing_source = tracker.used_paths.get(output_path)
    if existing_source is None or existing_source == source_path:
        tracker.used_paths[output_path] = source_path
        return output_path

    for candidate in _suffixed_candidates(file_name, source_path):
        owner = tracker.used_paths.get(candidate)
        # Repeat request from a source that already lost this collision
        if owner == source_path:
            return candidate
        if owner is None:
            break

    tracker.collisions.append(
        Collision(
            file_name=file_name,
            source1=existing_source,
            source2=source_path,
            resolved_path=candidate,
        )
    )
    tracker.used_paths[candidate] = source_path
    return candidate


def _suffixed_candidates(file_name: str, source_path: str) -> Iterator[str]:
    """Yield disambiguated names: the hash suffix first, then numbered variants.

    A numbered variant is only needed when another source's own basename
    already equals the hash-suffixed name.
    """
    stem, ext = os.path.splitext(file_name)
    suffix = path_hash(source_path)
    yield f"{ASSETS_DIR}/{stem}-{suffix}{ext}"
    for counter in itertools.count(2):
        yield f"{ASSETS_DIR}/{stem}-{suffix}-{counter}{ext}"


def format_collision(collision: Collision) -> list[str]:
    return [
        f"Warning: Asset filename collision detected: {collision.file_name}",
        f"  Source 1: {collision.source1}",
        f"  Source 2: {collision.source2}",
        f"  Resolved to: {collision.resolved_path}",
    ]


def log_collision_warnings(tracker: OutputPathTracker, stream: TextIO | None = None) -> None:
    """Print every detected collision as a warning.

    Args:
        tracker: Tracker holding the collisions
        stream: Output stream (defaults to stderr)
    """
    stream = stream or sys.stderr
    for collision in tracker.collisions:
        for line in format_collision(collision):
            print(line, file=stream)
