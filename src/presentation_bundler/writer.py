"""Copying of non-inlined assets into a bundle directory."""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from .core.errors import BundleError
from .core.mime import FileCategory, get_file_category
from .core.types import AssetManifest


@dataclass(frozen=True)
class BundleFile:
    """A file written to the bundle, relative to the output directory."""

    path: str
    size: int
    category: FileCategory


def copy_assets(manifest: AssetManifest, output_dir: Path) -> list[BundleFile]:
    """Copy every non-inlined asset to its allocated output path.

    Args:
        manifest: Manifest produced by asset collection
        output_dir: Bundle root directory (created if missing)

    Returns:
        One BundleFile per copied asset, in manifest order

    Raises:
        BundleError: If a directory cannot be created or a copy fails
    """
    copied = manifest.copied()
    if not copied:
        return []

    try:
        (output_dir / "assets").mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BundleError(f"Failed to create assets directory in {output_dir}: {e}") from e

    files: list[BundleFile] = []
    for asset in copied:
        destination = output_dir / asset.output_path
        try:
            shutil.copyfile(asset.source_path, destination)
        except OSError as e:
            raise BundleError(f"Failed to copy asset: {asset.source_path}: {e}") from e

        files.append(
            BundleFile(
                path=asset.output_path,
                size=asset.size,
                category=get_file_category(os.path.splitext(asset.source_path)[1]),
            )
        )

    return files
