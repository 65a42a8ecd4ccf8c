"""Command-line interface for asset collection.

This module provides the CLI entry point for generating a bundle asset
manifest from stylesheets, a compiled configuration and an optional
layout template.
"""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any

from .collector import collect_assets
from .core.errors import BundleError
from .core.options import DEFAULT_INLINE_THRESHOLD, CollectOptions
from .core.types import AssetManifest
from .core.validator import validate_manifest_with_error_details
from .css_processor import process_css
from .stats import summarize_manifest
from .writer import copy_assets


def load_config(config_path: Path | None) -> dict[str, Any]:
    """Load a compiled configuration from a JSON file.

    Args:
        config_path: Path to the JSON file, or None for an empty configuration

    Returns:
        Configuration mapping

    Raises:
        ValueError: If the file does not contain a JSON object
    """
    if config_path is None:
        return {}

    with config_path.open("r", encoding="utf-8") as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Configuration must be a JSON object: {config_path}")
    return config


def generate_manifest(
    base_path: Path,
    css_files: list[Path],
    config: dict[str, Any],
    inline_threshold: int = DEFAULT_INLINE_THRESHOLD,
    layout_path: Path | None = None,
    combine_css: bool = False,
) -> AssetManifest:
    """Generate the asset manifest for a bundle.

    Args:
        base_path: Directory configuration references resolve against
        css_files: Stylesheets, in bundle order (relative to base_path or absolute)
        config: Compiled configuration mapping
        inline_threshold: Inline size threshold in bytes, 0 disables inlining
        layout_path: Optional layout template file
        combine_css: Fill ``combined_css`` with the rewritten stylesheets

    Returns:
        The collected manifest

    Raises:
        BundleError: If collection fails
        OSError: If the layout template cannot be read
    """
    base_path_abs = base_path.resolve()
    absolute_css = [str(base_path_abs / css_file) for css_file in css_files]

    layout_template = None
    layout_template_path = None
    if layout_path is not None:
        layout_template_path = str(layout_path.resolve())
        layout_template = Path(layout_template_path).read_text(encoding="utf-8")

    options = CollectOptions(
        inline_threshold=inline_threshold,
        layout_template=layout_template,
        layout_template_path=layout_template_path,
    )

    print(f"Collecting assets from {len(absolute_css)} stylesheet(s)", file=sys.stderr)
    manifest = collect_assets(config, absolute_css, str(base_path_abs), options)

    if combine_css:
        manifest = dataclasses.replace(
            manifest, combined_css=process_css(absolute_css, manifest)
        )

    summary = summarize_manifest(manifest)
    print(
        f"Found {len(manifest.assets)} assets "
        f"({summary.assets_inlined} inlined, {summary.assets_copied} copied)",
        file=sys.stderr,
    )
    if summary.overhead.inlined_original_size:
        print(
            f"Inline overhead: {summary.overhead.inline_overhead_percent:.1f}% "
            f"({summary.overhead.inlined_original_size} -> "
            f"{summary.overhead.inlined_encoded_size} bytes)",
            file=sys.stderr,
        )

    return manifest


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bundle-assets command."""
    parser = argparse.ArgumentParser(
        description="Collect the assets referenced by a presentation bundle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stylesheets only
  bundle-assets --base-path ./presentation --css styles/main.css

  # With provider configuration and a layout template, copying assets
  bundle-assets --base-path ./presentation --css main.css --config config.json \\
      --layout layout.html --copy-to ./dist > manifest.json
        """,
    )

    parser.add_argument(
        "--base-path", required=True, help="Directory relative references resolve against"
    )
    parser.add_argument(
        "--css",
        nargs="+",
        default=[],
        help="Stylesheets in bundle order (relative to --base-path or absolute)",
    )
    parser.add_argument("--config", help="Compiled configuration JSON file")
    parser.add_argument("--layout", help="Layout template HTML file")
    parser.add_argument(
        "--inline-threshold",
        type=int,
        default=DEFAULT_INLINE_THRESHOLD,
        help=f"Inline assets up to this many bytes, 0 disables (default: {DEFAULT_INLINE_THRESHOLD})",
    )
    parser.add_argument(
        "--combine-css",
        action="store_true",
        help="Include the combined, rewritten stylesheet in the manifest",
    )
    parser.add_argument("--copy-to", help="Copy non-inlined assets into this bundle directory")

    args = parser.parse_args(argv)

    base_path = Path(args.base_path)
    if not base_path.is_dir():
        print(f"Error: Base path is not a directory: {base_path}", file=sys.stderr)
        sys.exit(1)

    try:
        manifest = generate_manifest(
            base_path=base_path,
            css_files=[Path(css) for css in args.css],
            config=load_config(Path(args.config) if args.config else None),
            inline_threshold=args.inline_threshold,
            layout_path=Path(args.layout) if args.layout else None,
            combine_css=args.combine_css,
        )
    except BundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        location = getattr(e, "source_location", None)
        if location is not None:
            print(f"  at {location.file}:{location.line}", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: Failed to generate manifest: {e}", file=sys.stderr)
        sys.exit(1)

    print("Validating manifest against schema...", file=sys.stderr)
    is_valid, error_msg = validate_manifest_with_error_details(manifest)
    if not is_valid:
        print("Error: Manifest validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        sys.exit(1)

    if args.copy_to:
        try:
            files = copy_assets(manifest, Path(args.copy_to))
        except BundleError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Copied {len(files)} assets to {args.copy_to}", file=sys.stderr)

    json.dump(manifest.to_dict(), sys.stdout, indent=2)
    print()


if __name__ == "__main__":
    main()
