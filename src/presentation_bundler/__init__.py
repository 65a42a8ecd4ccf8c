"""Presentation Bundler - Asset Collection.

This package finds every local file a compiled presentation references
(stylesheet url() values, provider media sources, layout template images)
and produces a deterministic manifest describing how each file ships in a
self-contained bundle: inlined as a data URI or copied under assets/.
"""

# Core library interface
from .collector import (
    AssetCollector,
    CollectOutcome,
    collect_assets,
    collect_assets_with_error_details,
)
from .allocator import (
    Collision,
    OutputPathTracker,
    generate_unique_output_path,
    log_collision_warnings,
)
from .filesystem import FileSystem, LocalFileSystem

# Core types and errors
from .core import (
    AssetEntry,
    AssetManifest,
    AssetNotFoundError,
    AssetReadError,
    AssetSource,
    BundleError,
    CollectOptions,
    SourceKind,
    SourceLocation,
    StylesheetReadError,
    validate_manifest,
    validate_manifest_with_error_details,
)

# Stages usable on their own
from .extractors import (
    extract_config_assets,
    extract_css_urls,
    extract_css_urls_with_lines,
    extract_html_urls,
)
from .inlining import InlineDecision, create_data_uri, decide_inline, should_inline_asset
from .resolver import resolve_asset_path

# Downstream helpers
from .css_processor import process_css, rewrite_css_urls
from .stats import calculate_inline_overhead, summarize_manifest
from .writer import BundleFile, copy_assets

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "AssetCollector",
    "CollectOutcome",
    "collect_assets",
    "collect_assets_with_error_details",
    "Collision",
    "OutputPathTracker",
    "generate_unique_output_path",
    "log_collision_warnings",
    "FileSystem",
    "LocalFileSystem",
    # Core types and errors
    "AssetEntry",
    "AssetManifest",
    "AssetSource",
    "CollectOptions",
    "SourceKind",
    "SourceLocation",
    "BundleError",
    "AssetNotFoundError",
    "AssetReadError",
    "StylesheetReadError",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Stages
    "extract_config_assets",
    "extract_css_urls",
    "extract_css_urls_with_lines",
    "extract_html_urls",
    "InlineDecision",
    "create_data_uri",
    "decide_inline",
    "should_inline_asset",
    "resolve_asset_path",
    # Downstream helpers
    "process_css",
    "rewrite_css_urls",
    "calculate_inline_overhead",
    "summarize_manifest",
    "BundleFile",
    "copy_assets",
]
