"""Core types, errors and validation for asset manifests.

This package contains the manifest data model, the MIME tables,
collection options and schema validation shared by every stage of
asset collection.
"""

from .errors import AssetNotFoundError, AssetReadError, BundleError, StylesheetReadError
from .mime import get_file_category, get_mime_type
from .options import DEFAULT_INLINE_THRESHOLD, CollectOptions
from .types import (
    CONFIGURATION_SOURCE,
    LAYOUT_TEMPLATE_SOURCE,
    AssetEntry,
    AssetManifest,
    AssetSource,
    SourceKind,
    SourceLocation,
)
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "AssetEntry",
    "AssetManifest",
    "AssetNotFoundError",
    "AssetReadError",
    "AssetSource",
    "BundleError",
    "CONFIGURATION_SOURCE",
    "CollectOptions",
    "DEFAULT_INLINE_THRESHOLD",
    "LAYOUT_TEMPLATE_SOURCE",
    "SourceKind",
    "SourceLocation",
    "StylesheetReadError",
    "get_file_category",
    "get_mime_type",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
