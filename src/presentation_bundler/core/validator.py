"""JSON Schema validation for asset manifests.

This module loads the bundled JSON Schema and validates serialized
manifests before they are handed to downstream tools.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import AssetManifest

SCHEMA_PATH = Path(__file__).parent / "schemas" / "asset-manifest.schema.json"


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(manifest: AssetManifest | dict[str, Any]) -> None:
    """Validate a manifest against the JSON Schema.

    Output paths must also be unique across all entries, which the schema
    cannot express on its own.

    Args:
        manifest: The manifest, or its ``to_dict()`` form

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    instance = manifest.to_dict() if isinstance(manifest, AssetManifest) else manifest
    schema = load_schema()
    jsonschema.validate(instance=instance, schema=schema)

    seen: dict[str, str] = {}
    for asset in instance["assets"]:
        output_path = asset["output_path"]
        if output_path in seen:
            raise ValidationError(
                f"Duplicate output path {output_path!r} for "
                f"{seen[output_path]} and {asset['source_path']}"
            )
        seen[output_path] = asset["source_path"]


def validate_manifest_with_error_details(
    manifest: AssetManifest | dict[str, Any],
) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    Args:
        manifest: The manifest to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        return False, f"Validation error at {error_path}: {e.message}"
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
