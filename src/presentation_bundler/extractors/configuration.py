"""Extraction of media sources from provider settings.

Only the provider settings section of a compiled configuration is read:
each provider's ``src`` (video, audio) and ``path`` (lottie) string fields.
Nested structures are not searched.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..core.types import SourceKind
from ..resolver import resolve_from_directory
from .base import is_local_reference

PROVIDER_SETTINGS_KEY = "timelineProviderSettings"
ASSET_FIELDS = ("src", "path")


@dataclass(frozen=True)
class ConfigAssetRef:
    """A provider-settings reference resolved against the base path."""

    absolute_path: str
    original_ref: str
    kind: SourceKind = SourceKind.CONFIGURATION


def extract_config_assets(config: Mapping[str, Any], base_path: str) -> list[ConfigAssetRef]:
    """Collect local media references from provider settings.

    Args:
        config: Compiled configuration mapping
        base_path: Directory relative references are resolved against

    Returns:
        References in provider order; for each provider ``src`` comes
        before ``path``
    """
    settings = config.get(PROVIDER_SETTINGS_KEY)
    if not isinstance(settings, Mapping):
        return []

    refs: list[ConfigAssetRef] = []
    for provider_settings in settings.values():
        if not isinstance(provider_settings, Mapping):
            continue

        for field_name in ASSET_FIELDS:
            value = provider_settings.get(field_name)
            if isinstance(value, str) and is_local_reference(value):
                refs.append(
                    ConfigAssetRef(
                        absolute_path=resolve_from_directory(value, base_path),
                        original_ref=value,
                    )
                )

    return refs
