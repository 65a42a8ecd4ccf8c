"""Asset collection for presentation bundles.

This module builds the asset manifest: it scans stylesheets, provider
settings and the optional layout template for local file references,
resolves them, decides which ones are inlined and allocates an output
path for each distinct file.
"""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .allocator import OutputPathTracker, generate_unique_output_path, log_collision_warnings
from .core.errors import AssetNotFoundError, AssetReadError, BundleError, StylesheetReadError
from .core.mime import get_mime_type
from .core.options import CollectOptions
from .core.types import (
    CONFIGURATION_SOURCE,
    LAYOUT_TEMPLATE_SOURCE,
    AssetEntry,
    AssetManifest,
    AssetSource,
    SourceKind,
    SourceLocation,
)
from .extractors import extract_config_assets, extract_css_urls_with_lines, extract_html_urls
from .filesystem import FileSystem, LocalFileSystem
from .inlining import create_data_uri, should_inline_asset
from .resolver import resolve_asset_path


class AssetCollector:
    """Builds an asset manifest from one set of inputs.

    Collection runs in three phases, always in this order: stylesheets
    (in the order given), provider settings, then the layout template.
    The first missing or unreadable file aborts the run.

    Every call to collect() builds a new manifest. The tracker is shared
    across calls, so repeat runs allocate the same output paths. It can be
    passed in by a caller that wants to inspect collisions afterwards.

    Example:
        >>> collector = AssetCollector(config, ['/site/main.css'], '/site')
        >>> manifest = collector.collect()
        >>> manifest.assets['/site/images/hero.png'].output_path
        'assets/hero.png'
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        css_files: Sequence[str],
        base_path: str,
        options: CollectOptions | None = None,
        fs: FileSystem | None = None,
        tracker: OutputPathTracker | None = None,
    ):
        """Initialize the collector.

        Args:
            config: Compiled configuration mapping
            css_files: Absolute stylesheet paths, in bundle order
            base_path: Directory provider-settings references resolve against
            options: Collection options (defaults to CollectOptions())
            fs: Filesystem to read from (defaults to the local disk)
            tracker: Output path tracker (a fresh one when omitted)
        """
        self.config = config
        self.css_files = list(css_files)
        self.base_path = base_path
        self.options = options or CollectOptions()
        self.fs = fs or LocalFileSystem()
        self.tracker = tracker or OutputPathTracker()
        self._assets: dict[str, AssetEntry] = {}

    def collect(self) -> AssetManifest:
        """Collect every referenced asset into a manifest.

        Returns:
            The completed manifest. ``combined_css`` is left empty.

        Raises:
            StylesheetReadError: If a stylesheet cannot be read
            AssetNotFoundError: If a referenced file does not exist
            AssetReadError: If an asset cannot be read for inlining
        """
        # Each run gets its own entries; earlier manifests are never touched
        self._assets = {}
        self._collect_stylesheets()
        self._collect_configuration()
        if self.options.has_layout_template:
            self._collect_layout_template()

        if self.options.warn_collisions:
            log_collision_warnings(self.tracker)

        return AssetManifest(assets=self._assets, css_source_files=list(self.css_files))

    def _collect_stylesheets(self) -> None:
        for css_file in self.css_files:
            try:
                css_content = self.fs.read_text(css_file)
            except (OSError, UnicodeDecodeError) as e:
                raise StylesheetReadError(
                    f"Failed to read CSS file: {css_file}: {e}", css_file
                ) from e

            for ref in extract_css_urls_with_lines(css_content):
                absolute_path = resolve_asset_path(ref.url, css_file)
                size = self._stat(
                    absolute_path,
                    css_file,
                    SourceLocation(file=css_file, line=ref.line),
                )
                self._register(
                    absolute_path,
                    ref.url,
                    size,
                    AssetSource(file=css_file, kind=SourceKind.STYLESHEET_URL, line=ref.line),
                    allow_inline=True,
                )

    def _collect_configuration(self) -> None:
        # Provider media is loaded at runtime, so it is always copied
        for ref in extract_config_assets(self.config, self.base_path):
            size = self._stat(ref.absolute_path, CONFIGURATION_SOURCE)
            self._register(
                ref.absolute_path,
                ref.original_ref,
                size,
                AssetSource(file=CONFIGURATION_SOURCE, kind=ref.kind),
                allow_inline=False,
            )

    def _collect_layout_template(self) -> None:
        template = self.options.layout_template or ""
        template_path = self.options.layout_template_path or ""

        for url in extract_html_urls(template):
            absolute_path = resolve_asset_path(url, template_path)
            size = self._stat(absolute_path, LAYOUT_TEMPLATE_SOURCE)
            self._register(
                absolute_path,
                url,
                size,
                AssetSource(file=LAYOUT_TEMPLATE_SOURCE, kind=SourceKind.LAYOUT_HTML_URL),
                allow_inline=True,
            )

    def _stat(
        self,
        absolute_path: str,
        source_file: str,
        location: SourceLocation | None = None,
    ) -> int:
        try:
            return self.fs.stat_size(absolute_path)
        except OSError as e:
            raise AssetNotFoundError(absolute_path, source_file, location) from e

    def _register(
        self,
        absolute_path: str,
        original_ref: str,
        size: int,
        source: AssetSource,
        allow_inline: bool,
    ) -> None:
        existing = self._assets.get(absolute_path)
        if existing is not None:
            existing.sources.append(source)
            return

        extension = os.path.splitext(absolute_path)[1]
        mime_type = get_mime_type(extension)
        inline = allow_inline and should_inline_asset(
            extension, size, self.options.inline_threshold
        )

        data_uri = None
        if inline:
            try:
                data_uri = create_data_uri(absolute_path, mime_type, fs=self.fs)
            except (OSError, UnicodeDecodeError) as e:
                raise AssetReadError(
                    f"Failed to read asset: {absolute_path}",
                    absolute_path,
                    source.file,
                    source.line,
                ) from e

        self._assets[absolute_path] = AssetEntry(
            original_ref=original_ref,
            source_path=absolute_path,
            output_path=generate_unique_output_path(absolute_path, self.tracker),
            size=size,
            inline=inline,
            mime_type=mime_type,
            sources=[source],
            data_uri=data_uri,
        )


def collect_assets(
    config: Mapping[str, Any],
    css_files: Sequence[str],
    base_path: str,
    options: CollectOptions | None = None,
    fs: FileSystem | None = None,
    tracker: OutputPathTracker | None = None,
) -> AssetManifest:
    """Collect all assets from stylesheets, configuration and layout template.

    Args:
        config: Compiled configuration mapping
        css_files: Absolute stylesheet paths, in bundle order
        base_path: Directory provider-settings references resolve against
        options: Collection options
        fs: Filesystem to read from
        tracker: Output path tracker to record allocations in

    Returns:
        AssetManifest with one entry per distinct file

    Raises:
        BundleError: On the first missing or unreadable file
    """
    return AssetCollector(config, css_files, base_path, options, fs, tracker).collect()


@dataclass(frozen=True)
class CollectOutcome:
    """Either a manifest or the error that stopped collection."""

    manifest: AssetManifest | None = None
    error: BundleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def collect_assets_with_error_details(
    config: Mapping[str, Any],
    css_files: Sequence[str],
    base_path: str,
    options: CollectOptions | None = None,
    fs: FileSystem | None = None,
    tracker: OutputPathTracker | None = None,
) -> CollectOutcome:
    """Collect assets, returning the failure instead of raising it.

    This is a convenience wrapper around collect_assets() for callers that
    turn failures into diagnostics.

    Returns:
        CollectOutcome with exactly one of manifest/error set
    """
    try:
        manifest = collect_assets(config, css_files, base_path, options, fs, tracker)
    except BundleError as e:
        return CollectOutcome(error=e)
    return CollectOutcome(manifest=manifest)
