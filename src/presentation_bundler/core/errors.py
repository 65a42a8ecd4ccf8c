"""Error types raised while collecting and bundling assets.

Every error carries structured location data so callers can render a
diagnostic without parsing the message.
"""

from .types import SourceLocation


class BundleError(Exception):
    """Base class for all bundle errors."""


class AssetNotFoundError(BundleError):
    """A resolved local reference does not exist on disk.

    Attributes:
        asset_path: Absolute path that was looked up
        source_file: Referencing stylesheet, or a sentinel such as
            'configuration' or 'layoutTemplate'
        source_location: Line/column of the reference, when known
    """

    def __init__(
        self,
        asset_path: str,
        source_file: str,
        source_location: SourceLocation | None = None,
    ) -> None:
        super().__init__(f"Asset not found: {asset_path}")
        self.asset_path = asset_path
        self.source_file = source_file
        self.source_location = source_location

    @property
    def line(self) -> int | None:
        return self.source_location.line if self.source_location else None


class StylesheetReadError(BundleError):
    """An input stylesheet could not be read."""

    def __init__(self, message: str, css_file: str | None = None) -> None:
        super().__init__(message)
        self.css_file = css_file


class AssetReadError(BundleError):
    """An asset passed the existence check but could not be read for inlining."""

    def __init__(
        self,
        message: str,
        asset_path: str,
        source_file: str,
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.asset_path = asset_path
        self.source_file = source_file
        self.line = line
