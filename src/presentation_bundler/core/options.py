"""Options for asset collection."""

from dataclasses import dataclass

# Assets at or below this many bytes are inlined by default (50KB)
DEFAULT_INLINE_THRESHOLD = 51200


@dataclass(frozen=True)
class CollectOptions:
    """Options controlling asset collection.

    Attributes:
        inline_threshold: Size in bytes at or below which inlinable assets are
            embedded as data URIs. 0 disables inlining entirely.
        layout_template: Optional layout template HTML content
        layout_template_path: Path of the layout template file, used to
            resolve its relative references. Required with layout_template.
        warn_collisions: Print output filename collisions to stderr
    """

    inline_threshold: int = DEFAULT_INLINE_THRESHOLD
    layout_template: str | None = None
    layout_template_path: str | None = None
    warn_collisions: bool = True

    def __post_init__(self) -> None:
        if self.inline_threshold < 0:
            raise ValueError(
                f"inline_threshold must be >= 0, got {self.inline_threshold}"
            )
        if (self.layout_template is None) != (self.layout_template_path is None):
            raise ValueError(
                "layout_template and layout_template_path must be provided together"
            )

    @property
    def has_layout_template(self) -> bool:
        return self.layout_template is not None and self.layout_template_path is not None
