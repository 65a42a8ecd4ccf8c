"""Tests for inline decisions and data URI encoding."""

import base64
from pathlib import Path

import pytest

from presentation_bundler.inlining import (
    create_data_uri,
    decide_inline,
    encode_svg,
    should_inline_asset,
)


class TestShouldInlineAsset:
    """Test the inline decision policy."""

    def test_threshold_boundary(self) -> None:
        """Test that exactly-threshold assets inline and one byte more does not."""
        assert should_inline_asset(".png", 1024, 1024) is True
        assert should_inline_asset(".png", 1025, 1024) is False

    def test_zero_threshold_disables_inlining(self) -> None:
        """Test that threshold 0 inlines nothing, not even empty files."""
        assert should_inline_asset(".png", 0, 0) is False
        assert should_inline_asset(".svg", 1, 0) is False

    @pytest.mark.parametrize("extension", [".mp4", ".webm", ".ogg", ".mov", ".mp3", ".wav", ".MP4"])
    def test_media_never_inlined(self, extension: str) -> None:
        """Test that video/audio is copied regardless of size."""
        assert should_inline_asset(extension, 1, 10**9) is False

    def test_unknown_extension_follows_threshold(self) -> None:
        """Test that unrecognized types are still subject to the size rule."""
        assert should_inline_asset(".dat", 10, 100) is True
        assert should_inline_asset("", 10, 100) is True


class TestDecideInline:
    """Test inline decisions with reasons."""

    def test_reasons(self) -> None:
        """Test each reason and that it agrees with the boolean policy."""
        assert decide_inline(".mp4", 1, 100).reason == "never-inline-type"
        assert decide_inline(".png", 1, 0).reason == "inlining-disabled"
        assert decide_inline(".png", 101, 100).reason == "over-threshold"

        decision = decide_inline(".png", 100, 100)
        assert decision.should_inline is True
        assert decision.reason == "under-threshold"
        assert decision.mime_type == "image/png"
        assert decision.size == 100

    def test_agrees_with_should_inline_asset(self) -> None:
        """Test that both entry points share one policy."""
        for extension in (".png", ".svg", ".mp3", ".woff2"):
            for size, threshold in ((0, 0), (5, 10), (10, 10), (11, 10)):
                assert (
                    decide_inline(extension, size, threshold).should_inline
                    == should_inline_asset(extension, size, threshold)
                )


class TestCreateDataUri:
    """Test data URI encoding."""

    def test_base64_for_binary(self, tmp_path: Path) -> None:
        """Test that raster images are base64 encoded."""
        content = b"\x89PNG\r\n\x1a\n\x00\x01"
        image = tmp_path / "hero.png"
        image.write_bytes(content)

        data_uri = create_data_uri(str(image), "image/png")

        assert data_uri == "data:image/png;base64," + base64.b64encode(content).decode("ascii")

    def test_svg_is_percent_encoded(self, tmp_path: Path) -> None:
        """Test that SVG uses percent-encoding and no base64 marker."""
        svg = tmp_path / "icon.svg"
        svg.write_text('<svg xmlns="http://www.w3.org/2000/svg"></svg>', encoding="utf-8")

        data_uri = create_data_uri(str(svg))

        assert ";base64" not in data_uri
        assert data_uri == (
            "data:image/svg+xml,"
            "%3Csvg%20xmlns%3D%22http%3A%2F%2Fwww.w3.org%2F2000%2Fsvg%22%3E%3C%2Fsvg%3E"
        )

    def test_svg_with_invalid_utf8_still_encodes(self, tmp_path: Path) -> None:
        """Test that stray non-UTF-8 bytes become replacement characters."""
        svg = tmp_path / "icon.svg"
        svg.write_bytes(b"<svg>\xff</svg>")

        data_uri = create_data_uri(str(svg))

        assert data_uri == "data:image/svg+xml,%3Csvg%3E%EF%BF%BD%3C%2Fsvg%3E"

    def test_svg_escapes_quotes(self) -> None:
        """Test that both quote characters are escaped."""
        encoded = encode_svg("<text font-family='a' fill=\"b\">x</text>")

        assert "'" not in encoded
        assert '"' not in encoded
        assert "%27a%27" in encoded
        assert "%22b%22" in encoded

    def test_mime_type_derived_from_extension(self, tmp_path: Path) -> None:
        """Test the default MIME lookup, including unknown types."""
        font = tmp_path / "font.woff2"
        font.write_bytes(b"wOF2")
        blob = tmp_path / "data.bin"
        blob.write_bytes(b"x")

        assert create_data_uri(str(font)).startswith("data:font/woff2;base64,")
        assert create_data_uri(str(blob)).startswith("data:application/octet-stream;base64,")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that read failures propagate as OSError."""
        with pytest.raises(OSError):
            create_data_uri(str(tmp_path / "missing.png"))
