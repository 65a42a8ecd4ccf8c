"""Tests for stylesheet combination and url() rewriting."""

from pathlib import Path

import pytest

from presentation_bundler import (
    CollectOptions,
    StylesheetReadError,
    collect_assets,
    process_css,
    rewrite_css_urls,
)


class TestRewriteCssUrls:
    """Test url() rewriting against a collected manifest."""

    def test_rewrites_inline_and_copied(self, tmp_path: Path, make_file) -> None:
        """Test data URIs for inlined assets and output paths for copied ones."""
        css_text = ".a { background: url(./small.png); }\n.b { background: url(\"./big.png\"); }"
        css = make_file("main.css", css_text)
        make_file("small.png", b"s")
        make_file("big.png", b"b" * 50)
        manifest = collect_assets({}, [str(css)], str(tmp_path), CollectOptions(inline_threshold=10))
        small = manifest.assets[str(tmp_path / "small.png")]

        result = rewrite_css_urls(css_text, str(css), manifest)

        assert f"url('{small.data_uri}')" in result
        assert "url('assets/big.png')" in result

    def test_leaves_remote_and_unknown_untouched(self, tmp_path: Path, make_file) -> None:
        """Test that references outside the manifest are kept verbatim."""
        css_text = (
            ".a { background: url(https://cdn.example.com/a.png); }\n"
            ".b { background: url( ./unknown.png ); }\n"
            ".c { background: url('data:image/png;base64,AAAA'); }"
        )
        css = make_file("main.css", css_text)
        manifest = collect_assets({}, [], str(tmp_path))

        assert rewrite_css_urls(css_text, str(css), manifest) == css_text

    def test_blank_content(self, tmp_path: Path) -> None:
        """Test that whitespace-only CSS is returned unchanged."""
        manifest = collect_assets({}, [], str(tmp_path))

        assert rewrite_css_urls("  \n", str(tmp_path / "a.css"), manifest) == "  \n"


class TestProcessCss:
    """Test combining stylesheets."""

    def test_combines_in_order_with_source_comments(self, tmp_path: Path, make_file) -> None:
        """Test ordering, source comments and rewriting across files."""
        first = make_file("styles/first.css", ".a { background: url(../img/logo.png); }")
        second = make_file("second.css", ".b { color: red; }")
        make_file("img/logo.png", b"x" * 20)
        files = [str(first), str(second)]
        manifest = collect_assets({}, files, str(tmp_path), CollectOptions(inline_threshold=0))

        combined = process_css(files, manifest)

        assert combined == (
            "/* === Source: first.css === */\n"
            ".a { background: url('assets/logo.png'); }\n"
            "\n"
            "/* === Source: second.css === */\n"
            ".b { color: red; }"
        )

    def test_no_files(self, tmp_path: Path) -> None:
        """Test that no stylesheets produce an empty string."""
        assert process_css([], collect_assets({}, [], str(tmp_path))) == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that unreadable stylesheets raise StylesheetReadError."""
        manifest = collect_assets({}, [], str(tmp_path))

        with pytest.raises(StylesheetReadError):
            process_css([str(tmp_path / "missing.css")], manifest)
