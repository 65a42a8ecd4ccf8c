"""Tests for the bundle-assets command."""

import json
from pathlib import Path

import pytest

from presentation_bundler.cli import load_config, main


@pytest.fixture
def presentation(tmp_path: Path, make_file) -> Path:
    make_file("styles/main.css", ".hero { background: url('../images/hero.png'); }")
    make_file("images/hero.png", b"\x89PNG" + b"\x00" * 64)
    make_file("media/intro.mp4", b"\x00" * 1024)
    make_file("layout.html", '<img src="./images/hero.png"><video poster="./images/poster.jpg"></video>')
    make_file("images/poster.jpg", b"\xff\xd8" * 100)
    make_file(
        "config.json",
        json.dumps({"timelineProviderSettings": {"mediaplayer": {"src": "./media/intro.mp4"}}}),
    )
    return tmp_path


class TestMain:
    """Test the command-line entry point."""

    def test_prints_manifest_json(self, presentation: Path, capsys) -> None:
        """Test a full run with stylesheet, configuration and layout."""
        main(
            [
                "--base-path",
                str(presentation),
                "--css",
                "styles/main.css",
                "--config",
                str(presentation / "config.json"),
                "--layout",
                str(presentation / "layout.html"),
                "--inline-threshold",
                "100",
            ]
        )

        captured = capsys.readouterr()
        manifest = json.loads(captured.out)
        by_output = {asset["output_path"]: asset for asset in manifest["assets"]}

        assert set(by_output) == {"assets/hero.png", "assets/intro.mp4", "assets/poster.jpg"}
        assert by_output["assets/hero.png"]["inline"] is True
        assert [s["type"] for s in by_output["assets/hero.png"]["sources"]] == ["css-url", "html-url"]
        assert by_output["assets/intro.mp4"]["inline"] is False
        assert by_output["assets/poster.jpg"]["inline"] is False
        assert manifest["css_source_files"] == [str(presentation / "styles" / "main.css")]
        assert "Validation" not in captured.out
        assert "Found 3 assets" in captured.err

    def test_combine_and_copy(self, presentation: Path, tmp_path: Path, capsys) -> None:
        """Test combined CSS output and copying into a bundle directory."""
        dist = tmp_path / "dist"

        main(
            [
                "--base-path",
                str(presentation),
                "--css",
                "styles/main.css",
                "--config",
                str(presentation / "config.json"),
                "--inline-threshold",
                "0",
                "--combine-css",
                "--copy-to",
                str(dist),
            ]
        )

        manifest = json.loads(capsys.readouterr().out)
        assert "url('assets/hero.png')" in manifest["combined_css"]
        assert (dist / "assets" / "hero.png").exists()
        assert (dist / "assets" / "intro.mp4").exists()

    def test_missing_asset_exits_with_location(self, tmp_path: Path, make_file, capsys) -> None:
        """Test that a broken reference exits 1 and reports file and line."""
        css = make_file("main.css", "\n.a { background: url(./missing.png); }")

        with pytest.raises(SystemExit) as exc_info:
            main(["--base-path", str(tmp_path), "--css", "main.css"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Asset not found" in captured.err
        assert f"{css}:2" in captured.err

    def test_base_path_must_exist(self, tmp_path: Path, capsys) -> None:
        """Test that a missing base path is rejected."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--base-path", str(tmp_path / "nope")])

        assert exc_info.value.code == 1
        assert "not a directory" in capsys.readouterr().err


class TestLoadConfig:
    """Test configuration loading."""

    def test_none_is_empty(self) -> None:
        """Test that no configuration file means an empty configuration."""
        assert load_config(None) == {}

    def test_rejects_non_object(self, tmp_path: Path) -> None:
        """Test that a JSON array is not a configuration."""
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            load_config(path)
