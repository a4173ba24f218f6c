"""Tests for the CLI dispatcher."""

import io
import json

import pytest

from codeblock.cli import main


class TestCLIDispatch:
    def test_no_command_shows_help(self, capsys):
        ret = main([])
        assert ret == 1
        out = capsys.readouterr().out
        assert "highlight" in out
        assert "gallery" in out

    def test_help_lists_all_skills(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        out = capsys.readouterr().out
        for skill in ("highlight", "gallery"):
            assert skill in out

    def test_missing_action_shows_help(self, capsys):
        with pytest.raises(SystemExit):
            main(["gallery"])
        assert "list" in capsys.readouterr().out

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            main(["nonexistent_command"])


class TestHighlightCLI:
    def test_snippet_argument(self, capsys):
        ret = main(["highlight", "snippet", "let x = 1", "--format", "json"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["language"] == "swift"
        assert [s["text"] for s in output["spans"]] == ["let", "1"]
        assert json.loads(output["highlighted"])["text"] == "let x = 1"

    def test_snippet_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("def f(): return None\n"))
        ret = main(["highlight", "snippet", "--language", "python"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["language"] == "python"
        assert [s["text"] for s in output["spans"]] == ["def", "return", "None"]

    def test_snippet_unknown_language(self, capsys):
        ret = main(["highlight", "snippet", "x", "--language", "cobol"])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "cobol" in output["error"]

    def test_snippet_unknown_style(self, capsys):
        ret = main(["highlight", "snippet", "x", "--style", "no_such_style_xyz"])
        assert ret == 1
        assert "error" in json.loads(capsys.readouterr().out)

    def test_snippet_unknown_style_with_json(self, capsys):
        ret = main(["highlight", "snippet", "x", "--format", "json", "--style", "bogus"])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "bogus" in output["error"]

    def test_file(self, swift_file, capsys):
        ret = main(["highlight", "file", str(swift_file), "--format", "terminal"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["file"] == str(swift_file)
        assert output["language"] == "swift"
        assert "\x1b[" in output["highlighted"]

    def test_file_missing(self, tmp_path, capsys):
        ret = main(["highlight", "file", str(tmp_path / "nope.swift")])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "not found" in output["error"]

    def test_file_is_directory(self, tmp_path, capsys):
        ret = main(["highlight", "file", str(tmp_path)])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert output["error"].startswith(f"Cannot read {tmp_path}")

    def test_format_choices_follow_renderer(self):
        from codeblock.skills.highlight.renderer import FORMATS
        for fmt in FORMATS:
            assert main(["highlight", "snippet", "let", "--format", fmt]) == 0


class TestGalleryCLI:
    def test_list(self, capsys):
        ret = main(["gallery", "list"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 11

    def test_list_section(self, capsys):
        ret = main(["gallery", "list", "--section", "iOS 17+"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert [s["title"] for s in output["snippets"]] == ["@Bindable"]

    def test_show(self, capsys):
        ret = main(["-v", "gallery", "show", "@State", "--format", "json"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["name"] == "state"
        assert output["source"].startswith("struct CounterView")

    def test_show_unknown(self, capsys):
        ret = main(["gallery", "show", "nope"])
        assert ret == 1
        output = json.loads(capsys.readouterr().out)
        assert "nope" in output["error"]
