"""
Test suite for the post-content CLI.

Runs the Typer application in an isolated working directory so that no
configuration file of the developer leaks into the tests.
"""

import json

import pytest
from typer.testing import CliRunner

from post_content_parser.cli.cli import app

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run every command inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "POST_CONTENT_SYNTAX_FILE",
        "POST_CONTENT_PARAGRAPH_BREAK_THRESHOLD",
        "POST_CONTENT_STRICT",
        "POST_CONTENT_LOG_LEVEL",
        "POST_CONTENT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def post_file(workdir):
    """Write a post using known and unknown elements."""
    path = workdir / "post.html"
    path.write_text(
        'Hello <strong>world</strong><br><br><span class="spoiler">secret</span>',
        encoding="utf-8",
    )
    return path


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestParseCommand:
    """Test the parse command."""

    def test_parse_to_file(self, post_file, syntax_file, workdir):
        """Test parsing a post with an explicit syntax file."""
        output = workdir / "out.json"
        result = runner.invoke(
            app, ["parse", str(post_file), "--syntax", str(syntax_file), "--output", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert read_json(output) == [
            ["Hello ", {"type": "text", "style": "bold", "content": "world"}],
            [{"type": "spoiler", "content": "secret"}],
        ]

    def test_parse_to_stdout(self, post_file, syntax_file):
        """Test that the JSON result is printed when no output file is given."""
        result = runner.invoke(app, ["parse", str(post_file), "--syntax", str(syntax_file)])
        assert result.exit_code == 0, result.output
        assert '"type": "spoiler"' in result.output

    def test_parse_stdin(self, syntax_file, workdir):
        """Test reading markup from standard input."""
        output = workdir / "out.json"
        result = runner.invoke(
            app,
            ["parse", "-", "--syntax", str(syntax_file), "--output", str(output)],
            input="a<br><br>b",
        )
        assert result.exit_code == 0, result.output
        assert read_json(output) == [["a"], ["b"]]

    def test_threshold_option(self, syntax_file, workdir):
        """Test overriding the paragraph break threshold."""
        output = workdir / "out.json"
        result = runner.invoke(
            app,
            ["parse", "-", "--syntax", str(syntax_file), "--threshold", "3", "--output", str(output)],
            input="a<br><br>b",
        )
        assert result.exit_code == 0, result.output
        assert read_json(output) == [["a", "\n", "\n", "b"]]

    def test_diagnostics_are_shown(self, syntax_file, workdir):
        """Test that diagnostics are listed without failing by default."""
        output = workdir / "out.json"
        result = runner.invoke(
            app,
            ["parse", "-", "--syntax", str(syntax_file), "--output", str(output)],
            input="<u>x</u>",
        )
        assert result.exit_code == 0, result.output
        assert "unknown_element_type" in result.output
        assert read_json(output) == "x"

    def test_strict_mode_fails_on_diagnostics(self, syntax_file, workdir):
        """Test that strict mode turns diagnostics into a failure."""
        output = workdir / "out.json"
        result = runner.invoke(
            app,
            ["parse", "-", "--syntax", str(syntax_file), "--strict", "--output", str(output)],
            input="<u>x</u>",
        )
        assert result.exit_code == 1
        assert "strict mode" in result.output
        assert read_json(output) == "x"

    def test_syntax_from_configuration(self, post_file, syntax_file, workdir):
        """Test that the configured syntax file is used."""
        (workdir / "postcontent.config.json").write_text(
            json.dumps({"syntax_file": syntax_file.name, "parser": {"strict": True}}),
            encoding="utf-8",
        )
        output = workdir / "out.json"
        result = runner.invoke(app, ["parse", str(post_file), "--output", str(output)])
        assert result.exit_code == 0, result.output
        assert read_json(output)[1] == [{"type": "spoiler", "content": "secret"}]

    def test_explicit_configuration_path(self, post_file, syntax_file, workdir):
        """Test the global --config-path option."""
        config = workdir / "custom.json"
        config.write_text(json.dumps({"syntax_file": str(syntax_file)}), encoding="utf-8")
        output = workdir / "out.json"
        result = runner.invoke(
            app, ["-c", str(config), "parse", str(post_file), "--output", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert len(read_json(output)) == 2

    def test_context_json(self, workdir):
        """Test passing a JSON context to the element factories."""
        syntax = workdir / "links.json"
        syntax.write_text(
            json.dumps([{"tag": "a", "type": "link", "attributeProperties": {"url": "href"}}]),
            encoding="utf-8",
        )
        output = workdir / "out.json"
        result = runner.invoke(
            app,
            ["parse", "-", "--syntax", str(syntax), "--context-json", '{"board": "b"}', "--output", str(output)],
            input='<a href="/b/1">1</a>',
        )
        assert result.exit_code == 0, result.output
        assert read_json(output) == [[{"type": "link", "url": "/b/1", "content": "1"}]]

    def test_invalid_context_json(self, syntax_file):
        """Test rejection of malformed context JSON."""
        result = runner.invoke(
            app, ["parse", "-", "--syntax", str(syntax_file), "--context-json", "{"], input="x"
        )
        assert result.exit_code == 2

    def test_missing_syntax(self, post_file):
        """Test parsing without any syntax."""
        result = runner.invoke(app, ["parse", str(post_file)])
        assert result.exit_code == 1
        assert "No syntax given" in result.output

    def test_missing_input_file(self, syntax_file, workdir):
        """Test a missing markup file."""
        result = runner.invoke(app, ["parse", str(workdir / "nope.html"), "--syntax", str(syntax_file)])
        assert result.exit_code == 1
        assert "File Not Found" in result.output

    def test_invalid_configuration(self, post_file, workdir):
        """Test that configuration errors abort the command."""
        (workdir / "postcontent.config.json").write_text(
            json.dumps({"parser": {"paragraph_break_threshold": 0}}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["parse", str(post_file)])
        assert result.exit_code == 1
        assert "Configuration Error" in result.output


class TestCheckSyntaxCommand:
    """Test the check-syntax command."""

    def test_valid_syntax(self, syntax_file, workdir):
        """Test listing the rules of a valid syntax."""
        result = runner.invoke(app, ["check-syntax", str(syntax_file)])
        assert result.exit_code == 0, result.output
        assert "Syntax rules (4)" in result.output
        assert "Valid syntax" in result.output

    def test_invalid_syntax(self, workdir):
        """Test reporting an invalid syntax."""
        path = workdir / "bad.json"
        path.write_text(json.dumps([{"tag": "b"}]), encoding="utf-8")
        result = runner.invoke(app, ["check-syntax", str(path)])
        assert result.exit_code == 1
        assert "Syntax Error" in result.output


class TestUtilityCommands:
    """Test info and version."""

    def test_version(self, workdir):
        """Test the version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "v0.1.0" in result.output

    def test_info(self, workdir):
        """Test the info command."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0, result.output
        assert "Paragraph break threshold: 2" in result.output
