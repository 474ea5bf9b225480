"""
Tests for CLI module.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
from click.testing import CliRunner

from filefetch.cli import main
from filefetch.transport import HttpConnection


class TestCLIMain:
    """Test main CLI group."""

    def test_help(self):
        """--help shows usage."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "filefetch" in result.output

    def test_version(self):
        """--version shows version."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output


class TestCLIGet:
    """Test get command."""

    def test_get_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["get", "--help"])
        assert result.exit_code == 0
        assert "Retrieve FILE from SERVER" in result.output

    def test_get_requires_one_source(self, docs_root):
        runner = CliRunner()
        result = runner.invoke(main, ["get", "docs", "readme.txt"])
        assert result.exit_code == 2
        assert "--root or --url" in result.output

        result = runner.invoke(
            main,
            ["get", "docs", "readme.txt", "--root", str(docs_root), "--url", "http://x.test"],
        )
        assert result.exit_code == 2

    def test_get_to_stdout(self, docs_root):
        runner = CliRunner()
        result = runner.invoke(
            main, ["get", "docs", "readme.txt", "--root", str(docs_root), "--chunk-size", "3"]
        )
        assert result.exit_code == 0
        assert result.output == "reading\na\nsplit\nfile\n"

    def test_get_missing_file_is_empty(self, docs_root):
        runner = CliRunner()
        result = runner.invoke(main, ["get", "docs", "missing.txt", "--root", str(docs_root)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_get_to_file(self, docs_root, tmp_path):
        out = tmp_path / "out.txt"
        runner = CliRunner()
        result = runner.invoke(
            main, ["get", "docs", "notes/today.txt", "--root", str(docs_root), "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "héllo wörld"
        assert "Saved" in result.output

    def test_get_root_must_be_directory(self, tmp_path):
        (tmp_path / "plain-file").write_text("x")
        runner = CliRunner()
        result = runner.invoke(
            main, ["get", "docs", "readme.txt", "--root", str(tmp_path / "plain-file")]
        )
        assert result.exit_code == 2

    def test_get_unreachable_root_exits_1(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            main, ["get", "docs", "readme.txt", "--root", str(tmp_path / "missing")]
        )
        assert result.exit_code == 1
        assert "could not retrieve" in result.output

    def test_get_does_not_write_on_failure(self, tmp_path):
        out = tmp_path / "out.txt"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["get", "docs", "readme.txt", "--root", str(tmp_path / "missing"), "-o", str(out)],
        )
        assert result.exit_code == 1
        assert not out.exists()

    def test_get_over_http(self):
        def handler(request):
            if request.method == "HEAD":
                return httpx.Response(200)
            return httpx.Response(200, text="served over http")

        mock_transport = httpx.MockTransport(handler)

        def make_connection(*args, **kwargs):
            return HttpConnection(*args, transport=mock_transport, **kwargs)

        runner = CliRunner()
        with patch("filefetch.cli.HttpConnection", side_effect=make_connection):
            result = runner.invoke(
                main, ["get", "mirror", "report.txt", "--url", "http://files.test"]
            )

        assert result.exit_code == 0
        assert result.output == "served over http"
