"""
Unit tests for CLI commands.

Tests cover:
- render command in each output format
- flags command
"""

import json

from typer.testing import CliRunner

from hsi.cli.app import app

runner = CliRunner()


class TestRenderCommand:
    """Tests for render command."""

    def test_render_text(self):
        """Text output shows the summary line and padded fields."""
        result = runner.invoke(
            app,
            ["render", "--id", "com.intel.BiosGuard", "--flag", "success", "--flag", "runtime-attestation"],
        )

        assert result.exit_code == 0
        assert "com.intel.BiosGuard (A)" in result.stdout
        assert "success|runtime-attestation" in result.stdout
        assert "HsiNumber" not in result.stdout

    def test_render_text_with_number(self):
        result = runner.invoke(app, ["render", "--id", "com.example.Test", "--number", "3"])

        assert result.exit_code == 0
        assert "HSI:3" in result.stdout
        assert "HsiNumber:" in result.stdout

    def test_render_empty(self):
        """An attribute with no fields says so."""
        result = runner.invoke(app, ["render"])

        assert result.exit_code == 0
        assert "No fields set" in result.stdout

    def test_render_json(self):
        result = runner.invoke(
            app,
            [
                "render",
                "--id",
                "com.example.Test",
                "--obsolete",
                "com.example.Old",
                "--obsolete",
                "com.example.Old",
                "--flag",
                "runtime-issue",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "AppstreamId": "com.example.Test",
            "Checksum": ["com.example.Old"],
            "Flags": ["runtime-issue"],
        }

    def test_render_wire(self):
        result = runner.invoke(
            app,
            ["render", "--id", "com.intel.BiosGuard", "-f", "success", "-f", "runtime-attestation", "--format", "wire"],
        )

        assert result.exit_code == 0
        assert "{'AppstreamId': <'com.intel.BiosGuard'>, 'TrustFlags': <uint64 513>}" in result.stdout

    def test_render_bad_flag(self):
        """Unknown flag tokens exit with code 2."""
        result = runner.invoke(app, ["render", "--flag", "trusted"])

        assert result.exit_code == 2
        assert "Bad --flag" in result.stdout

    def test_render_negative_number(self):
        result = runner.invoke(app, ["render", "--number", "-1"])

        assert result.exit_code == 2


class TestFlagsCommand:
    """Tests for flags command."""

    def test_flags_lists_vocabulary(self):
        result = runner.invoke(app, ["flags"])

        assert result.exit_code == 0
        for token in ("none", "success", "runtime-updates", "runtime-attestation", "runtime-issue", "runtime-untrusted"):
            assert token in result.stdout

    def test_verbose_flag_accepted(self):
        result = runner.invoke(app, ["--verbose", "flags"])

        assert result.exit_code == 0
