"""Tests for the folder-organizer CLI."""

import errno
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from folder_organizer.cli.main import cli
from folder_organizer.version import __version__

REAL_RENAME = os.rename


def _cross_device_rename(src, dst):
    if os.path.isfile(src):
        raise OSError(errno.EXDEV, "Invalid cross-device link")
    return REAL_RENAME(src, dst)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's FOLDER_ORGANIZER_* settings out of the tests."""
    for name in ("TRANSFER_MODE", "VERIFY_COPIES", "AUTO_FALLBACK"):
        monkeypatch.delenv(f"FOLDER_ORGANIZER_{name}", raising=False)


class TestOrganizeCommand:
    """Tests for the organize command."""

    def test_organize_with_yes(self, make_tree):
        root = make_tree(["a.jpg", "b.pdf", "pics/c.png"])
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(root), "--yes"])

        assert result.exit_code == 0
        assert "Results" in result.output
        assert (root / "Image Files" / "a.jpg").exists()
        assert (root / "Image Files" / "c.png").exists()
        assert (root / "PDF Files" / "b.pdf").exists()

    def test_confirmation_declined(self, make_tree, snapshot):
        root = make_tree(["a.jpg"])
        before = snapshot(root)
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(root)], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert snapshot(root) == before

    def test_confirmation_accepted(self, make_tree):
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(root)], input="y\n")

        assert result.exit_code == 0
        assert (root / "Image Files" / "a.jpg").exists()

    def test_missing_root(self, tmp_path):
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(tmp_path / "missing"), "--yes"])

        assert result.exit_code == 1
        assert "path_not_found" in result.output

    def test_fallback_mode_option(self, make_tree):
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        result = runner.invoke(
            cli, ["organize", str(root), "--yes", "--mode", "fallback", "--no-verify"]
        )

        assert result.exit_code == 0
        assert "fallback" in result.output
        assert (root / "Image Files" / "a.jpg").exists()

    def test_mode_from_environment(self, make_tree, monkeypatch):
        monkeypatch.setenv("FOLDER_ORGANIZER_TRANSFER_MODE", "fallback")
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        with patch(
            "folder_organizer.organization.path_safety.os.rename",
            side_effect=_cross_device_rename,
        ):
            result = runner.invoke(cli, ["organize", str(root), "--yes"])

        assert result.exit_code == 0
        assert (root / "Image Files" / "a.jpg").exists()

    def test_auto_fallback_after_cross_device(self, make_tree):
        root = make_tree(["a.jpg", "b.pdf"])
        runner = CliRunner()

        with patch(
            "folder_organizer.organization.path_safety.os.rename",
            side_effect=_cross_device_rename,
        ):
            result = runner.invoke(
                cli, ["organize", str(root), "--yes", "--auto-fallback"]
            )

        assert result.exit_code == 0
        assert "different devices" in result.output
        assert (root / "Image Files" / "a.jpg").exists()
        assert (root / "PDF Files" / "b.pdf").exists()

    def test_fallback_retry_prompt_accepted(self, make_tree):
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        with patch(
            "folder_organizer.organization.path_safety.os.rename",
            side_effect=_cross_device_rename,
        ):
            result = runner.invoke(cli, ["organize", str(root)], input="y\ny\n")

        assert result.exit_code == 0
        assert (root / "Image Files" / "a.jpg").exists()

    def test_fallback_retry_prompt_declined(self, make_tree):
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        with patch(
            "folder_organizer.organization.path_safety.os.rename",
            side_effect=_cross_device_rename,
        ):
            result = runner.invoke(cli, ["organize", str(root)], input="y\nn\n")

        assert result.exit_code == 1
        assert "atomic_transfer_failed" in result.output
        assert (root / "a.jpg").exists()

    def test_quiet_hides_summary(self, make_tree):
        root = make_tree(["a.jpg"])
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(root), "--yes", "--quiet"])

        assert result.exit_code == 0
        assert "Results" not in result.output

    def test_quiet_still_reports_failure(self, tmp_path):
        runner = CliRunner()

        result = runner.invoke(
            cli, ["organize", str(tmp_path / "missing"), "--yes", "--quiet"]
        )

        assert result.exit_code == 1
        assert "Results" not in result.output
        assert "path_not_found" in result.output

    def test_run_settings_are_shown(self, make_tree):
        root = make_tree([])
        runner = CliRunner()

        result = runner.invoke(cli, ["organize", str(root), "--yes", "--no-verify"])

        assert result.exit_code == 0
        assert "Verify copies" in result.output
        assert "NO" in result.output

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["organize", "--help"])

        assert result.exit_code == 0
        assert "--auto-fallback" in result.output
        assert "--mode" in result.output


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_classify_paths(self):
        runner = CliRunner()

        result = runner.invoke(cli, ["classify", "a.jpg", "b.xyz"])

        assert result.exit_code == 0
        assert "Image Files" in result.output
        assert "Others" in result.output

    def test_requires_paths(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["classify"])

        assert result.exit_code != 0


class TestCategoriesCommand:
    """Tests for the categories command."""

    def test_lists_categories(self):
        runner = CliRunner()

        result = runner.invoke(cli, ["categories"])

        assert result.exit_code == 0
        assert "PDF Files" in result.output
        assert "Others" in result.output

    def test_lists_aliases(self):
        runner = CliRunner()

        result = runner.invoke(cli, ["categories", "--aliases"])

        assert result.exit_code == 0
        assert "Aliases" in result.output


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
