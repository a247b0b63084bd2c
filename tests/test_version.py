"""Tests for version module."""

from click.testing import CliRunner

from folder_organizer import __version__ as package_version
from folder_organizer.cli.main import cli
from folder_organizer.version import __version__


def test_package_exports_version():
    assert package_version == __version__
    assert __version__.count(".") == 2


def test_organize_header_shows_package_version(tmp_path):
    runner = CliRunner()

    result = runner.invoke(cli, ["organize", str(tmp_path), "--yes"])

    assert result.exit_code == 0
    assert f"v{__version__}" in result.output
    assert "git:" not in result.output
