"""
Tests for the pnpm installed-version resolver.

subprocess.run is always mocked — no pnpm is needed.
"""

import json
import logging
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from electron_fix.adapters.package_manager import PnpmListResolver, find_listed_version

_MODULE = "electron_fix.adapters.package_manager"


def _completed(stdout: str) -> MagicMock:
    return MagicMock(returncode=0, stdout=stdout, stderr="")


class TestFindListedVersion:
    def test_dev_dependency(self):
        data = [{"name": "app", "devDependencies": {"electron": {"version": "30.0.1"}}}]
        assert find_listed_version(data, "electron") == "30.0.1"

    def test_dependency(self):
        data = [{"name": "app", "dependencies": {"electron": {"version": "29.4.0"}}}]
        assert find_listed_version(data, "electron") == "29.4.0"

    def test_dev_dependencies_checked_first(self):
        data = [{
            "dependencies": {"electron": {"version": "1.0.0"}},
            "devDependencies": {"electron": {"version": "2.0.0"}},
        }]
        assert find_listed_version(data, "electron") == "2.0.0"

    def test_first_project_with_entry_wins(self):
        data = [
            {"name": "root"},
            {"name": "desktop", "dependencies": {"electron": {"version": "28.0.0"}}},
            {"name": "other", "dependencies": {"electron": {"version": "27.0.0"}}},
        ]
        assert find_listed_version(data, "electron") == "28.0.0"

    def test_single_object_output(self):
        data = {"dependencies": {"electron": {"version": "26.0.0"}}}
        assert find_listed_version(data, "electron") == "26.0.0"

    def test_missing(self):
        assert find_listed_version([{"dependencies": {}}], "electron") is None

    def test_garbage_shapes_ignored(self):
        data = ["x", {"dependencies": ["electron"]}, {"dependencies": {"electron": "1.0"}}]
        assert find_listed_version(data, "electron") is None


class TestPnpmListResolver:
    @patch(f"{_MODULE}.shutil.which", return_value="/usr/bin/pnpm")
    def test_command(self, _which):
        cmd = PnpmListResolver().command("electron")
        assert cmd == ["/usr/bin/pnpm", "list", "electron", "--json", "--depth", "0"]

    @patch(f"{_MODULE}.subprocess.run")
    def test_success(self, mock_run, tmp_path: Path):
        out = json.dumps([{"devDependencies": {"electron": {"version": "30.0.0"}}}])
        mock_run.return_value = _completed(out)
        assert PnpmListResolver().installed_version("electron", tmp_path) == "30.0.0"
        _, kwargs = mock_run.call_args
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["check"] is True

    @patch(f"{_MODULE}.subprocess.run", side_effect=FileNotFoundError("pnpm"))
    def test_missing_command_warns(self, _run, tmp_path: Path, caplog):
        with caplog.at_level(logging.WARNING):
            assert PnpmListResolver().installed_version("electron", tmp_path) is None
        assert "pnpm not found" in caplog.text

    @patch(f"{_MODULE}.subprocess.run")
    def test_nonzero_exit_warns(self, mock_run, tmp_path: Path, caplog):
        mock_run.side_effect = subprocess.CalledProcessError(1, ["pnpm"], stderr="ERR_PNPM")
        with caplog.at_level(logging.WARNING):
            assert PnpmListResolver().installed_version("electron", tmp_path) is None
        assert "ERR_PNPM" in caplog.text

    @patch(f"{_MODULE}.subprocess.run")
    def test_malformed_json_warns(self, mock_run, tmp_path: Path, caplog):
        mock_run.return_value = _completed("not json")
        with caplog.at_level(logging.WARNING):
            assert PnpmListResolver().installed_version("electron", tmp_path) is None
        assert "malformed" in caplog.text

    @patch(f"{_MODULE}.subprocess.run")
    def test_no_entry(self, mock_run, tmp_path: Path):
        mock_run.return_value = _completed("[]")
        assert PnpmListResolver().installed_version("electron", tmp_path) is None
