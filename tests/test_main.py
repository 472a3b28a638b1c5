"""Tests for the command line entry point."""

import logging

from pydevfile import main as main_module
from pydevfile.config import ConfigLoader

DEVFILE = """\
schemaVersion: 2.1.0
metadata:
  name: app
variables:
  tag: "18"
components:
  - name: runtime
    container:
      image: node:{{tag}}
      memoryLimit: 512Mi
"""


class TestMain:
    """Tests for main()."""

    def test_parses_given_path(self, tmp_path, monkeypatch, caplog):
        """Test a valid devfile is summarized."""
        monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "user")
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "devfile.yaml"
        path.write_text(DEVFILE, encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["pydevfile", str(path)])

        with caplog.at_level(logging.INFO):
            assert main_module.main() == 0
        assert "Devfile schema version: 2.1.0" in caplog.text
        assert "image=node:18" in caplog.text

    def test_missing_devfile(self, tmp_path, monkeypatch, caplog):
        """Test a missing default devfile returns an error code."""
        monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "user")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.argv", ["pydevfile"])

        assert main_module.main() == 1
        assert "failed to read devfile" in caplog.text

    def test_configured_devfile_and_level(self, tmp_path, monkeypatch, caplog):
        """Test the configured devfile name and lower-case level are used."""
        monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "user")
        monkeypatch.chdir(tmp_path)
        (tmp_path / "pydevfile.yaml").write_text(
            "settings:\n  devfile_name: .devfile.yaml\n  log_level: debug\n",
            encoding="utf-8",
        )
        (tmp_path / ".devfile.yaml").write_text(DEVFILE, encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["pydevfile"])

        with caplog.at_level(logging.INFO):
            assert main_module.main() == 0
        assert "image=node:18" in caplog.text

    def test_invalid_log_level_does_not_crash(self, tmp_path, monkeypatch, caplog):
        """Test an unknown configured level falls back to defaults."""
        monkeypatch.setattr(ConfigLoader, "USER_CONFIG_DIR", tmp_path / "user")
        monkeypatch.chdir(tmp_path)
        (tmp_path / "pydevfile.yaml").write_text(
            "settings:\n  log_level: LOUD\n", encoding="utf-8"
        )
        (tmp_path / "devfile.yaml").write_text(DEVFILE, encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["pydevfile"])

        assert main_module.main() == 0
        assert "Failed to load config" in caplog.text
