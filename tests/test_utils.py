"""Tests for file and logging helpers."""

import logging

import pytest

from coflowcode.utils import ensure_dir, get_logger, safe_filename, setup_logging
from coflowcode.utils.files import read_text, write_text


class TestSafeFilename:
    def test_accents_folded(self):
        assert safe_filename("Révision générale") == "Revision_generale.json"

    def test_custom_extension_and_length(self):
        assert safe_filename("abcdef", extension=".txt", max_length=3) == "abc.txt"


class TestFiles:
    def test_write_creates_parents(self, tmp_path):
        path = write_text(tmp_path / "a" / "b" / "f.txt", "hello")
        assert read_text(path) == "hello"

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "missing.txt")

    def test_ensure_dir(self, tmp_path):
        target = tmp_path / "x" / "y"
        assert ensure_dir(target) == target
        assert target.is_dir()


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_from_string(self):
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging("INFO", log_file)
        get_logger("coflowcode.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written" in log_file.read_text(encoding="utf-8")
