"""Unit tests for logging, config and random source helpers."""

import json
import logging
import logging.handlers
from pathlib import Path

import numpy as np
import pytest

from utils import load_config, make_rng, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"run_control": {"seed": 7}}))
        assert load_config(str(path)) == {"run_control": {"seed": 7}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_shipped_config(self):
        """The repository config parses and only holds ambient settings."""
        config = load_config(str(Path(__file__).resolve().parent.parent / "config.json"))
        assert set(config) == {"logging", "run_control"}


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_and_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "field.log"
        setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})

        root = restore_root_logger
        assert root.level == logging.DEBUG
        kinds = {type(h) for h in root.handlers}
        assert logging.StreamHandler in kinds
        assert logging.handlers.RotatingFileHandler in kinds
        assert log_file.parent.is_dir()

        logging.info("hello field")
        for handler in root.handlers:
            handler.flush()
        assert "hello field" in log_file.read_text()

    def test_file_logging_disabled(self, restore_root_logger):
        setup_logging({"logging": {"log_file": ""}})
        root = restore_root_logger
        assert root.level == logging.INFO
        assert not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)


class TestMakeRng:
    """Tests for make_rng."""

    def test_seeded_is_reproducible(self):
        assert make_rng(3).random() == make_rng(3).random()

    def test_unseeded(self):
        assert isinstance(make_rng(None), np.random.Generator)
