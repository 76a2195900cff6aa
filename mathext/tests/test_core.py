"""
Unit Tests: Core Infrastructure

Tests:
    - Result monad
    - Error types and serialization
    - Configuration (env, validation, debug_checks context)
    - Precondition checkers
    - JSON logging
"""

import io
import json
import logging
import os
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

import pytest

from mathext.core.checks import check_ascending, check_sorted_by_id, require
from mathext.core.config import (
    MathExtConfig,
    debug_checks,
    get_config,
    load_config,
    set_config,
)
from mathext.core.errors import (
    ConfigError,
    Err,
    ErrorCode,
    InvalidArgumentError,
    MathExtError,
    Ok,
    PreconditionError,
)
from mathext.core.logging import JsonFormatter, setup_logging
from mathext.ints import uniq
from mathext.vectors import SparseVector

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def restore_logging():
    """Restore the active config and the "mathext" logger after a test."""
    package_logger = logging.getLogger("mathext")
    config = get_config()
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield
    set_config(config)
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


# =============================================================================
# RESULT MONAD TESTS
# =============================================================================
class TestResult:
    """Tests for Ok/Err."""

    def test_ok(self):
        result = Ok(42)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 42
        assert result.map(lambda x: x + 1).unwrap() == 43
        assert bool(result)

    def test_err(self):
        result = Err("boom")
        assert result.is_err()
        assert result.error == "boom"
        assert result.unwrap_or(7) == 7
        assert result.map(lambda x: x + 1) is result
        assert not bool(result)

    def test_err_unwrap_raises(self):
        with pytest.raises(RuntimeError):
            Err("boom").unwrap()

    def test_and_then(self):
        assert Ok(2).and_then(lambda x: Ok(x * 3)).unwrap() == 6
        assert Err("e").and_then(lambda x: Ok(x)).is_err()


# =============================================================================
# ERROR TYPE TESTS
# =============================================================================
class TestErrors:
    """Tests for the error taxonomy."""

    def test_length_mismatch(self):
        error = InvalidArgumentError.length_mismatch("x", 3, "w", 2)
        assert isinstance(error, MathExtError)
        assert error.code == ErrorCode.INVALID_ARGUMENT_LENGTH_MISMATCH
        assert "x=3" in str(error)
        assert str(error).startswith("[INVALID_ARGUMENT_LENGTH_MISMATCH]")

    def test_to_dict(self):
        error = PreconditionError.duplicate("a", 2, 5)
        data = error.to_dict()
        assert data["code"] == 2002
        assert data["code_name"] == "PRECONDITION_DUPLICATE"
        assert data["details"] == {"name": "a", "index": 2, "value": 5}

    def test_code_ranges(self):
        assert 1000 <= ErrorCode.INVALID_ARGUMENT.value < 2000
        assert 2000 <= ErrorCode.PRECONDITION_NOT_ASCENDING.value < 3000
        assert 5000 <= ErrorCode.CONFIG_INVALID.value < 6000


# =============================================================================
# CONFIG TESTS
# =============================================================================
class TestConfig:
    """Tests for MathExtConfig and the process-wide config."""

    def test_defaults(self):
        config = MathExtConfig()
        assert config.debug_checks is False
        assert config.log_level == "WARNING"
        assert config.validate() is None

    def test_invalid_log_level(self):
        assert MathExtConfig(log_level="LOUD").validate() is not None

    def test_set_config_rejects_invalid(self):
        before = get_config()
        with pytest.raises(ConfigError) as exc_info:
            set_config(MathExtConfig(log_level="LOUD"))
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert get_config() is before

    def test_set_config_returns_previous(self):
        before = get_config()
        previous = set_config(MathExtConfig(debug_checks=True))
        try:
            assert previous is before
            assert get_config().debug_checks is True
        finally:
            set_config(before)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MATHEXT_DEBUG_CHECKS", "true")
        monkeypatch.setenv("MATHEXT_LOG_LEVEL", "debug")
        config = MathExtConfig.from_env()
        assert config.debug_checks is True
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("MATHEXT_DEBUG_CHECKS", raising=False)
        monkeypatch.delenv("MATHEXT_LOG_LEVEL", raising=False)
        assert MathExtConfig.from_env() == MathExtConfig()

    def test_debug_checks_context_restores(self):
        before = get_config().debug_checks
        with debug_checks(not before) as config:
            assert config.debug_checks is (not before)
            assert get_config().debug_checks is (not before)
        assert get_config().debug_checks is before


# =============================================================================
# PRECONDITION CHECKER TESTS
# =============================================================================
class TestChecks:
    """Tests for the precondition checkers."""

    def test_ascending_ok(self):
        assert check_ascending([1, 2, 3]).is_ok()
        assert check_ascending([]).is_ok()
        assert check_ascending(None).is_ok()

    def test_not_ascending(self):
        result = check_ascending([1, 3, 2], name="ids")
        assert result.is_err()
        assert result.error.code == ErrorCode.PRECONDITION_NOT_ASCENDING
        assert result.error.details["index"] == 2

    def test_duplicates(self):
        assert check_ascending([1, 1, 2]).error.code == ErrorCode.PRECONDITION_DUPLICATE
        assert check_ascending([1, 1, 2], strict=False).is_ok()

    def test_sorted_by_id(self):
        assert check_sorted_by_id(SparseVector.from_pairs([(1, 0.5), (4, 0.1)])).is_ok()
        assert check_sorted_by_id(SparseVector.from_pairs([(4, 0.5), (1, 0.1)])).is_err()

    def test_require(self):
        require(Ok(None))
        with pytest.raises(PreconditionError):
            require(check_ascending([2, 1]))


# =============================================================================
# ENVIRONMENT LOADING TESTS
# =============================================================================
class TestLoadConfig:
    """Tests for reading and applying the environment config."""

    def test_applies_log_level(self, monkeypatch, restore_logging):
        monkeypatch.setenv("MATHEXT_LOG_LEVEL", "debug")
        config = load_config()
        assert config.log_level == "DEBUG"
        assert logging.getLogger("mathext").level == logging.DEBUG

    def test_invalid_log_level_falls_back(self, monkeypatch, caplog, restore_logging):
        monkeypatch.setenv("MATHEXT_LOG_LEVEL", "verbose")
        with caplog.at_level(logging.WARNING):
            config = load_config()
        assert config.log_level == "WARNING"
        assert config.validate() is None
        assert logging.getLogger("mathext").level == logging.WARNING
        assert "Ignoring MATHEXT_LOG_LEVEL" in caplog.text

    @pytest.mark.parametrize("level,expected", [
        ("DEBUG", "DEBUG 10"),
        ("verbose", "WARNING 30"),
    ])
    def test_import_with_env(self, level, expected):
        """A fresh interpreter applies MATHEXT_LOG_LEVEL on import."""
        code = (
            "import logging, mathext\n"
            "with mathext.debug_checks():\n"
            "    pass\n"
            "print(mathext.get_config().log_level, logging.getLogger('mathext').level)\n"
        )
        env = dict(os.environ, MATHEXT_LOG_LEVEL=level)
        completed = subprocess.run(
            [sys.executable, "-c", code],
            cwd=REPO_ROOT, env=env, capture_output=True, text=True, check=True,
        )
        assert completed.stdout.strip() == expected


# =============================================================================
# LOGGING TESTS
# =============================================================================
class TestLogging:
    """Tests for JSON log output."""

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="mathext.test", level=logging.INFO, pathname=__file__,
            lineno=1, msg="hello %s", args=("world",), exc_info=None,
        )
        record.request = "abc"
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "mathext.test"
        assert data["request"] == "abc"
        assert "@timestamp" in data

    def test_setup_logging_json(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="INFO", json_output=True, stream=stream)
        logging.getLogger("mathext.ints").info("merged", extra={"size": 3})
        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["message"] == "merged"
        assert data["size"] == 3

    def test_setup_logging_plain(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="WARNING", json_output=False, stream=stream)
        logging.getLogger("mathext.vectors").warning("plain")
        assert "| WARNING  | mathext.vectors | plain" in stream.getvalue()

    def test_setup_logging_updates_config(self, restore_logging):
        setup_logging(level="debug", stream=io.StringIO())
        assert get_config().log_level == "DEBUG"
        assert logging.getLogger("mathext").level == logging.DEBUG

    def test_setup_logging_rejects_unknown_level(self, restore_logging):
        with pytest.raises(ConfigError):
            setup_logging(level="verbose", stream=io.StringIO())

    def test_debug_checks_keeps_log_level(self, restore_logging):
        """Precondition failures reach a DEBUG handler inside debug_checks()."""
        stream = io.StringIO()
        setup_logging(level="DEBUG", json_output=True, stream=stream)
        package_logger = logging.getLogger("mathext")

        with debug_checks():
            assert package_logger.level == logging.DEBUG
            with pytest.raises(PreconditionError):
                uniq([3, 1])
        assert package_logger.level == logging.DEBUG

        messages = [json.loads(line)["message"] for line in stream.getvalue().splitlines()]
        assert any(m.startswith("Precondition failed") for m in messages)

    def test_set_config_same_level_leaves_logger_alone(self, restore_logging):
        package_logger = logging.getLogger("mathext")
        package_logger.setLevel(logging.DEBUG)
        set_config(replace(get_config(), debug_checks=not get_config().debug_checks))
        assert package_logger.level == logging.DEBUG
