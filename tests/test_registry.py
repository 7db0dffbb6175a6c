"""Tests for the level registry"""

import io
import re
import threading
import pytest
from unittest.mock import Mock

from leveled_logger import (
    Logger,
    LevelRegistry,
    RegistryConfig,
    Severity,
    CountField,
    get_default_registry,
    set_default_registry,
)
from leveled_logger.filters import PatternFilter
from leveled_logger.writers import ConsoleWriter


class TestThreshold:
    """Test threshold get/set."""

    def setup_method(self):
        self.stream = io.StringIO()
        self.registry = LevelRegistry(RegistryConfig(stream=self.stream))

    def test_default_level_is_info(self):
        assert self.registry.threshold == 1
        assert self.registry.get_threshold() is Severity.INFO

    def test_set_by_name(self):
        self.registry.threshold = "cf"
        assert self.registry.threshold == Severity.CF

    def test_set_by_rank(self):
        assert self.registry.set_threshold(4) is Severity.MORPH
        assert self.registry.get_threshold() == 4

    def test_boundaries(self):
        self.registry.threshold = 0
        assert self.registry.threshold == Severity.ERROR
        self.registry.threshold = 5
        assert self.registry.threshold == Severity.DEBUG

    def test_invalid_keeps_previous(self):
        self.registry.threshold = "parser"
        old = self.registry.threshold

        self.registry.threshold = "blabla"

        assert self.registry.threshold == old
        lines = self.stream.getvalue().splitlines()
        assert lines == ["LOG LEVEL ERROR blabla is unknown - falling back to 2"]

    @pytest.mark.parametrize("value", [6, -1, 100, "verbose"])
    def test_out_of_range_emits_one_diagnostic(self, value):
        old = self.registry.threshold
        self.registry.set_threshold(value)
        assert self.registry.threshold == old
        assert len(self.stream.getvalue().splitlines()) == 1

    @pytest.mark.parametrize("value", ["--1", "²", "-", "+2", " 3 4"])
    def test_malformed_numeric_string_never_raises(self, value):
        self.registry.threshold = "cf"

        assert self.registry.set_threshold(value) is Severity.CF

        assert self.registry.threshold == Severity.CF
        assert len(self.stream.getvalue().splitlines()) == 1

    def test_numeric_string(self):
        self.registry.threshold = "4"
        assert self.registry.threshold == Severity.MORPH

    def test_none_disables(self):
        self.registry.threshold = None
        assert self.registry.threshold is None
        assert self.registry.is_enabled() is False

    def test_invalid_while_disabled_falls_back_to_default(self):
        self.registry.threshold = None
        self.registry.threshold = "nonsense"
        assert self.registry.threshold == Severity.INFO
        assert "falling back to 1" in self.stream.getvalue()

    def test_invalid_initial_level_falls_back_to_default(self):
        stream = io.StringIO()
        registry = LevelRegistry(RegistryConfig(level="loud", stream=stream))
        assert registry.threshold == Severity.INFO
        assert stream.getvalue() == "LOG LEVEL ERROR loud is unknown - falling back to 1\n"


class TestIsEnabled:
    """Test level checks."""

    def setup_method(self):
        self.registry = LevelRegistry(RegistryConfig(stream=io.StringIO()))

    @pytest.mark.parametrize("threshold", range(6))
    def test_rank_within_threshold(self, threshold):
        self.registry.threshold = threshold
        for rank in range(6):
            assert self.registry.is_enabled(rank) is (rank <= threshold)

    def test_no_argument(self):
        assert self.registry.is_enabled() is True
        self.registry.threshold = None
        assert self.registry.is_enabled() is False

    def test_disabled_rejects_everything(self):
        self.registry.threshold = None
        for rank in range(6):
            assert self.registry.is_enabled(rank) is False

    def test_accepts_names(self):
        self.registry.threshold = "parser"
        assert self.registry.is_enabled("info")
        assert not self.registry.is_enabled("debug")

    @pytest.mark.parametrize("rank", ["bogus", -1, 6, "--1"])
    def test_invalid_rank_never_enabled(self, rank):
        self.registry.threshold = Severity.DEBUG
        assert self.registry.is_enabled(rank) is False


class TestInstances:
    """Test logger registration."""

    def setup_method(self):
        self.registry = LevelRegistry(RegistryConfig(stream=io.StringIO()))

    def test_loggers_is_a_list(self):
        assert isinstance(self.registry.loggers, list)

    def test_new_logger_registered(self):
        logger = Logger(registry=self.registry)
        assert logger in self.registry.loggers

    def test_registration_order(self):
        a = Logger("a", registry=self.registry)
        b = Logger("b", registry=self.registry)
        assert self.registry.loggers == [a, b]

    def test_clear(self):
        for _ in range(5):
            Logger(registry=self.registry)
        assert len(self.registry) >= 5
        self.registry.clear()
        assert self.registry.loggers == []

    def test_unregister(self):
        a = Logger(registry=self.registry)
        b = Logger(registry=self.registry)
        a.error("x")
        self.registry.unregister(a)
        assert self.registry.loggers == [b]
        assert self.registry.count_errors() == 0
        a.error("still works")
        assert a.error_count == 2

    def test_unregister_unknown_is_noop(self):
        other = LevelRegistry(RegistryConfig(stream=io.StringIO()))
        stranger = Logger(registry=other)
        Logger(registry=self.registry)
        self.registry.unregister(stranger)
        assert len(self.registry) == 1

    def test_reset(self):
        Logger(registry=self.registry)
        self.registry.threshold = None
        self.registry.reset()
        assert self.registry.loggers == []
        assert self.registry.threshold == Severity.INFO

    def test_reset_with_config(self):
        self.registry.reset(RegistryConfig(level="morph", stream=io.StringIO()))
        assert self.registry.threshold == Severity.MORPH

    def test_concurrent_registration(self):
        def build():
            for _ in range(50):
                Logger(registry=self.registry).info("x")

        threads = [threading.Thread(target=build) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(self.registry) == 200
        assert self.registry.count() == 200


class TestAggregates:
    """Test cross-logger queries."""

    def setup_method(self):
        self.registry = LevelRegistry(RegistryConfig(stream=io.StringIO()))
        self.a = Logger(registry=self.registry)
        self.b = Logger(registry=self.registry)

    def test_count_all_messages(self):
        for _ in range(5):
            self.a.log("")
        for _ in range(5):
            self.b.error("")
        assert self.registry.count() == 10

    def test_count_empty_registry(self):
        self.registry.clear()
        assert self.registry.count() == 0
        assert self.registry.count_errors() == 0

    def test_count_errors(self):
        for _ in range(5):
            self.a.error("")
        for _ in range(5):
            self.b.error("")
        assert self.registry.count_errors() == 10
        assert self.registry.count(CountField.ERRORS) == 10

    def test_count_warnings(self):
        for _ in range(5):
            self.a.warning("")
        for _ in range(5):
            self.b.warning("")
        assert self.registry.count_warnings() == 10

    def test_errors_and_warnings(self):
        for _ in range(5):
            self.a.error("")
        for _ in range(3):
            self.b.warning("")

        assert len(self.registry.errors()) == 5
        assert len(self.registry.warnings()) == 3
        assert self.registry.count() == 8
        assert all("ERROR!" in line for line in self.registry.errors())

    def test_messages_in_registration_order(self):
        self.b.info("b1")
        self.a.info("a1")
        self.b.info("b2")
        assert self.registry.messages() == ["a1", "b1", "b2"]

    def test_messages_that_match(self):
        for _ in range(5):
            self.a.log("arma")
        for _ in range(3):
            self.b.log("multa")
        assert len(self.registry.messages_that_match(r"arma")) == 5
        assert len(self.registry.messages_that_match(re.compile(r"^mul"))) == 3

    def test_messages_that_match_case_insensitive(self):
        self.a.info("Arma")
        self.b.info("arma")
        assert self.registry.messages_that_match("ARMA") == []
        assert self.registry.messages_that_match("ARMA", case_sensitive=False) == ["Arma", "arma"]

    def test_filtered(self):
        self.a.info("keep")
        self.a.warning("drop")
        assert self.registry.filtered(PatternFilter("WARNING!", exclude=True)) == ["keep"]

    def test_results_survive_clear(self):
        self.a.error("x")
        errors = self.registry.errors()
        self.registry.clear()
        assert errors == ["ERROR! x"]
        assert self.registry.errors() == []

    def test_discarded_logger_not_counted_after_clear(self):
        temp = Logger(registry=self.registry)
        temp.error("gone")
        del temp
        self.registry.clear()
        fresh = Logger(registry=self.registry)
        fresh.info("here")
        assert self.registry.count() == 1
        assert self.registry.count_errors() == 0


class TestOutput:
    """Test the shared output channel."""

    def test_defaults_to_stdout(self, capsys):
        registry = LevelRegistry()
        Logger("Out", registry=registry).info("hello")
        assert capsys.readouterr().out == "Out: hello\n"

    def test_disabled_writes_nothing(self):
        writer = Mock(spec=ConsoleWriter)
        registry = LevelRegistry(RegistryConfig(level=None), writer=writer)
        logger = Logger(registry=registry)
        logger.error("")
        logger.debug("")
        logger.bare("")
        writer.write.assert_not_called()
        writer.write_line.assert_not_called()

    def test_colored_output(self):
        stream = io.StringIO()
        registry = LevelRegistry(RegistryConfig(colored_output=True, stream=stream))
        logger = Logger(registry=registry)
        logger.error("x")
        out = stream.getvalue()
        assert out.startswith(Severity.ERROR.color_code)
        assert out.endswith("\033[0m\n")
        assert logger.logs == ["ERROR! x"]

    def test_repr(self):
        registry = LevelRegistry(RegistryConfig(level=None, stream=io.StringIO()))
        assert repr(registry) == "LevelRegistry(threshold=disabled, loggers=0)"


class TestDefaultRegistry:
    """Test the process-wide registry."""

    def setup_method(self):
        set_default_registry(None)

    def teardown_method(self):
        set_default_registry(None)

    def test_seeded_from_env(self, monkeypatch):
        monkeypatch.setenv("LLT_DEBUG", "debug")
        assert get_default_registry().threshold == Severity.DEBUG

    def test_invalid_env_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("LLT_DEBUG", "loud")
        assert get_default_registry().threshold == Severity.INFO
        assert "LOG LEVEL ERROR loud is unknown" in capsys.readouterr().out

    def test_malformed_env_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("LLT_DEBUG", "--3")
        logger = Logger()
        assert logger.registry.threshold == Severity.INFO
        assert "LOG LEVEL ERROR --3 is unknown - falling back to 1" in capsys.readouterr().out

    def test_unset_env(self, monkeypatch):
        monkeypatch.delenv("LLT_DEBUG", raising=False)
        assert get_default_registry().threshold == Severity.INFO

    def test_logger_uses_default_registry(self, monkeypatch):
        monkeypatch.delenv("LLT_DEBUG", raising=False)
        logger = Logger()
        assert logger.registry is get_default_registry()
        assert logger in get_default_registry()

    def test_set_default_registry(self):
        registry = LevelRegistry(RegistryConfig(stream=io.StringIO()))
        set_default_registry(registry)
        assert get_default_registry() is registry
