"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from klaw_distributions import U8, UniformRange
from klaw_distributions._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'

    def test_removed_hook_not_called(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append(event_dict['event'])

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)
        remove_log_hook(hook)

        get_logger('test').info('ignored')
        assert calls == []

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda event_dict: None)

    def test_failing_hook_does_not_break_logging(self) -> None:
        received: list[dict[str, Any]] = []

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('boom')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('test').warning('still logged')
        assert any(e.get('event') == 'still logged' for e in received)


class TestLibraryEvents:
    """Tests for events the library itself emits."""

    def test_invalid_range_is_logged(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        UniformRange.new(10, 10, U8)

        entries = [e for e in received if e.get('event') == 'uniform_range.invalid']
        assert len(entries) == 1
        assert entries[0]['kind'] == 'u8'
        assert entries[0]['low'] == 10

    def test_sampling_is_silent(self, src) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG')
        dist = UniformRange.create(0, 200, U8)
        add_log_hook(received.append)

        for _ in range(100):
            dist.sample(src)
        assert received == []


class TestConfigureLogging:
    """Tests for root handler installation."""

    def test_reconfigure_replaces_own_handler(self) -> None:
        """Repeated calls keep one library handler and leave others in place."""
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        try:
            configure_logging(level='INFO')
            before = len(root.handlers)
            configure_logging(level='INFO', json_output=False)
            assert len(root.handlers) == before
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)

    def test_numeric_and_named_levels(self) -> None:
        configure_logging(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        configure_logging(level='debug')
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        configure_logging(level='chatty')
        assert logging.getLogger().level == logging.INFO
