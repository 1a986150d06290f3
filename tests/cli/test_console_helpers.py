# tests/cli/test_console_helpers.py
"""
Tests for core/cli/ui/console.py

Tests cover:
- Status helpers (success/error/warning/info/header)
- Markup escaping of user values
- Logger setup
"""

import logging

from rich.logging import RichHandler

from core.cli.ui.console import (
    get_console,
    get_logger,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)


class TestPrintHelpers:
    """Test standard output styles"""

    def test_success(self, console, output):
        print_success("Secret added", console)
        assert output() == "✓ Secret added\n"

    def test_error_escapes_markup(self, console, output):
        print_error("Error: bad [name]", console)
        assert output() == "Error: bad [name]\n"

    def test_warning(self, console, output):
        print_warning("No changes will be made to AWS", console)
        assert output() == "No changes will be made to AWS\n"

    def test_info(self, console, output):
        print_info("Listing", console)
        assert output() == "Listing\n"

    def test_header(self, console, output):
        print_header("=== DRY-RUN MODE ===", console)
        assert output() == "=== DRY-RUN MODE ===\n"


class TestConsoleSetup:
    """Test console and logger construction"""

    def test_console_not_forced_to_terminal(self):
        console = get_console()
        assert console.soft_wrap is True

    def test_get_logger(self):
        logger = get_logger("tests.console_helpers", logging.DEBUG)
        try:
            assert logger.level == logging.DEBUG
            assert any(isinstance(handler, RichHandler) for handler in logger.handlers)
            assert logger.propagate is False
            # Second call reuses the handler
            assert len(get_logger("tests.console_helpers").handlers) == 1
        finally:
            logger.handlers.clear()
            logger.propagate = True
