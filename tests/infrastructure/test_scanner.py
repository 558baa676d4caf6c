"""Tests for the keyboard-wedge scanner."""

import io

import pytest

from ims.infrastructure.scanner import KeyboardWedgeScanner


class TestKeyboardWedgeScanner:

    def test_reads_one_value_per_line(self):
        with KeyboardWedgeScanner(io.StringIO("7123456789012\r\n7234567890123\n")) as scanner:
            assert scanner.read() == "7123456789012"
            assert scanner.read() == "7234567890123"
            assert scanner.read() is None

    def test_blank_line_yields_nothing(self):
        with KeyboardWedgeScanner(io.StringIO("   \n7123456789012\n")) as scanner:
            assert scanner.read() is None

    def test_read_requires_open(self):
        scanner = KeyboardWedgeScanner(io.StringIO("7123456789012\n"))
        with pytest.raises(RuntimeError, match="not open"):
            scanner.read()

    def test_closed_after_context(self):
        with KeyboardWedgeScanner(io.StringIO("")) as scanner:
            pass
        with pytest.raises(RuntimeError):
            scanner.read()
