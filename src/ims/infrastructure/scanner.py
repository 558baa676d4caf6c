"""Barcode scanner collaborators.

A scanner is opened, yields zero or one decoded value per ``read``, and
is closed again. The only scanner shipped here is a keyboard-wedge
(USB/Bluetooth HID) scanner, which "types" the barcode followed by
Enter into whatever text stream it is pointed at.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class BarcodeScanner(Protocol):

    def open(self) -> None: ...

    def read(self) -> str | None: ...

    def close(self) -> None: ...


class KeyboardWedgeScanner:

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._active = False

    def open(self) -> None:
        if self._stream is None:
            self._stream = sys.stdin
        self._active = True
        logger.debug("Scanner opened")

    def read(self) -> str | None:
        """Return the next scanned value, or None on a blank line or EOF."""
        if not self._active:
            raise RuntimeError("Scanner is not open")
        line = self._stream.readline()
        value = line.strip()
        return value or None

    def close(self) -> None:
        self._active = False
        logger.debug("Scanner closed")

    def __enter__(self) -> KeyboardWedgeScanner:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
