"""Barcode identifier generation.

Generated barcodes are a fixed leading digit followed by the last 11
digits of the current time in milliseconds. Two calls in the same
millisecond collide; there is no persisted sequence behind this.
"""

from __future__ import annotations

import time
from collections.abc import Callable

BARCODE_LENGTH = 12
_TIME_DIGITS = BARCODE_LENGTH - 1


class BarcodeGenerator:

    def __init__(
        self,
        prefix: str = "7",
        clock_ns: Callable[[], int] = time.time_ns,
    ) -> None:
        if len(prefix) != 1 or not prefix.isdigit():
            raise ValueError(f"Barcode prefix must be a single digit, got {prefix!r}")
        self._prefix = prefix
        self._clock_ns = clock_ns

    def generate(self) -> str:
        millis = self._clock_ns() // 1_000_000
        return self._prefix + str(millis)[-_TIME_DIGITS:].zfill(_TIME_DIGITS)
