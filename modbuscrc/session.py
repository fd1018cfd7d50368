"""Validation of user input and the calculation the main window performs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from modbuscrc.crc import timed_calculation
from modbuscrc.hexparse import parse_hex_string

MAX_FRAME_BYTES = 256
MIN_REPETITIONS = 1
MAX_REPETITIONS = 1_000_000_000

EMPTY_CRC_TEXT = "0000"
ERROR_PREFIX = "Błąd"
BUSY_TEXT = "Obliczanie..."

_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


class CalculationError(ValueError):
    """Input rejected before calculation.

    ``label`` is the short text for the result field, ``status`` the longer
    message for the status bar.
    """

    def __init__(self, label: str, status: str | None = None) -> None:
        super().__init__(label)
        self.label = label
        self.status = status if status is not None else label


def format_crc(value: int) -> str:
    """Format a CRC as four upper-case hexadecimal digits."""
    return f"{value:04X}"


def is_copyable(text: str) -> bool:
    """Tell whether a result-field text holds a real CRC worth copying."""
    return (
        text != EMPTY_CRC_TEXT
        and not text.startswith(ERROR_PREFIX)
        and not text.startswith("Obliczanie")
    )


@dataclass(frozen=True)
class CalculationResult:
    """A finished timed CRC calculation."""

    crc: int
    elapsed_ms: int
    repetitions: int

    @property
    def crc_text(self) -> str:
        return format_crc(self.crc)

    @property
    def time_text(self) -> str:
        return f"{self.elapsed_ms} ms"

    def status_message(self) -> str:
        """Summary for the status bar."""
        if self.repetitions == 1:
            return f"CRC-16: {self.crc_text} (czas: {self.elapsed_ms} ms)"
        per_iteration = self.elapsed_ms / self.repetitions
        return (
            f"CRC-16: {self.crc_text} (czas: {self.elapsed_ms} ms, "
            f"{per_iteration:.8f} ms/iteracja)"
        )


def _parse_repetitions(text: str) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise CalculationError(
            "Błąd: Nieprawidłowa liczba powtórzeń",
            "Błąd: Nieprawidłowa liczba powtórzeń (zakres: 1..10^9)",
        )
    value = int(text)
    if not MIN_REPETITIONS <= value <= MAX_REPETITIONS:
        raise CalculationError(
            "Błąd: Nieprawidłowa liczba powtórzeń",
            "Błąd: Nieprawidłowa liczba powtórzeń (zakres: 1..10^9)",
        )
    return value


def calculate(frame_text: str, repetitions_text: str) -> CalculationResult:
    """Validate the two input fields and run the timed CRC calculation.

    Raises CalculationError when the frame is empty or unparsable, longer
    than 256 bytes, or the repetition count is not in 1..10^9.
    """
    frame_text = frame_text.strip()
    if not frame_text:
        raise CalculationError("Błąd: Wprowadź bajty ramki")

    repetitions = _parse_repetitions(repetitions_text)

    frame = parse_hex_string(frame_text)
    if not frame:
        raise CalculationError("Błąd: Nieprawidłowy format bajtów")
    if len(frame) > MAX_FRAME_BYTES:
        raise CalculationError("Błąd: Przekroczono limit 256 bajtów")

    timed = timed_calculation(frame, repetitions)
    return CalculationResult(timed.crc, timed.elapsed_ms, repetitions)