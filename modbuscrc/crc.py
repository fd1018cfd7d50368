"""CRC-16 Modbus RTU checksum and a timed repeated calculation."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass

_POLYNOMIAL = 0xA001  # 0x8005 bit-reversed
_INITIAL = 0xFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


@dataclass(frozen=True)
class TimedResult:
    """Outcome of a timed calculation: elapsed whole milliseconds and the CRC."""

    elapsed_ms: int
    crc: int


def calculate_crc16(data: Iterable[int]) -> int:
    """Return the CRC-16 Modbus value of ``data``.

    The low byte of the result is the one transmitted first on the wire.
    An empty input yields the initial value 0xFFFF.
    """
    crc = _INITIAL
    for byte in bytes(data):
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    return crc


def timed_calculation(data: Iterable[int], repetitions: int) -> TimedResult:
    """Compute the CRC of ``data`` ``repetitions`` times and time the work.

    Returns ``TimedResult(0, 0)`` when ``data`` is empty or ``repetitions``
    is not positive.
    """
    frame = bytes(data)
    if not frame or repetitions <= 0:
        return TimedResult(0, 0)

    result = calculate_crc16(frame)

    start = time.perf_counter_ns()
    for _ in range(repetitions):
        calculate_crc16(frame)
    elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000

    return TimedResult(elapsed_ms, result)