# modbuscrc

A CRC-16 calculator for Modbus RTU frames. It turns a hex frame such as
`01 10 00 11 00 03 06 1A C4 BA D0` into bytes and computes the checksum of those
bytes. It can also repeat the calculation many times and report how long the runs
took. You can use the package as a small library or through a desktop window.

## Installation

```
pip install .
```

The window uses Tkinter from the standard library. The package has no other runtime
dependencies.

## The desktop window

```
modbuscrc
```

The window's labels are in Polish. It contains these fields and buttons:

- **Bajty ramki (max 256)**: the frame bytes in hex. Separate the bytes with spaces,
  or type them together as pairs of digits. The field accepts only hex digits and
  whitespace.
- **Liczba powtórzeń (1..10^9)**: the number of repetitions. The field accepts only
  digits.
- **OBLICZ CRC**: computes the CRC and shows it as four upper-case hex digits. It also
  shows the total time in whole milliseconds. When you ask for more than one
  repetition, the status bar also shows the time per iteration. Pressing Enter in
  either field does the same.
- **Wyczyść**: resets the fields to their starting values.

If the input is invalid, the CRC field and the status bar show an error message. The
copy button next to the result puts the CRC on the clipboard. Right-clicking the
result opens a menu with two entries: one copies the CRC, and the other opens a dialog
that describes the CRC parameters. Errors, the initial `0000` and the busy text are
never copied.

The calculation runs on the window's own thread. A large repetition count therefore
keeps the window unresponsive until the runs finish.

## Library use

```python
from modbuscrc.hexparse import parse_hex_string
from modbuscrc.crc import calculate_crc16, timed_calculation
from modbuscrc.session import calculate, format_crc, CalculationError

frame = parse_hex_string("01 03 00 00 00 0A")
crc = calculate_crc16(frame)
print(format_crc(crc))                    # four upper-case hex digits

timing = timed_calculation(frame, 1000)   # TimedResult(elapsed_ms=..., crc=...)

try:
    result = calculate("01 03 00 00 00 0A", "1000")
    print(result.crc_text, result.time_text)
    print(result.status_message())
except CalculationError as exc:
    print(exc.label, exc.status)
```

### `modbuscrc.hexparse.parse_hex_string(text)`

Returns a list of byte values.

- **Text that contains spaces**: the text is split on spaces. Each non-empty token is
  read as one hex number, and an optional `0x` prefix is allowed. Tokens that are not
  valid hex are skipped.
- **Text without spaces**: the text is read two characters at a time. A trailing odd
  character becomes a byte of its own.

A value wider than one byte keeps only its low eight bits. An empty string gives an
empty list.

### `modbuscrc.crc.calculate_crc16(data)`

Returns the CRC-16 Modbus checksum of an iterable of byte values. The calculation uses:

- polynomial 0x8005, reflected;
- initial value 0xFFFF;
- no final XOR.

The low byte of the result is the one sent first on the wire. Empty input gives
`0xFFFF`.

### `modbuscrc.crc.timed_calculation(data, repetitions)`

Computes the checksum `repetitions` times in a single thread. It returns a
`TimedResult` that holds the elapsed whole milliseconds (`elapsed_ms`) and the CRC
(`crc`). For empty data, or when `repetitions` is not positive, it returns
`TimedResult(0, 0)`.

### `modbuscrc.session`

- `calculate(frame_text, repetitions_text)` checks the two input texts and then runs
  the timed calculation. It raises `CalculationError`, a subclass of `ValueError`, in
  these cases:
  - the frame is empty;
  - the repetition count is not a whole number from 1 to 10^9;
  - no byte could be parsed from the frame;
  - the frame is longer than 256 bytes.

  The error carries a short `label` and a longer `status` message, both in Polish.
- `CalculationResult` holds `crc`, `elapsed_ms` and `repetitions`. It also has the
  properties `crc_text` and `time_text`, and the method `status_message()`.
- `format_crc(value)` formats a CRC as four upper-case hex digits.
- `is_copyable(text)` tells whether a result text is a real CRC. It returns false for
  errors, the busy text and the initial `0000`.

### `modbuscrc.gui`

- `WindowState` holds the window's texts. It has the actions `calculate()`, `clear()`
  and `copy_text()`, and none of them needs a display.
- `MainWindow(root)` builds the window on a Tk root.
- `main()` opens the window and runs until the window is closed.

## Running the tests

```
pip install ".[test]"
pytest
```