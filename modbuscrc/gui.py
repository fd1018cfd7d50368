"""Desktop window for computing CRC-16 Modbus checksums of typed frames."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from modbuscrc.session import (
    EMPTY_CRC_TEXT,
    CalculationError,
    CalculationResult,
    calculate,
    is_copyable,
)

APP_NAME = "ModbusCrc"
APP_DISPLAY_NAME = "Kalkulator CRC-16 Modbus"
APP_VERSION = "1.0.0"
WINDOW_TITLE = "Kalkulator CRC-16 Modbus RTU - SCR Zadanie 2"

READY_STATUS = "Gotowy do obliczeń CRC"
CLEARED_STATUS = "Wyczyszczono pola"
BUSY_STATUS = "Obliczanie sumy kontrolnej CRC-16..."
DEFAULT_REPETITIONS = "1"
DEFAULT_TIME_TEXT = "0 ms"

ERROR_TIMEOUT_MS = 5000
RESULT_TIMEOUT_MS = 10000

CRC_INFO_TITLE = "Informacje o CRC-16 Modbus"
CRC_INFO_TEXT = (
    "Suma kontrolna CRC-16 Modbus RTU:\n\n"
    "- Wielomian: x^16 + x^15 + x^2 + 1 (0x8005)\n"
    "- Wartość początkowa: 0xFFFF\n"
    "- Kolejność bajtów w wyniku: little-endian\n"
    "- Wartość xorowana na końcu: 0x0000\n\n"
    "Algorytm optymalizowany pod kątem czasu wykonania zgodnie z\n"
    "wymogami zadania nr 2 z przedmiotu Systemy Czasu Rzeczywistego."
)

_HEX_INPUT = re.compile(r"[0-9A-Fa-f\s]*")
_REPETITIONS_INPUT = re.compile(r"\d{0,10}")


@dataclass
class WindowState:
    """Texts shown by the main window and the actions that change them.

    ``status_timeout_ms`` is how long the status message stays visible,
    or ``None`` when it stays until replaced.
    """

    frame_text: str = ""
    repetitions_text: str = DEFAULT_REPETITIONS
    time_text: str = DEFAULT_TIME_TEXT
    crc_text: str = EMPTY_CRC_TEXT
    status: str = READY_STATUS
    status_timeout_ms: int | None = None

    def _set_status(self, message: str, timeout_ms: int | None) -> None:
        self.status = message
        self.status_timeout_ms = timeout_ms

    def calculate(self) -> CalculationResult | None:
        """Run the calculation on the current inputs and update the texts.

        Returns the result, or ``None`` when the input was rejected; the
        rejection is then shown in the CRC field and the status bar.
        """
        try:
            result = calculate(self.frame_text, self.repetitions_text)
        except CalculationError as error:
            self.crc_text = error.label
            self._set_status(error.status, ERROR_TIMEOUT_MS)
            return None
        self.time_text = result.time_text
        self.crc_text = result.crc_text
        self._set_status(result.status_message(), RESULT_TIMEOUT_MS)
        return result

    def clear(self) -> None:
        """Reset the inputs and results to their starting values."""
        self.frame_text = ""
        self.repetitions_text = DEFAULT_REPETITIONS
        self.time_text = DEFAULT_TIME_TEXT
        self.crc_text = EMPTY_CRC_TEXT
        self._set_status(CLEARED_STATUS, ERROR_TIMEOUT_MS)

    def copy_text(self) -> str | None:
        """Return the CRC text to copy, or ``None`` if there is no result."""
        if not is_copyable(self.crc_text):
            return None
        self._set_status(f"Skopiowano do schowka: {self.crc_text}", ERROR_TIMEOUT_MS)
        return self.crc_text


class MainWindow:
    """The calculator window built on a Tk root."""

    def __init__(self, root) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.root = root
        self.state = WindowState()
        self._status_job: str | None = None

        root.title(WINDOW_TITLE)
        root.minsize(600, 350)

        main = tk.Frame(root, padx=10, pady=10)
        main.pack(fill=tk.BOTH, expand=True)

        tk.Label(
            main,
            text="Systemy Czasu Rzeczywistego - Zadanie nr 2",
            font=("TkDefaultFont", 12, "bold"),
        ).pack(fill=tk.X)

        inputs = tk.LabelFrame(main, text="Dane wejściowe", padx=6, pady=6)
        inputs.pack(fill=tk.X, pady=4)
        inputs.columnconfigure(1, weight=1)

        hex_check = (root.register(_accepts_hex), "%P")
        int_check = (root.register(_accepts_repetitions), "%P")

        tk.Label(inputs, text="Bajty ramki (max 256):").grid(row=0, column=0, sticky="w")
        self.frame_var = tk.StringVar()
        self.frame_input = tk.Entry(
            inputs, textvariable=self.frame_var,
            validate="key", validatecommand=hex_check,
        )
        self.frame_input.grid(row=0, column=1, sticky="ew")

        tk.Label(inputs, text="Liczba powtórzeń (1..10^9):").grid(row=1, column=0, sticky="w")
        self.repetitions_var = tk.StringVar(value=DEFAULT_REPETITIONS)
        self.repetitions_input = tk.Entry(
            inputs, textvariable=self.repetitions_var,
            validate="key", validatecommand=int_check,
        )
        self.repetitions_input.grid(row=1, column=1, sticky="ew")

        self.frame_input.bind("<Return>", lambda _event: self.calculate_crc())
        self.repetitions_input.bind("<Return>", lambda _event: self.calculate_crc())

        results = tk.LabelFrame(main, text="Wyniki", padx=6, pady=6)
        results.pack(fill=tk.X, pady=4)
        results.columnconfigure(1, weight=1)

        tk.Label(results, text="Łączny czas realizacji [ms]:").grid(row=0, column=0, sticky="w")
        self.time_var = tk.StringVar(value=DEFAULT_TIME_TEXT)
        tk.Label(results, textvariable=self.time_var, anchor="w").grid(
            row=0, column=1, sticky="ew"
        )

        tk.Label(results, text="Wartość CRC-16 [hex]:").grid(row=1, column=0, sticky="w")
        self.crc_var = tk.StringVar(value=EMPTY_CRC_TEXT)
        self.crc_label = tk.Label(results, textvariable=self.crc_var, anchor="w")
        self.crc_label.grid(row=1, column=1, sticky="ew")
        tk.Button(results, text="⧉", width=3, command=self.copy_crc_to_clipboard).grid(
            row=1, column=2
        )

        buttons = tk.Frame(main)
        buttons.pack(fill=tk.X, pady=4)
        tk.Button(buttons, text="Wyczyść", command=self.clear_inputs).pack(
            side=tk.LEFT, expand=True, fill=tk.X
        )
        self.start_button = tk.Button(
            buttons, text="OBLICZ CRC", default=tk.ACTIVE, command=self.calculate_crc
        )
        self.start_button.pack(side=tk.LEFT, expand=True, fill=tk.X)

        tk.Label(
            main,
            text="Realizacja zadania zgodnie ze specyfikacją protokołu MODBUS RTU",
        ).pack(fill=tk.X)

        self.status_var = tk.StringVar()
        tk.Label(root, textvariable=self.status_var, anchor="w", relief=tk.SUNKEN).pack(
            side=tk.BOTTOM, fill=tk.X
        )

        self.context_menu = tk.Menu(root, tearoff=False)
        self.context_menu.add_command(label="Kopiuj wynik", command=self.copy_crc_to_clipboard)
        self.context_menu.add_command(
            label="Informacje o sumie kontrolnej", command=self.show_crc_info
        )
        self.crc_label.bind("<Button-3>", self._show_context_menu)

        self._show_status(self.state.status, self.state.status_timeout_ms)
        self.frame_input.focus_set()

    def _show_status(self, message: str, timeout_ms: int | None) -> None:
        if self._status_job is not None:
            self.root.after_cancel(self._status_job)
            self._status_job = None
        self.status_var.set(message)
        if timeout_ms is not None:
            self._status_job = self.root.after(timeout_ms, self._clear_status)

    def _clear_status(self) -> None:
        self._status_job = None
        self.status_var.set("")

    def _pull_inputs(self) -> None:
        self.state.frame_text = self.frame_var.get()
        self.state.repetitions_text = self.repetitions_var.get()

    def _push_state(self) -> None:
        self.frame_var.set(self.state.frame_text)
        self.repetitions_var.set(self.state.repetitions_text)
        self.time_var.set(self.state.time_text)
        self.crc_var.set(self.state.crc_text)
        self._show_status(self.state.status, self.state.status_timeout_ms)

    def _set_inputs_enabled(self, enabled: bool) -> None:
        value = self._tk.NORMAL if enabled else self._tk.DISABLED
        for widget in (self.start_button, self.frame_input, self.repetitions_input):
            widget.configure(state=value)

    def calculate_crc(self) -> None:
        """Validate the inputs, run the timed calculation and show the outcome."""
        self._pull_inputs()
        self._set_inputs_enabled(False)
        self.root.configure(cursor="watch")
        self.time_var.set("Obliczanie...")
        self.crc_var.set("Obliczanie...")
        self._show_status(BUSY_STATUS, None)
        self.root.update_idletasks()
        previous_time = self.state.time_text
        try:
            result = self.state.calculate()
            if result is None:
                self.state.time_text = previous_time
            self._push_state()
        finally:
            self.root.configure(cursor="")
            self._set_inputs_enabled(True)

    def clear_inputs(self) -> None:
        """Reset every field and focus the frame input."""
        self.state.clear()
        self._push_state()
        self.frame_input.focus_set()

    def copy_crc_to_clipboard(self) -> None:
        """Put the current CRC on the clipboard if there is one."""
        self.state.crc_text = self.crc_var.get()
        text = self.state.copy_text()
        if text is None:
            return
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        self._show_status(self.state.status, self.state.status_timeout_ms)

    def show_crc_info(self) -> None:
        """Explain the CRC-16 Modbus parameters in a dialog."""
        self._messagebox.showinfo(CRC_INFO_TITLE, CRC_INFO_TEXT, parent=self.root)

    def _show_context_menu(self, event) -> None:
        try:
            self.context_menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.context_menu.grab_release()


def _accepts_hex(proposed: str) -> bool:
    return _HEX_INPUT.fullmatch(proposed) is not None


def _accepts_repetitions(proposed: str) -> bool:
    return _REPETITIONS_INPUT.fullmatch(proposed) is not None


def main(argv: Sequence[str] | None = None) -> int:
    """Open the calculator window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk(className=APP_NAME)
    MainWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())