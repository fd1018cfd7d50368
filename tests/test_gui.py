from hypothesis import given, strategies as st

from modbuscrc.crc import calculate_crc16
from modbuscrc.gui import WindowState
from modbuscrc.session import format_crc


def test_initial_state():
    state = WindowState()
    assert state.crc_text == "0000"
    assert state.time_text == "0 ms"
    assert state.repetitions_text == "1"
    assert state.status == "Gotowy do obliczeń CRC"


def test_calculate_sets_crc_text():
    state = WindowState(frame_text="01 03 00 00 00 0A", repetitions_text="1")
    result = state.calculate()
    assert result is not None
    assert state.crc_text == format_crc(calculate_crc16([0x01, 0x03, 0x00, 0x00, 0x00, 0x0A]))
    assert state.status == result.status_message()
    assert state.time_text == result.time_text
    assert state.status_timeout_ms == 10000


def test_calculate_with_repetitions_status():
    state = WindowState(frame_text="0103", repetitions_text="5")
    result = state.calculate()
    assert result is not None
    assert result.repetitions == 5
    assert "ms/iteracja" in state.status


def test_empty_frame_error():
    state = WindowState(frame_text="   ", repetitions_text="1")
    assert state.calculate() is None
    assert state.crc_text == "Błąd: Wprowadź bajty ramki"
    assert state.status == "Błąd: Wprowadź bajty ramki"
    assert state.status_timeout_ms == 5000


def test_bad_repetitions_error():
    state = WindowState(frame_text="01", repetitions_text="0")
    assert state.calculate() is None
    assert state.crc_text == "Błąd: Nieprawidłowa liczba powtórzeń"
    assert state.status == "Błąd: Nieprawidłowa liczba powtórzeń (zakres: 1..10^9)"


def test_invalid_format_error():
    state = WindowState(frame_text="zz", repetitions_text="1")
    assert state.calculate() is None
    assert state.crc_text == "Błąd: Nieprawidłowy format bajtów"


def test_too_many_bytes_error():
    state = WindowState(frame_text="00" * 257, repetitions_text="1")
    assert state.calculate() is None
    assert state.crc_text == "Błąd: Przekroczono limit 256 bajtów"


def test_error_keeps_time_text():
    state = WindowState(time_text="7 ms", frame_text="", repetitions_text="1")
    state.calculate()
    assert state.time_text == "7 ms"


def test_clear_restores_defaults():
    state = WindowState(frame_text="01 02", repetitions_text="9")
    state.calculate()
    state.clear()
    assert state.frame_text == ""
    assert state.repetitions_text == "1"
    assert state.crc_text == "0000"
    assert state.time_text == "0 ms"
    assert state.status == "Wyczyszczono pola"


def test_copy_text_none_without_result():
    state = WindowState()
    assert state.copy_text() is None
    assert state.status == "Gotowy do obliczeń CRC"


def test_copy_text_after_error_is_none():
    state = WindowState(frame_text="", repetitions_text="1")
    state.calculate()
    assert state.copy_text() is None


def test_copy_text_after_result():
    state = WindowState(frame_text="01 10 00 11 00 03 06 1A C4 BA D0", repetitions_text="1")
    state.calculate()
    copied = state.copy_text()
    assert copied == state.crc_text
    assert state.status == "Skopiowano do schowka: " + copied


@given(st.binary(min_size=1, max_size=64))
def test_calculate_matches_crc_of_frame(frame):
    state = WindowState(frame_text=frame.hex(" "), repetitions_text="1")
    result = state.calculate()
    assert result is not None
    assert result.crc == calculate_crc16(frame)
    assert state.crc_text == format_crc(result.crc)