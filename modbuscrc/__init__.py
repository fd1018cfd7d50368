"""CRC-16 Modbus RTU checksums, hex frame parsing, timed runs and a Tkinter window."""

__version__ = "1.0.0"
__all__ = ["crc", "hexparse", "session", "gui"]