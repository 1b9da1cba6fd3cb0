"""Dump binary with HEX"""

from typing import Iterator

ROW_SIZE = 16
PRINTABLE_MIN = 0x21
PRINTABLE_MAX = 0x7E
PLACEHOLDER = "."


def is_printable(byte: int) -> bool:
    """Is printable

    Args:
        byte (int): Byte value

    Returns:
        bool: True if the byte is shown as itself in the sidebar, else False
    """

    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


def printable_char(byte: int) -> str:
    """Sidebar character of a byte

    Args:
        byte (int): Byte value

    Returns:
        str: The ASCII character if printable, else placeholder
    """

    if not is_printable(byte):
        return PLACEHOLDER
    return chr(byte)


def dump_binary_line(address: int, chunk: bytes) -> str:
    """Dump one row

    Args:
        address (int): Offset of the first byte of the chunk
        chunk (bytes): 1 to 16 bytes

    Raises:
        ValueError: Invalid argument `address`
        ValueError: Invalid argument `chunk`

    Returns:
        str: Row without line terminator
    """

    if address < 0:
        raise ValueError("Argument `address` must not be negative.")
    if len(chunk) < 1 or ROW_SIZE < len(chunk):
        raise ValueError(
            f"Argument `chunk` length out of range. (1 <= len(chunk) <= {ROW_SIZE})"
        )

    padding = ROW_SIZE - len(chunk)

    line = format(address, "08X")
    line += " "
    for byte in chunk:
        line += format(byte, "02X")
        line += " "
    # Keep the sidebar aligned with full rows
    line += "   " * padding
    line += "|"
    for byte in chunk:
        line += printable_char(byte)
    line += PLACEHOLDER * padding
    line += "|"
    return line


def dump_binary_lines(data: bytes) -> Iterator[str]:
    """Dump binary with HEX, row by row

    Args:
        data (bytes): Data

    Yields:
        str: Row without line terminator
    """

    for address in range(0, len(data), ROW_SIZE):
        chunk = bytes(data[address : address + ROW_SIZE])
        yield dump_binary_line(address, chunk)


def dump_binary(data: bytes) -> str:
    """Dump binary with HEX

    Args:
        data (bytes): Data

    Returns:
        str: Binary dumped string, empty if data is empty
    """

    return "\n".join(dump_binary_lines(data))
