"""Hexdump CLI"""

import fire
import logging
import sys

from hexdump_tools.binary_file import BinaryFileError, read_binary_file
from hexdump_tools.dump_binary import dump_binary_lines

USAGE = "Usage: hexdump-lt PATH [--log_level LEVEL]"


def __config_logger(level: str) -> None:
    """Config logger

    Args:
        level (str): Log level
    """

    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
    )


def hexdump(path, *extra_args, log_level="WARNING") -> None:
    """Dump file with HEX

    Args:
        path (str): File path
        log_level (str, optional): Log level. Defaults to "WARNING". {CRITICAL|FATAL|ERROR|WARN|WARNING|INFO|DEBUG|NOTSET}

    Raises:
        ValueError: Invalid argument `path`
        ValueError: Invalid argument `log_level`
    """

    if len(extra_args) != 0:
        print(USAGE, file=sys.stderr)
        sys.exit(2)
    if not isinstance(path, str):
        raise ValueError("Argument `path` must be str.")
    if not isinstance(log_level, str):
        raise ValueError("Argument `log_level` must be str.")

    __config_logger(log_level)
    logger = logging.getLogger(__name__)

    try:
        data = read_binary_file(path)
    except BinaryFileError as e:
        logger.error(f"Cannot dump `{e.path}`: {e.message}")
        print(e.message)
        sys.exit(1)

    row_count = 0
    for line in dump_binary_lines(data):
        print(line)
        row_count += 1
    logger.debug(f"Wrote {row_count} row(s).")


def __quote_args(args: list[str]) -> list[str]:
    """Quote positional arguments

    Args:
        args (list[str]): Command line arguments

    Returns:
        list[str]: Arguments with positionals as Python string literals
    """

    return [arg if arg.startswith("-") else repr(arg) for arg in args]


def main():
    # Keep paths such as `2024` or `None` as str
    fire.Fire(hexdump, command=__quote_args(sys.argv[1:]))


if __name__ == "__main__":
    main()
