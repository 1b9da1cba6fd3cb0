"""Binary File"""

import logging
import os


class BinaryFileError(Exception):
    """Binary File Error"""

    def __init__(self, path: str | os.PathLike, error: OSError):
        """Constructor

        Args:
            path (str | os.PathLike): File path
            error (OSError): Underlying error
        """

        self.path = path
        self.error = error
        self.message = str(error)
        super().__init__(self.message)


class FileOpenError(BinaryFileError):
    """The file could not be opened"""


class FileReadError(BinaryFileError):
    """The file was opened but could not be read to the end"""


def read_binary_file(path: str | os.PathLike) -> bytes:
    """Read whole binary file

    Args:
        path (str | os.PathLike): File path

    Raises:
        FileOpenError: The file could not be opened
        FileReadError: The file could not be read

    Returns:
        bytes: File contents
    """

    logger = logging.getLogger(__name__)

    logger.debug(f"Opening `{path}`.")
    try:
        file = open(path, "rb")
    except OSError as e:
        raise FileOpenError(path, e) from e

    with file:
        try:
            data = file.read()
        except OSError as e:
            raise FileReadError(path, e) from e

    logger.debug(f"Read {len(data)} byte(s) from `{path}`.")
    return data
