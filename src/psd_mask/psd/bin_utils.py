"""
Binary processing utilities.

Every reader here raises :py:class:`~psd_mask.exceptions.TruncatedSectionError`
when the underlying file-like object runs out of data.
"""

import logging
import struct
from typing import Any, BinaryIO

from psd_mask.exceptions import TruncatedSectionError

logger = logging.getLogger(__name__)


def read_fmt(fmt: str, fp: BinaryIO) -> tuple[Any, ...]:
    """
    Reads data from ``fp`` according to ``fmt``.

    The format is always big-endian.
    """
    fmt = ">" + fmt
    fmt_size = struct.calcsize(fmt)
    data = fp.read(fmt_size)
    if len(data) != fmt_size:
        raise TruncatedSectionError(fmt_size, len(data))
    return struct.unpack(fmt, data)


def read_length_block(fp: BinaryIO, fmt: str = "I") -> bytes:
    """
    Read a block of data with a length marker at the beginning.

    :param fp: file-like
    :param fmt: format of the length marker
    :return: bytes object
    """
    length = read_fmt(fmt, fp)[0]
    data = fp.read(length)
    if len(data) != length:
        raise TruncatedSectionError(length, len(data))
    return data


def skip(fp: BinaryIO, size: int) -> bytes:
    """
    Discard ``size`` bytes from ``fp`` and return them.
    """
    if size < 0:
        raise TruncatedSectionError(size, 0, "Negative skip of %d bytes" % size)
    data = fp.read(size)
    if len(data) != size:
        raise TruncatedSectionError(size, len(data))
    return data


def trimmed_repr(data: Any, trim_length: int = 16) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(
                data[:trim_length] + b" ... =" + str(len(data)).encode("ascii")
            )
    return repr(data)
