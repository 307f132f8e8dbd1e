import io
import logging
import struct
from typing import Any, Type, TypeVar

from psd_mask.psd.base import BaseElement
from psd_mask.psd.bin_utils import trimmed_repr

T = TypeVar("T", bound=BaseElement)

logging.basicConfig(level=logging.DEBUG)


def pack_record(
    top: int = 0,
    left: int = 0,
    bottom: int = 0,
    right: int = 0,
    default_color: int = 0,
    flags: int = 0,
) -> bytes:
    """Pack the first record of the block."""
    return struct.pack(">4i2B", top, left, bottom, right, default_color, flags)


def pack_second_record(
    top: int = 0,
    left: int = 0,
    bottom: int = 0,
    right: int = 0,
    default_color: int = 0,
    flags: int = 0,
) -> bytes:
    """Pack the second record, which stores flags and color first."""
    return struct.pack(">2B4i", flags, default_color, top, left, bottom, right)


def pack_section(body: bytes) -> bytes:
    return struct.pack(">I", len(body)) + body


def check_read(cls: Type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
    with io.BytesIO(data) as f:
        element = cls.read(f, *args, **kwargs)
        assert f.tell() == len(data), "%d of %s" % (f.tell(), trimmed_repr(data))
    element.validate()
    return element
