"""
Exceptions raised by psd_mask.
"""


class Error(Exception):
    """Base class of all the exceptions in psd_mask."""


class TruncatedSectionError(Error, ValueError):
    """
    The section declares or needs more bytes than the data provides.

    .. py:attribute:: expected

        Number of bytes requested.

    .. py:attribute:: actual

        Number of bytes that were available.
    """

    def __init__(self, expected: int, actual: int, message: str = "") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            message
            or "Truncated or malformed section: expected %d bytes, got %d"
            % (expected, actual)
        )
