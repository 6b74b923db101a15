"""Exception types raised while configuring against or decoding an XSV table.

A file that simply is not an XSV locatable table is *not* an error: the
codec reports that through ``can_decode`` returning ``False``. The types
below are for files that claim to be one of ours but are broken.
"""

__all__ = ["XsvCodecError", "BadInputError", "NoSuchFieldError"]


class XsvCodecError(Exception):
    """Base class for every error raised by ``xsv_locatable``."""


class BadInputError(XsvCodecError, ValueError):
    """Malformed configuration or data; fatal for the current file."""


class NoSuchFieldError(XsvCodecError, KeyError):
    """A field name was requested that is not present in the header."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""
