"""Core decoding: feature model, per-file session and the table codec."""

from .codec import XsvLocatableTableCodec  # noqa: F401
from .feature import LocatableFeature  # noqa: F401
from .session import DecoderSession, DecoderState  # noqa: F401

__all__ = ["XsvLocatableTableCodec", "LocatableFeature", "DecoderSession", "DecoderState"]
