"""Per-file decoding state.

A ``DecoderSession`` is created once a file has been recognised and its
sidecar bound. It owns everything that changes while a file is read (the
header, the running line number and the position in the header state
machine) so the codec itself stays stateless and one session per open
file is all that is needed.

State machine::

	SKIPPING_LEADING_COMMENTS --(first non-# line)--> HEADER_CAPTURED
	HEADER_CAPTURED --(first decode call)--> DECODING_DATA
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import BadInputError
from ..io.config import LocatableLayout

__all__ = ["DecoderState", "DecoderSession"]


class DecoderState(Enum):
	SKIPPING_LEADING_COMMENTS = "skipping_leading_comments"
	HEADER_CAPTURED = "header_captured"
	DECODING_DATA = "decoding_data"


@dataclass
class DecoderSession:
	"""Bound layout plus mutable reading position for one data file.

	Not safe to share between threads; open one session per file.
	"""

	layout: LocatableLayout
	source: Optional[str] = None
	strict: bool = False
	header: Optional[Tuple[str, ...]] = None
	line_number: int = 0
	state: DecoderState = DecoderState.SKIPPING_LEADING_COMMENTS

	def advance(self) -> int:
		"""Count one consumed line and return its 1-based number."""
		self.line_number += 1
		return self.line_number

	def capture_header(self, header: Tuple[str, ...]) -> None:
		if self.state is not DecoderState.SKIPPING_LEADING_COMMENTS:
			raise BadInputError(f"Header for {self.describe()} has already been read")
		if len(header) <= self.layout.max_column:
			raise BadInputError(
				f"Header of {self.describe()} has {len(header)} columns but the config "
				f"references column {self.layout.max_column}"
			)
		self.header = header
		self.state = DecoderState.HEADER_CAPTURED

	def require_header(self) -> Tuple[str, ...]:
		if self.header is None:
			raise BadInputError(f"Cannot decode {self.describe()} before its header has been read")
		if self.state is DecoderState.HEADER_CAPTURED:
			self.state = DecoderState.DECODING_DATA
		return self.header

	def describe(self) -> str:
		return self.source if self.source else "<stream>"
