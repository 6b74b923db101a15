"""Codec for delimiter-separated tables of genomic intervals.

Files this codec reads have a sibling ``.config`` sidecar naming the
delimiter and the contig / start / end columns (see ``io.config``). The
table itself may start with ``#`` comment lines; the first non-comment
line is the header and every later non-comment line is one feature.
Comment lines may also appear between data lines.

Typical use::

	codec = XsvLocatableTableCodec()
	session = codec.open_session("genes.tsv")
	if session is not None:
		with LineIterator("genes.tsv") as lines:
			codec.read_header(session, lines)
			for line in lines:
				feature = codec.decode(session, line)

or simply ``for feature in codec.iter_features("genes.tsv")``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..exceptions import BadInputError
from ..io.config import (
	get_config_file_path,
	read_layout,
	validate_input_config_file,
	validate_input_data_file,
)
from ..io.line_reader import LineIterator
from ..utils import is_comment, log_warn, split_fields
from .feature import LocatableFeature
from .session import DecoderSession

__all__ = ["XsvLocatableTableCodec"]

PathLike = Union[str, Path]


class XsvLocatableTableCodec:
	"""Stateless XSV locatable table codec.

	Parameters
	----------
	strict : bool
		If True, a data line whose field count differs from the header is a
		``BadInputError`` instead of being padded / truncated with a warning.
	"""

	def __init__(self, strict: bool = False):
		self.strict = strict

	# -- format detection ---------------------------------------------------
	def open_session(self, path: PathLike) -> Optional[DecoderSession]:
		"""Bind the sidecar layout for ``path`` into a fresh session.

		Returns None when ``path`` or its sidecar is missing, unreadable or a
		directory. Raises ``BadInputError`` when the sidecar exists but its
		content is malformed.
		"""
		data_path = Path(path)
		config_path = get_config_file_path(data_path)
		if not (validate_input_data_file(data_path) and validate_input_config_file(config_path)):
			return None
		layout = read_layout(config_path)
		return DecoderSession(layout=layout, source=str(data_path), strict=self.strict)

	def can_decode(self, path: PathLike) -> bool:
		return self.open_session(path) is not None

	# -- decoding -----------------------------------------------------------
	def read_header(self, session: DecoderSession, lines: Iterable[str]) -> Tuple[str, ...]:
		"""Consume leading comment lines and the header line from ``lines``.

		Only lines up to and including the header are pulled, so pass an
		iterator (e.g. a ``LineIterator`` or an open file) to keep reading data
		from it. Trailing line terminators are ignored here and in ``decode``.
		"""
		if session.header is not None:
			raise BadInputError(f"Header for {session.describe()} has already been read")
		for line in lines:
			line = line.rstrip("\r\n")
			session.advance()
			if is_comment(line):
				continue
			header = tuple(split_fields(line, session.layout.delimiter))
			if not header:
				raise BadInputError(f"Header line {session.line_number} of {session.describe()} has no column names")
			session.capture_header(header)
			return header
		raise BadInputError(f"Given file is malformed - does not contain a header: {session.describe()}")

	def decode(self, session: DecoderSession, line: str) -> Optional[LocatableFeature]:
		"""Decode one data line; ``None`` for comment lines."""
		header = session.require_header()
		line = line.rstrip("\r\n")
		lineno = session.advance()
		if is_comment(line):
			return None

		split = split_fields(line, session.layout.delimiter)
		if len(split) < 1:
			raise BadInputError(f"XSV file {session.describe()} has a line with no delimited fields at line number: {lineno}")
		if len(split) != len(header):
			if session.strict:
				raise BadInputError(
					f"Line {lineno} of {session.describe()} has {len(split)} fields but the header has {len(header)}"
				)
			if len(split) < len(header):
				log_warn(f"Line {lineno} does not have the same number of fields as header! Padding with empty fields to end...")
				split.extend([""] * (len(header) - len(split)))
			else:
				log_warn(f"Line {lineno} does not have the same number of fields as header! Truncating fields from end...")
				del split[len(header):]

		layout = session.layout
		try:
			return LocatableFeature(header, tuple(split), layout.contig_column, layout.start_column, layout.end_column)
		except BadInputError as e:
			raise BadInputError(f"Line {lineno} of {session.describe()}: {e}") from e

	# -- whole-file conveniences -------------------------------------------
	def _require_session(self, path: PathLike) -> DecoderSession:
		session = self.open_session(path)
		if session is None:
			raise BadInputError(f"Not a decodable XSV locatable table (file or {get_config_file_path(path).name} missing): {path}")
		return session

	def iter_features(self, path: PathLike) -> Iterator[LocatableFeature]:
		"""Yield every feature of ``path`` in file order, skipping comments."""
		session = self._require_session(path)
		with LineIterator(path) as lines:
			self.read_header(session, lines)
			for line in lines:
				feature = self.decode(session, line)
				if feature is not None:
					yield feature

	def read_table(self, path: PathLike) -> Tuple[Tuple[str, ...], List[LocatableFeature]]:
		"""Eagerly decode ``path``; returns (header, features)."""
		session = self._require_session(path)
		with LineIterator(path) as lines:
			header = self.read_header(session, lines)
			features = [f for f in (self.decode(session, line) for line in lines) if f is not None]
		return header, features
