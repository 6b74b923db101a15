"""Forward-only line source feeding the header extractor and line decoder.

Wraps a plain or gzipped text file (or any iterable of strings) with the
``has_next`` / ``peek`` / ``next`` protocol the decoder expects. Line
terminators are stripped; nothing else about the text is touched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union
import gzip

from ..exceptions import BadInputError

__all__ = ["LineIterator"]

_SENTINEL = object()


class LineIterator:
	"""Lazy, peekable iterator over the lines of a text source.

	Parameters
	----------
	source : str | Path | Iterable[str]
		Path to an (optionally gzipped) text file, or an iterable of lines.
	"""

	def __init__(self, source: Union[str, Path, Iterable[str]]):
		self._fh = None
		if isinstance(source, (str, Path)):
			self.path: Optional[str] = str(source)
			self._fh = self._open(self.path)
			self._it: Iterator[str] = iter(self._fh)
		else:
			self.path = None
			self._it = iter(source)
		self._buffer = _SENTINEL

	@staticmethod
	def _open(path: str):  # type: ignore[return-type]
		if path.endswith('.gz'):
			return gzip.open(path, 'rt', encoding='utf-8')
		return open(path, 'rt', encoding='utf-8')

	# -- iterator protocol ------------------------------------------------
	def has_next(self) -> bool:
		if self._buffer is _SENTINEL:
			try:
				line = next(self._it, _SENTINEL)
			except UnicodeDecodeError as e:
				raise BadInputError(f"Data file {self.path or '<stream>'} is not valid text: {e}") from e
			self._buffer = line.rstrip('\r\n') if line is not _SENTINEL else _SENTINEL
		return self._buffer is not _SENTINEL

	def peek(self) -> str:
		"""Return the next line without consuming it."""
		if not self.has_next():
			raise StopIteration
		return self._buffer  # type: ignore[return-value]

	def next(self) -> str:
		line = self.peek()
		self._buffer = _SENTINEL
		return line

	def __iter__(self) -> "LineIterator":
		return self

	def __next__(self) -> str:
		return self.next()

	# -- resource handling ------------------------------------------------
	def close(self) -> None:
		if self._fh is not None:
			self._fh.close()
			self._fh = None

	def __enter__(self) -> "LineIterator":
		return self

	def __exit__(self, *exc) -> None:
		self.close()
