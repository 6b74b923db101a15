"""Decoded row of an XSV locatable table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..exceptions import BadInputError, NoSuchFieldError
from ..utils import is_integer

__all__ = ["LocatableFeature"]


def _parse_position(value: str, column: int, label: str) -> int:
	if not is_integer(value):
		raise BadInputError(f"Cannot parse {label} position from column {column}: {value!r}")
	return int(value)


@dataclass(frozen=True)
class LocatableFeature:
	"""One data row bound to its header and locus columns.

	Attributes
	----------
	header : Tuple[str, ...]
		Column names, shared by every feature of the same file.
	fields : Tuple[str, ...]
		Reconciled raw values; always the same length as ``header``.
	contig_column, start_column, end_column : int
		0-based columns holding the locus. Start/end are parsed on
		construction so a bad coordinate fails at decode time.

	Equality compares ``fields`` and the three column indices only.
	"""

	header: Tuple[str, ...] = field(compare=False, repr=False)
	fields: Tuple[str, ...]
	contig_column: int
	start_column: int
	end_column: int
	_start: int = field(init=False, compare=False, repr=False)
	_end: int = field(init=False, compare=False, repr=False)

	def __post_init__(self) -> None:
		if not isinstance(self.header, tuple):
			object.__setattr__(self, "header", tuple(self.header))
		if not isinstance(self.fields, tuple):
			object.__setattr__(self, "fields", tuple(self.fields))
		if len(self.fields) != len(self.header):
			raise ValueError(f"Feature has {len(self.fields)} fields but header has {len(self.header)} columns")
		for label, col in (("contig", self.contig_column), ("start", self.start_column), ("end", self.end_column)):
			if not 0 <= col < len(self.fields):
				raise BadInputError(f"{label} column {col} is outside a row of {len(self.fields)} fields")
		object.__setattr__(self, "_start", _parse_position(self.fields[self.start_column], self.start_column, "start"))
		object.__setattr__(self, "_end", _parse_position(self.fields[self.end_column], self.end_column, "end"))

	# -- locus --------------------------------------------------------------
	@property
	def contig(self) -> str:
		return self.fields[self.contig_column]

	@property
	def start(self) -> int:
		return self._start

	@property
	def end(self) -> int:
		return self._end

	@property
	def length(self) -> int:
		"""Closed-interval span, ``end - start + 1``."""
		return self._end - self._start + 1

	# -- named access -------------------------------------------------------
	def get(self, name: str) -> str:
		"""Value of the first header column called ``name``."""
		try:
			idx = self.header.index(name)
		except ValueError:
			raise NoSuchFieldError(f"No field named '{name}' in header: {list(self.header)}") from None
		return self.fields[idx]

	def __getitem__(self, name: str) -> str:
		return self.get(name)

	def __contains__(self, name: object) -> bool:
		return name in self.header

	def __len__(self) -> int:
		return len(self.fields)

	def to_dict(self) -> Dict[str, str]:
		"""Header name -> value. Duplicated names keep the first value."""
		out: Dict[str, str] = {}
		for name, value in zip(self.header, self.fields):
			out.setdefault(name, value)
		return out
