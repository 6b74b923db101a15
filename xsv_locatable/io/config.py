"""Sidecar configuration handling for XSV locatable tables.

Every data file ``<name>.<ext>`` is paired with a sibling ``<name>.config``
holding ``key=value`` lines::

	# columns are 0-based
	contig = 0
	start = 1
	end = 2
	delimiter = tab

A missing or unreadable sidecar only means the file is not ours. A sidecar
that exists but is malformed raises ``BadInputError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import Dict, Union
import os

from ..exceptions import BadInputError
from ..utils import is_comment, is_integer, resolve_delimiter

__all__ = [
	"CONFIG_FILE_EXTENSION",
	"REQUIRED_KEYS",
	"LocatableLayout",
	"get_config_file_path",
	"validate_input_data_file",
	"validate_input_config_file",
	"parse_config_text",
	"read_layout",
]

CONFIG_FILE_EXTENSION = ".config"
REQUIRED_KEYS = ("contig", "start", "end", "delimiter")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class LocatableLayout:
	"""How to find the locus in each row of one data file.

	Attributes
	----------
	delimiter : str
		Literal field separator.
	contig_column, start_column, end_column : int
		0-based column indices. Start and end may share a column (single-base loci).
	"""

	delimiter: str
	contig_column: int
	start_column: int
	end_column: int

	@property
	def max_column(self) -> int:
		return max(self.contig_column, self.start_column, self.end_column)


def get_config_file_path(data_file_path: PathLike) -> Path:
	"""Sibling sidecar path: the data file's last extension replaced by ``.config``.

	``sample.tsv`` -> ``sample.config``; ``annot`` -> ``annot.config``.
	The returned path may or may not exist.
	"""
	path = Path(data_file_path)
	return path.with_suffix(CONFIG_FILE_EXTENSION)


def validate_input_data_file(path: PathLike) -> bool:
	"""True if ``path`` exists, is readable and is not a directory."""
	p = Path(path)
	return p.exists() and os.access(p, os.R_OK) and not p.is_dir()


def validate_input_config_file(path: PathLike) -> bool:
	"""Same checks as a data file, plus the ``*.config`` naming pattern."""
	return validate_input_data_file(path) and fnmatch(Path(path).name, "*" + CONFIG_FILE_EXTENSION)


def _parse_key_values(text: str, source: str) -> Dict[str, str]:
	values: Dict[str, str] = {}
	for lineno, raw in enumerate(text.splitlines(), start=1):
		if not raw.strip() or is_comment(raw.lstrip()):
			continue
		# key=value, also accept key: value
		if "=" in raw:
			key, value = raw.split("=", 1)
		elif ":" in raw:
			key, value = raw.split(":", 1)
		else:
			raise BadInputError(f"Config file {source} line {lineno} is not a key=value pair: {raw!r}")
		key = key.strip().lower()
		if key in values:
			raise BadInputError(f"Config file {source} defines key '{key}' more than once (line {lineno})")
		# only spaces are trimmed: a literal tab is a legal delimiter value
		values[key] = value.strip(" ")
	return values


def _parse_column(values: Dict[str, str], key: str, source: str) -> int:
	raw = values[key].strip()
	if not is_integer(raw):
		raise BadInputError(f"Config file {source}: value for '{key}' is not an integer column index: {raw!r}")
	col = int(raw)
	if col < 0:
		raise BadInputError(f"Config file {source}: column index for '{key}' must be >= 0, got {col}")
	return col


def parse_config_text(text: str, source: str = "<config>") -> LocatableLayout:
	"""Parse sidecar content into a ``LocatableLayout``.

	Raises ``BadInputError`` naming ``source`` and the offending key when a
	required key is missing, a column index is not a non-negative integer
	or the delimiter is empty.
	"""
	values = _parse_key_values(text, source)
	missing = [k for k in REQUIRED_KEYS if k not in values]
	if missing:
		raise BadInputError(f"Config file {source} is missing required key(s): {', '.join(missing)}")
	delimiter = resolve_delimiter(values["delimiter"])
	if not delimiter:
		raise BadInputError(f"Config file {source}: 'delimiter' must be a non-empty string")
	return LocatableLayout(
		delimiter=delimiter,
		contig_column=_parse_column(values, "contig", source),
		start_column=_parse_column(values, "start", source),
		end_column=_parse_column(values, "end", source),
	)


def read_layout(config_file_path: PathLike) -> LocatableLayout:
	"""Read and parse the sidecar at ``config_file_path``."""
	path = Path(config_file_path)
	try:
		with open(path, "rt", encoding="utf-8") as fh:
			text = fh.read()
	except UnicodeDecodeError as e:
		raise BadInputError(f"Config file {path} is not valid text: {e}") from e
	return parse_config_text(text, source=str(path))
