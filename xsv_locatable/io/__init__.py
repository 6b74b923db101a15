"""I/O subpackage.

Sidecar configuration resolution plus a lightweight peekable line source
for plain / gzipped XSV tables.
"""

from .config import (  # noqa: F401
	CONFIG_FILE_EXTENSION,
	LocatableLayout,
	get_config_file_path,
	parse_config_text,
	read_layout,
	validate_input_config_file,
	validate_input_data_file,
)
from .line_reader import LineIterator  # noqa: F401

__all__ = [
	"CONFIG_FILE_EXTENSION",
	"LocatableLayout",
	"LineIterator",
	"get_config_file_path",
	"parse_config_text",
	"read_layout",
	"validate_input_config_file",
	"validate_input_data_file",
]
