"""xsv_locatable – decode delimiter-separated tables of genomic intervals.

Subpackages:
	io        – sidecar ``.config`` resolution and a peekable line source
	core      – feature model, per-file decoder session and the table codec
	metrics   – DataFrame assembly and per-contig summaries
	plot      – feature-table QC visualisations

The common entry points are re-exported here so users can simply::

	from xsv_locatable import XsvLocatableTableCodec

	for feature in XsvLocatableTableCodec().iter_features("genes.tsv"):
		print(feature.contig, feature.start, feature.end, feature["gene"])
"""

from .core import XsvLocatableTableCodec, LocatableFeature, DecoderSession, DecoderState  # noqa: F401
from .exceptions import XsvCodecError, BadInputError, NoSuchFieldError  # noqa: F401
from .io import LocatableLayout, LineIterator  # noqa: F401

__version__ = "0.1.0"
__all__ = [
	"XsvLocatableTableCodec",
	"LocatableFeature",
	"LocatableLayout",
	"LineIterator",
	"DecoderSession",
	"DecoderState",
	"XsvCodecError",
	"BadInputError",
	"NoSuchFieldError",
	"__version__",
]
