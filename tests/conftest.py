import gzip
from pathlib import Path

import pytest

GENES_CONFIG = "contig = 0\nstart = 1\nend = 2\ndelimiter = tab\n"

GENES_TSV = "\n".join([
    "# generated for tests",
    "# source: synthetic",
    "chr\tpos1\tpos2\tgene",
    "chr1\t100\t200\tBRCA2",
    "# interleaved comment",
    "chr2\t5\t10\tTP53",
    "chr10\t1000\t1999\tEGFR",
]) + "\n"


@pytest.fixture
def make_table(tmp_path: Path):
    """Write a data file (and optionally its sidecar) and return the data path."""

    def _make(data: str, config=GENES_CONFIG, name: str = "genes.tsv") -> Path:
        data_path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(data_path, "wt") as fh:
                fh.write(data)
        else:
            data_path.write_text(data)
        if config is not None:
            data_path.with_suffix(".config").write_text(config)
        return data_path

    return _make


@pytest.fixture
def genes_table(make_table) -> Path:
    return make_table(GENES_TSV)


@pytest.fixture
def genes_tsv_text() -> str:
    return GENES_TSV
