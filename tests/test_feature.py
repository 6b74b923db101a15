import pytest

from xsv_locatable.core.feature import LocatableFeature
from xsv_locatable.exceptions import BadInputError, NoSuchFieldError

HEADER = ("chr", "pos1", "pos2", "gene")


def _feature(fields, header=HEADER, cols=(0, 1, 2)):
    return LocatableFeature(header, tuple(fields), *cols)


def test_locus_accessors():
    feat = _feature(["chr1", "100", "200", "BRCA1"])
    assert feat.contig == "chr1"
    assert feat.start == 100
    assert feat.end == 200
    assert feat.length == 101
    assert len(feat) == 4


def test_single_base_locus_uses_one_column():
    feat = LocatableFeature(("pos", "chrom"), ("42", "chrM"), 1, 0, 0)
    assert (feat.contig, feat.start, feat.end) == ("chrM", 42, 42)
    assert feat.length == 1


def test_named_lookup():
    feat = _feature(["chr1", "100", "200", "BRCA1"])
    assert feat.get("gene") == "BRCA1"
    assert feat["pos1"] == "100"
    assert "gene" in feat
    assert "score" not in feat
    assert feat.to_dict() == {"chr": "chr1", "pos1": "100", "pos2": "200", "gene": "BRCA1"}


def test_missing_name_raises_no_such_field():
    feat = _feature(["chr1", "100", "200", "BRCA1"])
    with pytest.raises(NoSuchFieldError, match="score"):
        feat.get("score")
    with pytest.raises(KeyError):
        feat["score"]


def test_duplicate_header_names_resolve_to_first():
    feat = LocatableFeature(("chr", "s", "e", "x", "x"), ("1", "1", "2", "first", "second"), 0, 1, 2)
    assert feat["x"] == "first"
    assert feat.to_dict()["x"] == "first"


@pytest.mark.parametrize("fields, column, value", [
    (["chr1", "abc", "200", ""], "column 1", "'abc'"),
    (["chr1", "100", "", ""], "column 2", "''"),
    (["chr1", "1_000", "200", ""], "column 1", "'1_000'"),
    (["chr1", " 20 ", "200", ""], "column 1", "' 20 '"),
    (["chr1", "100", "\u0662\u0660", ""], "column 2", "'\u0662\u0660'"),
])
def test_unparsable_position(fields, column, value):
    with pytest.raises(BadInputError) as excinfo:
        _feature(fields)
    assert column in str(excinfo.value)
    assert value in str(excinfo.value)


def test_field_count_must_match_header():
    with pytest.raises(ValueError):
        _feature(["chr1", "100", "200"])


def test_equality_ignores_header_object():
    a = _feature(["chr1", "100", "200", "g"])
    b = _feature(["chr1", "100", "200", "g"], header=("c", "s", "e", "name"))
    c = _feature(["chr1", "100", "200", "g"], cols=(0, 1, 1))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_immutable():
    feat = _feature(["chr1", "100", "200", "g"])
    with pytest.raises(AttributeError):
        feat.fields = ("x",)


def test_signed_positions_are_accepted():
    feat = _feature(["chr1", "+5", "-3", "g"])
    assert (feat.start, feat.end) == (5, -3)
