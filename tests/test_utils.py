from xsv_locatable.utils import (
    is_comment,
    log_warn,
    normalize_chrom,
    resolve_delimiter,
    split_fields,
)


def test_split_fields_keeps_trailing_empty_field():
    assert split_fields("chr1\t100\t200\t", "\t") == ["chr1", "100", "200", ""]


def test_split_fields_is_literal_not_regex():
    assert split_fields("a|b|c", "|") == ["a", "b", "c"]
    assert split_fields("a.b", ".") == ["a", "b"]


def test_split_fields_degenerate_lines():
    assert split_fields("", "\t") == []
    assert split_fields("\t\t\t", "\t") == []
    assert split_fields("single", "\t") == ["single"]


def test_resolve_delimiter():
    assert resolve_delimiter("tab") == "\t"
    assert resolve_delimiter(" Comma ") == ","
    assert resolve_delimiter(" ") == " "
    assert resolve_delimiter("") == ""


def test_is_comment():
    assert is_comment("#x")
    assert not is_comment(" #x")


def test_normalize_chrom():
    assert normalize_chrom("chr1") == "1"
    assert normalize_chrom("CHRX") == "X"
    assert normalize_chrom("MT") == "MT"
    assert normalize_chrom(None) == ""


def test_log_warn_format(capsys):
    log_warn("something odd")
    out = capsys.readouterr().out
    assert "[WARN] something odd" in out
