import gzip

import pytest

from xsv_locatable.io.line_reader import LineIterator


def test_peek_does_not_consume():
    it = LineIterator(["a\n", "b\r\n"])
    assert it.has_next()
    assert it.peek() == "a"
    assert it.peek() == "a"
    assert it.next() == "a"
    assert next(it) == "b"
    assert not it.has_next()
    with pytest.raises(StopIteration):
        it.next()


def test_reads_plain_and_gzipped_files(tmp_path):
    plain = tmp_path / "t.tsv"
    plain.write_text("x\ty\n1\t2\n")
    packed = tmp_path / "t.tsv.gz"
    with gzip.open(packed, "wt") as fh:
        fh.write("x\ty\n1\t2\n")
    for path in (plain, packed):
        with LineIterator(path) as it:
            assert list(it) == ["x\ty", "1\t2"]


def test_iteration_resumes_after_partial_read():
    it = LineIterator(iter(["h", "1", "2"]))
    for line in it:
        break
    assert list(it) == ["1", "2"]
