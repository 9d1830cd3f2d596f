"""Tests for the FASTA reader."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from nucleo.errors import EndOfInput, FastaFormatError
from nucleo.io.fasta import (
    FastaReader,
    FastaRecord,
    get_name,
    get_sequence,
    is_name,
    load_fasta_dict,
    parse_fasta_string,
    read_fasta,
)


def test_read_next_returns_records_then_end_of_input() -> None:
    reader = FastaReader(io.StringIO(">r1\nACGT\nAAAA\n>r2\nAAGGTT\n"))

    assert reader.read_next() == FastaRecord(name="r1", sequence="ACGTAAAA")
    assert reader.read_next() == FastaRecord(name="r2", sequence="AAGGTT")
    with pytest.raises(EndOfInput):
        reader.read_next()


def test_end_of_input_is_sticky() -> None:
    reader = FastaReader(io.StringIO(">r1\nAC"))
    assert reader.read_next().sequence == "AC"
    for _ in range(3):
        with pytest.raises(EndOfInput):
            reader.read_next()


def test_empty_stream_signals_end_of_input() -> None:
    reader = FastaReader(io.StringIO(""))
    with pytest.raises(EndOfInput):
        reader.read_next()


def test_end_of_input_is_not_a_format_error() -> None:
    with pytest.raises(EndOfInput) as excinfo:
        FastaReader(io.StringIO("")).read_next()
    assert not isinstance(excinfo.value, FastaFormatError)


def test_missing_name_line_is_format_error_on_first_call() -> None:
    reader = FastaReader(io.StringIO("ACGT\n>r1\nAAAA\n"))
    with pytest.raises(FastaFormatError, match="invalid format"):
        reader.read_next()


def test_blank_first_line_is_format_error() -> None:
    reader = FastaReader(io.StringIO("\n>r1\nACGT\n"))
    with pytest.raises(FastaFormatError):
        reader.read_next()


def test_leading_whitespace_before_marker_is_rejected() -> None:
    reader = FastaReader(io.StringIO(" >r1\nACGT\n"))
    with pytest.raises(FastaFormatError):
        reader.read_next()


def test_blank_lines_inside_sequence_block_are_ignored() -> None:
    records = list(parse_fasta_string(">r1\nAC\n\nGT\n\n>r2\nTT"))
    assert [r.sequence for r in records] == ["ACGT", "TT"]


def test_name_and_sequence_lines_are_trimmed() -> None:
    records = list(parse_fasta_string(">  seq one  \r\nACGT  \r\nTTTT\r\n"))
    assert records == [FastaRecord(name="seq one", sequence="ACGTTTTT")]


def test_record_without_sequence_lines() -> None:
    records = list(parse_fasta_string(">empty\n>full\nAC\n"))
    assert records[0] == FastaRecord(name="empty", sequence="")
    assert records[1] == FastaRecord(name="full", sequence="AC")


def test_iterate_preserves_file_order() -> None:
    lines = [">a", "AA", "CC", ">b", "GG", ">c", "T", "T", "T"]
    reader = FastaReader(io.StringIO("\n".join(lines)))
    records = list(reader.iterate())
    assert [r.name for r in records] == ["a", "b", "c"]
    assert [r.sequence for r in records] == ["AACC", "GG", "TTT"]


def test_iterate_yields_format_error_and_stops() -> None:
    reader = FastaReader(io.StringIO("not fasta\n>r1\nACGT\n"))
    items = list(reader)
    assert len(items) == 1
    assert isinstance(items[0], FastaFormatError)


def test_iterate_on_empty_stream_yields_nothing() -> None:
    assert list(FastaReader(io.StringIO(""))) == []


def test_iterate_continues_after_read_next() -> None:
    reader = FastaReader(io.StringIO(">a\nA\n>b\nC\n>c\nG\n"))
    assert reader.read_next().name == "a"
    assert [r.name for r in reader] == ["b", "c"]


def test_reader_accepts_binary_handle() -> None:
    reader = FastaReader(io.BytesIO(b">r1\nACGT\n>r2\nGG\n"))
    assert [r.sequence for r in reader] == ["ACGT", "GG"]


def test_reader_does_not_close_handle() -> None:
    handle = io.StringIO(">r1\nACGT\n")
    list(FastaReader(handle))
    assert not handle.closed


def test_read_fasta_from_file(tmp_path: Path) -> None:
    in_path = tmp_path / "in.fasta"
    in_path.write_text(">a\nAA\n> b c\ncc", encoding="utf-8")
    with in_path.open(encoding="utf-8") as handle:
        records = list(read_fasta(handle))
    assert len(records) == 2
    assert records[1].name == "b c"
    assert records[1].sequence == "cc"


def test_read_fasta_raises_format_error() -> None:
    with pytest.raises(FastaFormatError):
        list(read_fasta(io.StringIO("ACGT\n")))


def test_format_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="nucleo"):
        list(FastaReader(io.StringIO("ACGT\n")))
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_end_of_input_is_not_logged_as_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="nucleo"):
        list(FastaReader(io.StringIO(">r1\nACGT\n")))
    assert all(r.levelno < logging.WARNING for r in caplog.records)


def test_load_fasta_dict() -> None:
    mapping = load_fasta_dict(io.StringIO(">x\nAC\n>y\nGT\n"))
    assert mapping == {"x": "AC", "y": "GT"}


def test_record_formatting() -> None:
    record = FastaRecord(name="seq1", sequence="ACGTACGTAC")
    assert len(record) == 10
    assert str(record) == ">seq1\nACGTACGTAC"
    assert record.to_fasta(line_width=4) == ">seq1\nACGT\nACGT\nAC"


def test_line_helpers() -> None:
    assert is_name(">abcdef")
    assert not is_name("abcdefg")
    assert get_name(">abc") == "abc"
    assert get_name("abc") == ""
    assert get_sequence("ACGT\n") == "ACGT"


def test_wrapped_records_are_concatenated(sample_fasta: str) -> None:
    records = list(parse_fasta_string(sample_fasta))
    assert [r.name for r in records] == ["Rosalind_6404", "Rosalind_5959", "Rosalind_0808"]
    assert records[0].sequence == (
        "CCTGCGGAAGATCGGCACTAGAATAGCCAGAACCGTTTCTCTGAGGCTTCCGGCCTTCCC"
        "TCCCACTAATAATTCTGAGG"
    )
    assert len(records[1]) == 84
    assert len(records[2]) == 60


def test_library_leaves_logging_setup_to_caller() -> None:
    import nucleo  # noqa: F401

    package_logger = logging.getLogger("nucleo")
    assert package_logger.handlers == []
    assert package_logger.level == logging.NOTSET
    assert logging.getLogger("nucleo.io.fasta").handlers == []
