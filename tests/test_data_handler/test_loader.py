"""
Test Suite for Delimited Record Loading.

Covers header skipping, quote stripping, short-record skipping, lenient vs
strict handling of malformed numbers and file-level errors.
"""

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import numpy as np
import pytest

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.data_handler import (
    DatasetParseError,
    MarketingDataset,
    load_dataset,
    load_records,
    parse_line,
)
from bankcast.data_handler.loader import split_record

# =========================================================================== #
#                    LINE PARSING                                             #
# =========================================================================== #


@pytest.mark.unit
def test_split_record_strips_quotes():
    """Double quotes are removed before splitting on ';'."""
    assert split_record('"a";"b";3\n') == ["a", "b", "3"]


@pytest.mark.unit
def test_split_record_drops_trailing_empty_fields():
    assert split_record('1;"";2;;""\n') == ["1", "", "2"]
    assert split_record('a;b;\r\n') == ["a", "b"]


@pytest.mark.unit
def test_blank_label_record_is_skipped(bank_lines, encoder):
    """A record whose 17th field is empty has only 16 fields and is not loaded."""
    blank_label = bank_lines[1].rsplit(";", 1)[0] + ';""'
    dataset, stats = load_records([bank_lines[0], blank_label, bank_lines[3]], encoder)

    assert len(dataset) == 1
    assert stats.rows_read == 2
    assert stats.loaded == 1
    assert stats.skipped_short == 1
    assert parse_line(blank_label, encoder) is None


@pytest.mark.unit
def test_parse_line_labels(bank_lines, encoder):
    """Field 17 decides the label."""
    first = parse_line(bank_lines[1], encoder)
    third = parse_line(bank_lines[3], encoder)

    assert first.label == 0.0
    assert third.label == 1.0
    assert first.features.shape == (16,)


@pytest.mark.unit
def test_parse_line_short_record_returns_none(encoder):
    """Records with fewer than 17 fields are not examples."""
    assert parse_line("30;admin.;married", encoder) is None

# =========================================================================== #
#                    IN-MEMORY LOADING                                        #
# =========================================================================== #


@pytest.mark.unit
def test_load_records_skips_header(bank_lines, encoder):
    """The first line is never treated as data."""
    dataset, stats = load_records(bank_lines, encoder)

    assert isinstance(dataset, MarketingDataset)
    assert len(dataset) == 4
    assert stats.loaded == 4
    assert stats.skipped == 0
    np.testing.assert_array_equal(dataset.labels, [0.0, 0.0, 1.0, 1.0])


@pytest.mark.unit
def test_load_records_header_only_is_empty(bank_lines, encoder):
    """A file with only a header yields an empty dataset."""
    dataset, stats = load_records(bank_lines[:1], encoder)

    assert len(dataset) == 0
    assert dataset.features.shape == (0, 16)
    assert stats.rows_read == 0


@pytest.mark.unit
def test_load_records_keeps_order_and_duplicates(bank_lines, encoder):
    """Duplicated rows are kept, in file order."""
    lines = [bank_lines[0], bank_lines[3], bank_lines[1], bank_lines[3]]
    dataset, _ = load_records(lines, encoder)

    assert len(dataset) == 3
    np.testing.assert_array_equal(dataset.labels, [1.0, 0.0, 1.0])
    np.testing.assert_array_equal(dataset.features[0], dataset.features[2])


@pytest.mark.unit
def test_load_records_skips_short_and_blank_lines(bank_lines, encoder):
    """Short and blank lines are skipped silently."""
    lines = [bank_lines[0], "1;2;3", "", bank_lines[1]]
    dataset, stats = load_records(lines, encoder)

    assert len(dataset) == 1
    assert stats.skipped_short == 1


@pytest.mark.unit
def test_lenient_mode_skips_malformed(bank_lines, encoder):
    """Malformed numbers drop the record and are counted."""
    broken = bank_lines[1].replace("1787", "n/a")
    dataset, stats = load_records([bank_lines[0], broken, bank_lines[2]], encoder)

    assert len(dataset) == 1
    assert stats.skipped_malformed == 1


@pytest.mark.unit
def test_strict_mode_raises_with_line_number(bank_lines, encoder):
    """Strict mode fails on the first malformed record and reports its line."""
    broken = bank_lines[2].replace("4789", "n/a")
    lines = [bank_lines[0], bank_lines[1], broken]

    with pytest.raises(DatasetParseError) as exc_info:
        load_records(lines, encoder, strict=True, source="bank.csv")

    assert exc_info.value.line_number == 3
    assert "bank.csv:3" in str(exc_info.value)

# =========================================================================== #
#                    FILE LOADING                                             #
# =========================================================================== #


@pytest.mark.integration
def test_load_dataset_from_file(bank_csv, encoder):
    """A file on disk loads like its lines."""
    dataset = load_dataset(bank_csv, encoder)

    assert len(dataset) == 4
    assert dataset.positives == 2
    assert dataset.name == "bank.csv"


@pytest.mark.integration
def test_load_dataset_default_encoder(bank_csv):
    """The encoder is optional."""
    assert len(load_dataset(bank_csv)) == 4


@pytest.mark.unit
def test_load_dataset_missing_file(tmp_path):
    """A missing input is reported before anything else happens."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_dataset(tmp_path / "missing.csv")
