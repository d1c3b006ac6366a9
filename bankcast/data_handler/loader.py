"""
Delimited Record Loader.

Turns ';'-separated Bank Marketing files into a `MarketingDataset`.

Ingestion policy:
    * The first line is a schema header and is always skipped.
    * Double quotes are stripped before splitting.
    * Records with fewer than 17 fields are skipped silently.
    * Records with an unparsable numeric field are skipped (lenient mode) or
      abort the load with `DatasetParseError` (strict mode).

Nothing is exposed until the whole input has been consumed.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import LOGGER_NAME
from .dataset import LabeledExample, MarketingDataset
from .encoder import INPUT_SIZE, RECORD_SIZE, FeatureEncoder, RecordParseError

logger = logging.getLogger(LOGGER_NAME)

DELIMITER = ";"
QUOTE = '"'


class DatasetParseError(ValueError):
    """Raised in strict mode when a record cannot be encoded."""

    def __init__(self, line_number: int, source: str, cause: RecordParseError):
        self.line_number = line_number
        self.source = source
        super().__init__(f"{source}:{line_number}: {cause}")


@dataclass
class LoadStats:
    """Bookkeeping of a single load."""
    rows_read: int = 0
    loaded: int = 0
    skipped_short: int = 0
    skipped_malformed: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_short + self.skipped_malformed


def split_record(line: str) -> list[str]:
    """
    Strips quotes and splits a raw line into fields.

    Trailing empty fields are dropped, so a record whose label is blank
    counts as short and is skipped.
    """
    fields = line.rstrip("\r\n").replace(QUOTE, "").split(DELIMITER)
    while fields and not fields[-1]:
        fields.pop()
    return fields


def parse_line(line: str, encoder: FeatureEncoder) -> Optional[LabeledExample]:
    """
    Encodes one data line.

    Returns:
        LabeledExample, or None when the record has fewer than 17 fields.

    Raises:
        RecordParseError: If a numeric attribute is malformed.
    """
    fields = split_record(line)
    if len(fields) < RECORD_SIZE:
        return None

    features = encoder.encode(fields[:INPUT_SIZE])
    label = encoder.encode_label(fields[INPUT_SIZE])
    return LabeledExample(features, label)


def load_records(
    lines: Iterable[str],
    encoder: FeatureEncoder | None = None,
    strict: bool = False,
    source: str = "<records>",
) -> tuple[MarketingDataset, LoadStats]:
    """
    Builds a dataset from an iterable of raw lines (header included).

    Args:
        lines: Raw lines, the first one being the header.
        encoder: Feature encoder (default codebooks when None).
        strict: Raise instead of skipping records with malformed numbers.
        source: Name used in logs and error messages.

    Returns:
        (MarketingDataset, LoadStats)
    """
    encoder = encoder or FeatureEncoder()
    stats = LoadStats()
    examples: list[LabeledExample] = []

    iterator = iter(lines)
    next(iterator, None)

    for line_number, line in enumerate(iterator, start=2):
        if not line.strip():
            continue
        stats.rows_read += 1

        try:
            example = parse_line(line, encoder)
        except RecordParseError as e:
            if strict:
                raise DatasetParseError(line_number, source, e) from e
            stats.skipped_malformed += 1
            logger.debug(f"{source}:{line_number} skipped → {e}")
            continue

        if example is None:
            stats.skipped_short += 1
            continue

        examples.append(example)
        stats.loaded += 1

    return MarketingDataset.from_examples(examples, name=source), stats


def load_dataset(
    path: Path | str,
    encoder: FeatureEncoder | None = None,
    strict: bool = False,
) -> MarketingDataset:
    """
    Loads and encodes a ';'-delimited file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DatasetParseError: In strict mode, on the first malformed record.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        dataset, stats = load_records(f, encoder=encoder, strict=strict, source=path.name)

    logger.info(
        f"Loaded {path.name}: {stats.loaded} records "
        f"({dataset.positives} positive) from {stats.rows_read} rows"
    )
    if stats.skipped:
        logger.warning(
            f"{path.name}: skipped {stats.skipped} records "
            f"(short: {stats.skipped_short}, malformed: {stats.skipped_malformed})"
        )
    return dataset
