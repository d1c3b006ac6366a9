"""
Feature Encoding Module.

Maps one raw Bank Marketing record (16 attribute strings) to a fixed-length
vector of normalized floats. Every attribute has exactly one deterministic
rule:

    * Linear scaling for bounded numerics (age, day).
    * tanh squashing for heavy-tailed numerics (balance, duration, campaign,
      pdays, previous), which keeps extreme values inside (-1, 1).
    * Codebook index / (N - 1) for categoricals, which maps the first and
      last category to 0.0 and 1.0.
    * 1.0 / 0.0 for the 'yes'/other flags (default, housing, loan).

The encoder holds no mutable state; the only shared data are the read-only
codebooks, so a single instance is safe to reuse across calls.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import math
from typing import Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .codebook import Codebooks, default_codebooks

# =========================================================================== #
#                                SCHEMA                                       #
# =========================================================================== #

FEATURE_NAMES = (
    "age", "job", "marital", "education", "default", "balance",
    "housing", "loan", "contact", "day", "month", "duration",
    "campaign", "pdays", "previous", "poutcome",
)
LABEL_NAME = "y"

INPUT_SIZE = len(FEATURE_NAMES)
RECORD_SIZE = INPUT_SIZE + 1

CATEGORICAL_FEATURES = frozenset({"job", "marital", "education", "contact", "month", "poutcome"})
FLAG_FEATURES = frozenset({"default", "housing", "loan"})

POSITIVE_TOKEN = "yes"
PDAYS_NEVER_CONTACTED = -1.0


class RecordParseError(ValueError):
    """A numeric attribute of a record could not be parsed."""

    def __init__(self, attribute: str, raw_value: str):
        self.attribute = attribute
        self.raw_value = raw_value
        super().__init__(f"Attribute '{attribute}' expects a number, got {raw_value!r}")

# =========================================================================== #
#                           NORMALIZATION RULES                               #
# =========================================================================== #

def normalize_age(age: float) -> float:
    return age / 100.0


def normalize_balance(balance: float) -> float:
    return math.tanh(balance / 10000.0)


def normalize_day(day: float) -> float:
    return day / 31.0


def normalize_duration(duration: float) -> float:
    return math.tanh(duration / 1000.0)


def normalize_campaign(campaign: float) -> float:
    return math.tanh(campaign / 10.0)


def normalize_pdays(pdays: float) -> float:
    """-1 marks a client never contacted before and maps to exactly 0.0."""
    if pdays == PDAYS_NEVER_CONTACTED:
        return 0.0
    return math.tanh(pdays / 365.0)


def normalize_previous(previous: float) -> float:
    return math.tanh(previous / 10.0)


def encode_flag(value: str) -> float:
    return 1.0 if value == POSITIVE_TOKEN else 0.0


NUMERIC_RULES = {
    "age": normalize_age,
    "balance": normalize_balance,
    "day": normalize_day,
    "duration": normalize_duration,
    "campaign": normalize_campaign,
    "pdays": normalize_pdays,
    "previous": normalize_previous,
}


def parse_number(attribute: str, raw_value: str) -> float:
    """
    Parses a numeric field.

    Raises:
        RecordParseError: If the field cannot be read as a float.
    """
    try:
        return float(raw_value)
    except ValueError as e:
        raise RecordParseError(attribute, raw_value) from e

# =========================================================================== #
#                               ENCODER                                       #
# =========================================================================== #

class FeatureEncoder:
    """
    Deterministic record → feature-vector mapper.

    Attributes:
        codebooks (Codebooks): Read-only vocabularies for categorical attributes.
    """

    def __init__(self, codebooks: Codebooks | None = None):
        self.codebooks = codebooks or default_codebooks()

    def encode_category(self, attribute: str, value: str) -> float:
        """
        Scales a category's codebook index into [0, 1].

        Unknown values resolve to index 0 and therefore encode to 0.0.
        """
        codebook = self.codebooks.get(attribute)
        if codebook.size == 1:
            return 0.0
        return codebook.index_of(value) / (codebook.size - 1)

    def decode_category(self, attribute: str, encoded: float) -> str:
        """Inverse of `encode_category` for values produced by it."""
        codebook = self.codebooks.get(attribute)
        return codebook.decode(round(encoded * (codebook.size - 1)))

    def encode_field(self, attribute: str, raw_value: str) -> float:
        """Applies the normalization rule of a single attribute."""
        if attribute in CATEGORICAL_FEATURES:
            return self.encode_category(attribute, raw_value)
        if attribute in FLAG_FEATURES:
            return encode_flag(raw_value)
        rule = NUMERIC_RULES[attribute]
        return rule(parse_number(attribute, raw_value))

    def encode(self, fields: Sequence[str]) -> np.ndarray:
        """
        Encodes the first 16 fields of a record.

        Args:
            fields: Raw attribute strings in schema order (extra fields ignored).

        Returns:
            np.ndarray: float32 vector of length 16.

        Raises:
            ValueError: If fewer than 16 fields are supplied.
            RecordParseError: If a numeric attribute is malformed.
        """
        if len(fields) < INPUT_SIZE:
            raise ValueError(f"Expected at least {INPUT_SIZE} fields, got {len(fields)}")

        return np.array(
            [self.encode_field(name, fields[i]) for i, name in enumerate(FEATURE_NAMES)],
            dtype=np.float32,
        )

    @staticmethod
    def encode_label(value: str) -> float:
        return encode_flag(value)
