"""
Data Handling Package.

Categorical codebooks, feature encoding, delimited-file ingestion and
DataLoader construction for the Bank Marketing schema.
"""

from .codebook import CategoryCodebook, Codebooks, default_codebooks
from .dataset import LabeledExample, MarketingDataset
from .encoder import (
    FEATURE_NAMES,
    INPUT_SIZE,
    RECORD_SIZE,
    FeatureEncoder,
    RecordParseError,
    encode_flag,
    normalize_age,
    normalize_balance,
    normalize_campaign,
    normalize_day,
    normalize_duration,
    normalize_pdays,
    normalize_previous,
)
from .factory import get_train_loader
from .loader import DatasetParseError, LoadStats, load_dataset, load_records, parse_line

__all__ = [
    "CategoryCodebook",
    "Codebooks",
    "default_codebooks",
    "LabeledExample",
    "MarketingDataset",
    "FEATURE_NAMES",
    "INPUT_SIZE",
    "RECORD_SIZE",
    "FeatureEncoder",
    "RecordParseError",
    "encode_flag",
    "normalize_age",
    "normalize_balance",
    "normalize_campaign",
    "normalize_day",
    "normalize_duration",
    "normalize_pdays",
    "normalize_previous",
    "get_train_loader",
    "DatasetParseError",
    "LoadStats",
    "load_dataset",
    "load_records",
    "parse_line",
]
