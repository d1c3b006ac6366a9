"""Pytest fixtures for BankCast tests."""

# =========================================================================== #
#                         Standard Imports                                    #
# =========================================================================== #
import argparse
from typing import Sequence

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import numpy as np
import pytest

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.data_handler import INPUT_SIZE, FeatureEncoder, MarketingDataset

HEADER = (
    '"age";"job";"marital";"education";"default";"balance";"housing";"loan";'
    '"contact";"day";"month";"duration";"campaign";"pdays";"previous";"poutcome";"y"'
)

RECORDS = [
    '30;"unemployed";"married";"primary";"no";1787;"no";"no";"cellular";19;"oct";79;1;-1;0;"unknown";"no"',
    '33;"services";"married";"secondary";"no";4789;"yes";"yes";"cellular";11;"may";220;1;339;4;"failure";"no"',
    '35;"management";"single";"tertiary";"no";1350;"yes";"no";"cellular";16;"apr";185;1;330;1;"failure";"yes"',
    '59;"blue-collar";"married";"secondary";"no";0;"yes";"no";"unknown";5;"may";226;1;-1;0;"unknown";"yes"',
]


class FixedClassifier:
    """
    Deterministic classifier stub.

    Returns the configured probabilities in call order (cycling), or a
    constant when a single float is given.
    """

    def __init__(self, probabilities: float | Sequence[float]):
        if isinstance(probabilities, (int, float)):
            probabilities = [float(probabilities)]
        self.probabilities = list(probabilities)
        self.calls = 0

    def train(self, dataset, hyperparameters):
        return self

    def predict(self, features: np.ndarray) -> float:
        p = self.probabilities[self.calls % len(self.probabilities)]
        self.calls += 1
        return p


def make_dataset(labels: Sequence[float], name: str = "synthetic") -> MarketingDataset:
    """Dataset of zero vectors carrying the given labels."""
    labels = np.asarray(labels, dtype=np.float32)
    features = np.zeros((len(labels), INPUT_SIZE), dtype=np.float32)
    return MarketingDataset(features, labels, name=name)


@pytest.fixture
def encoder():
    """Encoder with the default Bank Marketing codebooks."""
    return FeatureEncoder()


@pytest.fixture
def bank_lines():
    """Header plus four well-formed records (two 'yes', two 'no')."""
    return [HEADER, *RECORDS]


@pytest.fixture
def bank_csv(tmp_path, bank_lines):
    """The sample records written to a ';'-delimited file."""
    path = tmp_path / "bank.csv"
    path.write_text("\n".join(bank_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def basic_args(tmp_path, bank_csv):
    """Namespace mirroring the CLI defaults, pointed at the sample file."""
    return argparse.Namespace(
        config=None,
        model_path=None,
        train_path=str(bank_csv),
        test_path=str(bank_csv),
        strict=False,
        device="cpu",
        output_dir=str(tmp_path / "outputs"),
        log_level="info",
        save_model=True,
        max_iterations=50,
        max_error=0.05,
        learning_rate=0.1,
        batch_size=2,
        seed=7,
        hidden_layers=(8, 4),
        log_interval=0,
        use_tqdm=False,
        fig_dpi=50,
        report_format="csv",
        text_only=False,
    )
