"""
Test Suite for the Multilayer Perceptron Classifier.

Verifies topology, probability outputs, input validation, training
integration and checkpoint persistence.
"""

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import numpy as np
import pytest
import torch
import torch.nn as nn

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.models import Classifier, Hyperparameters, MultiLayerPerceptron, PerceptronClassifier
from bankcast.core.config import TrainingConfig
from conftest import make_dataset

# =========================================================================== #
#                    NETWORK TOPOLOGY                                         #
# =========================================================================== #


@pytest.mark.unit
def test_default_topology():
    """16 → 32 → 16 → 1 with a sigmoid after every linear layer."""
    net = MultiLayerPerceptron()
    linears = [m for m in net.net if isinstance(m, nn.Linear)]
    sigmoids = [m for m in net.net if isinstance(m, nn.Sigmoid)]

    assert [(l.in_features, l.out_features) for l in linears] == [(16, 32), (32, 16), (16, 1)]
    assert len(sigmoids) == 3
    assert isinstance(net.net[-1], nn.Sigmoid)


@pytest.mark.unit
def test_forward_outputs_probabilities():
    """Outputs lie in [0, 1]."""
    out = MultiLayerPerceptron()(torch.randn(8, 16) * 10)

    assert out.shape == (8, 1)
    assert torch.all((out >= 0) & (out <= 1))

# =========================================================================== #
#                    CLASSIFIER CAPABILITY                                    #
# =========================================================================== #


@pytest.mark.unit
def test_perceptron_satisfies_classifier_protocol():
    assert isinstance(PerceptronClassifier(), Classifier)


@pytest.mark.unit
def test_predict_returns_float():
    """A single vector maps to one probability."""
    p = PerceptronClassifier().predict(np.full(16, 0.5, dtype=np.float32))

    assert isinstance(p, float)
    assert 0.0 <= p <= 1.0


@pytest.mark.unit
@pytest.mark.parametrize("shape", [(15,), (17,), (2, 16)])
def test_predict_rejects_wrong_dimension(shape):
    """Dimension mismatches raise instead of being silently reshaped."""
    with pytest.raises(ValueError, match="shape"):
        PerceptronClassifier().predict(np.zeros(shape))


@pytest.mark.unit
def test_predict_batch_matches_predict():
    """Batch inference agrees with row-by-row inference."""
    classifier = PerceptronClassifier(hidden_layers=(8,))
    features = np.random.default_rng(0).random((5, 16)).astype(np.float32)

    batch = classifier.predict_batch(features)
    single = [classifier.predict(row) for row in features]

    np.testing.assert_allclose(batch, single, rtol=1e-6)


@pytest.mark.unit
def test_train_records_history():
    """Training returns the classifier and stores its error curve."""
    classifier = PerceptronClassifier(hidden_layers=(4,))
    hyperparameters = Hyperparameters(max_iterations=3, max_error=0.0, batch_size=2)

    trained = classifier.train(make_dataset([1.0, 0.0, 1.0]), hyperparameters, use_tqdm=False)

    assert trained is classifier
    assert classifier.history.iterations == 3


@pytest.mark.unit
def test_train_rejects_empty_dataset():
    with pytest.raises(ValueError, match="empty"):
        PerceptronClassifier().train(make_dataset([]), Hyperparameters(), use_tqdm=False)


@pytest.mark.unit
def test_hyperparameters_from_config():
    """Hyperparameters mirror the validated training manifest."""
    cfg = TrainingConfig(max_iterations=10, max_error=0.1, learning_rate=0.05, batch_size=4)
    hp = Hyperparameters.from_config(cfg)

    assert hp == Hyperparameters(
        max_iterations=10, max_error=0.1, learning_rate=0.05,
        batch_size=4, shuffle=True, seed=42,
    )


@pytest.mark.unit
def test_default_hyperparameters():
    hp = Hyperparameters()

    assert (hp.max_iterations, hp.max_error, hp.learning_rate) == (5000, 0.02, 0.1)

# =========================================================================== #
#                    PERSISTENCE                                              #
# =========================================================================== #


@pytest.mark.integration
def test_save_and_load_preserve_predictions(tmp_path):
    """A restored network predicts exactly like the saved one."""
    original = PerceptronClassifier(hidden_layers=(6, 3))
    features = np.linspace(0, 1, 16, dtype=np.float32)

    path = original.save(tmp_path / "models" / "net.pth")
    restored = PerceptronClassifier.load(path)

    assert restored.hidden_layers == (6, 3)
    assert restored.predict(features) == pytest.approx(original.predict(features))
    assert restored.history is None


@pytest.mark.unit
def test_load_missing_checkpoint(tmp_path):
    with pytest.raises(FileNotFoundError):
        PerceptronClassifier.load(tmp_path / "absent.pth")
