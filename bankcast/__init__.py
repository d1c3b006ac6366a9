"""
BankCast: term-deposit subscription prediction for bank marketing campaigns.

Subpackages:
    core: configuration, CLI, logging, run workspace and orchestration.
    data_handler: codebooks, feature encoding and CSV ingestion.
    models: classifier capability and the multilayer perceptron.
    trainer: backpropagation loop.
    evaluation: metrics, text/raster reports and summary export.
"""

__version__ = "1.0.0"
