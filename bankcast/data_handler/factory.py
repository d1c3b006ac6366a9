"""Data Loader Orchestration Module.

Builds the PyTorch DataLoader that feeds the backpropagation engine. The
evaluation phase does not use it: predictions are produced row by row, in
file order, through the classifier capability.
"""

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import torch
from torch.utils.data import DataLoader

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .dataset import MarketingDataset

# =========================================================================== #
#                               DATALOADER FACTORY                            #
# =========================================================================== #

def get_train_loader(
    dataset: MarketingDataset,
    batch_size: int,
    shuffle: bool = True,
    seed: int = 42,
) -> DataLoader:
    """Creates a seeded training DataLoader.

    Args:
        dataset: Encoded training population.
        batch_size: Samples per weight update.
        shuffle: Reshuffle rows every epoch.
        seed: Seed of the shuffling generator (independent of the global RNG).

    Returns:
        A single-process DataLoader; the population fits in memory.

    Raises:
        ValueError: If the dataset is empty.
    """
    if len(dataset) == 0:
        raise ValueError(f"Cannot train on an empty dataset ({dataset.name})")

    generator = torch.Generator()
    generator.manual_seed(seed)

    return DataLoader(
        dataset,
        batch_size=batch_size,
        shuffle=shuffle,
        generator=generator,
        num_workers=0,
    )
