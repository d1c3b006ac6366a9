"""
Core Training Engine

Single-epoch backpropagation pass for the campaign perceptron. The network
error reported to the stopping criterion is half the mean squared error
over the epoch, the classic backpropagation error measure.
"""

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import torch
import torch.nn as nn

# =========================================================================== #
#                               CORE ENGINES                                  #
# =========================================================================== #

def train_one_epoch(
    model: nn.Module,
    loader: torch.utils.data.DataLoader,
    criterion: nn.Module,
    optimizer: torch.optim.Optimizer,
    device: torch.device,
) -> float:
    """
    Performs a single full pass over the training dataset.

    Args:
        model (nn.Module): The network to train.
        loader (DataLoader): Training data provider.
        criterion (nn.Module): Loss function with 'mean' reduction (MSELoss).
        optimizer (Optimizer): Gradient descent optimizer.
        device (torch.device): Hardware target.

    Returns:
        float: The sample-weighted average loss of the epoch.
    """
    model.train()
    running_loss = 0.0
    seen = 0

    for inputs, targets in loader:
        inputs, targets = inputs.to(device), targets.to(device)
        optimizer.zero_grad()

        outputs = model(inputs)
        loss = criterion(outputs, targets)

        loss.backward()
        optimizer.step()

        running_loss += loss.item() * inputs.size(0)
        seen += inputs.size(0)

    return running_loss / max(seen, 1)


def network_error(epoch_loss: float) -> float:
    """Converts a mean squared error into the backpropagation network error."""
    return 0.5 * epoch_loss
