#////////////////////////////////////////////////////////////////////////////////#
# File:         reorder_mlp.py                                                   #
# Date:         2025-04-02                                                       #
#////////////////////////////////////////////////////////////////////////////////#


"""
Two layer feed-forward network for binary reorder classification.
"""


import torch
import torch.nn as nn

from reorder_net import config


class ReorderMLP(nn.Module):
    """
    3 -> hidden (ReLU) -> 1 (sigmoid) network returning reorder probabilities.

    Inputs are used raw, without normalization.
    """
    def __init__(
        self,
        input_dim: int = config.NUM_FEATURES,
        hidden_dim: int = config.HIDDEN_DIM,
        output_dim: int = config.OUTPUT_DIM
    ):
        """
        Initialize the network.

        Args:
            input_dim: Number of input features (stock, weekly sales, lead time)
            hidden_dim: Number of hidden ReLU units
            output_dim: Number of sigmoid outputs
        """
        super(ReorderMLP, self).__init__()

        # Store architecture parameters for logging
        self.input_dim = input_dim
        self.hidden_dim = hidden_dim
        self.output_dim = output_dim

        self.fc1 = nn.Linear(input_dim, hidden_dim)
        self.relu = nn.ReLU()
        self.fc2 = nn.Linear(hidden_dim, output_dim)

        self.reset_parameters()

    def reset_parameters(self) -> None:
        """Glorot-uniform weights and zero biases."""
        for layer in (self.fc1, self.fc2):
            nn.init.xavier_uniform_(layer.weight)
            nn.init.zeros_(layer.bias)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """
        Forward pass.

        Args:
            x: Tensor of shape (batch_size, input_dim)

        Returns:
            Probabilities of shape (batch_size, output_dim), each in (0, 1)
        """
        hidden = self.relu(self.fc1(x))
        return torch.sigmoid(self.fc2(hidden))

    def count_parameters(self) -> int:
        return sum(p.numel() for p in self.parameters())


def create_reorder_model(hidden_dim: int = config.HIDDEN_DIM) -> ReorderMLP:
    """
    Factory function to create a freshly initialized reorder network.

    Args:
        hidden_dim: Number of hidden units

    Returns:
        Configured ReorderMLP
    """
    model = ReorderMLP(
        input_dim=config.NUM_FEATURES,
        hidden_dim=hidden_dim,
        output_dim=config.OUTPUT_DIM
    )
    return model
