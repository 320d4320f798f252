"""Information theory for integer-coded categorical samples.

Samples are binned into histograms, normalized into probability tensors, and
the measures below are computed from those tensors in nats.
"""

from .binning import hist1d, hist2d, hist3d, normalize, prob1d, prob2d, prob3d
from .core_utils.errors import (
    EmptyInputError,
    InformationInputError,
    LengthMismatchError,
    OutOfRangeError,
)
from .information_metrics import (
    conditional_entropy,
    conditional_mutual_information,
    entropy,
    joint_entropy,
    marginal,
    mutual_information,
    mutual_information_matrix,
    permutation_test_conditional_mutual_information,
    permutation_test_mutual_information,
    rank_features,
)

__version__ = "0.1.0"

__all__ = [
    # N-d histogram
    "hist1d",
    "hist2d",
    "hist3d",
    # N-d probability
    "normalize",
    "prob1d",
    "prob2d",
    "prob3d",
    # Entropy functions
    "entropy",
    "joint_entropy",
    "conditional_entropy",
    # Information functions
    "mutual_information",
    "conditional_mutual_information",
    "marginal",
    # Testing and ranking
    "permutation_test_mutual_information",
    "permutation_test_conditional_mutual_information",
    "mutual_information_matrix",
    "rank_features",
    # Errors
    "InformationInputError",
    "LengthMismatchError",
    "OutOfRangeError",
    "EmptyInputError",
]
