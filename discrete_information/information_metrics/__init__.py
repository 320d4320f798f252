"""Information-theoretic metrics and utilities.

This package provides information measures over discrete probability tensors:
- Entropy, joint entropy and conditional entropy
- Mutual Information (MI) and Conditional Mutual Information (CMI)
- Permutation tests and DataFrame-level feature ranking built on them
"""

from .entropy import conditional_entropy, entropy, joint_entropy
from .feature_ranking import infer_nbins, mutual_information_matrix, rank_features
from .mutual_information import (
    conditional_mutual_information,
    mutual_information,
    permutation_test_conditional_mutual_information,
    permutation_test_mutual_information,
)
from .terms import align_marginal, marginal, safe_log_terms

__all__ = [
    # Entropy functions
    "entropy",
    "joint_entropy",
    "conditional_entropy",
    # Information functions
    "mutual_information",
    "conditional_mutual_information",
    # Hypothesis tests
    "permutation_test_mutual_information",
    "permutation_test_conditional_mutual_information",
    # Feature ranking
    "infer_nbins",
    "mutual_information_matrix",
    "rank_features",
    # Shared helpers
    "safe_log_terms",
    "marginal",
    "align_marginal",
]
