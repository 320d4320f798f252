"""Mutual Information calculations.

This subpackage provides:
- Mutual Information (MI) of a joint probability matrix
- Conditional Mutual Information (CMI) of a joint probability tensor
- Permutation tests for (conditional) independence
"""

from .cmi import conditional_mutual_information
from .mi import mutual_information
from .permutation import (
    permutation_test_conditional_mutual_information,
    permutation_test_mutual_information,
)

__all__ = [
    # Measures
    "mutual_information",
    "conditional_mutual_information",
    # Hypothesis tests
    "permutation_test_mutual_information",
    "permutation_test_conditional_mutual_information",
]
