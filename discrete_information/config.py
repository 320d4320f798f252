"""
Central configuration for the discrete information library.
"""

import numpy as np

# --- Binning Parameters ---

# Integer dtype used for histogram counts.
COUNT_DTYPE = np.int64

# Floating dtype used for probability tensors.
PROBABILITY_DTYPE = np.float64

# What to do when a histogram with zero total count is normalized.
# Options:
#   "raise": raise EmptyInputError
#   "nan":   return a tensor of NaN, following IEEE 0/0 semantics
EMPTY_INPUT_POLICY: str = "raise"

# --- Permutation Test Parameters ---

# Default number of permutations for permutation tests.
N_PERMUTATIONS: int = 300

# Number of permutations evaluated per joblib task.
PERMUTATION_BATCH_SIZE: int = 256

# Permuted statistics within this distance below the observed value still
# count as "at least as extreme", so ties are not lost to rounding.
PERMUTATION_TOLERANCE: float = 1e-12
