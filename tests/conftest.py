import os
import sys

import numpy as np
import pytest

# Ensure the project root is on sys.path so tests can import
# ``discrete_information`` without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
