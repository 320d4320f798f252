"""Entropy calculations.

This subpackage provides:
- Entropy and rank-generic joint entropy
- Conditional entropy H(X|Y)
"""

from .conditional import conditional_entropy
from .shannon import entropy, joint_entropy

__all__ = [
    "entropy",
    "joint_entropy",
    "conditional_entropy",
]
