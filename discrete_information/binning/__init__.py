"""Histogram and probability-tensor construction from category codes.

This subpackage provides:
- N-d histograms of aligned code sequences
- N-d probability tensors normalized from those histograms
"""

from .histogram import hist1d, hist2d, hist3d, histogramdd_codes
from .probability import normalize, prob1d, prob2d, prob3d

__all__ = [
    # Histograms
    "histogramdd_codes",
    "hist1d",
    "hist2d",
    "hist3d",
    # Probabilities
    "normalize",
    "prob1d",
    "prob2d",
    "prob3d",
]
