"""Exceptions raised while turning categorical samples into probability tensors."""

from __future__ import annotations


class InformationInputError(ValueError):
    """Base class for invalid sample input to the binning layer."""


class LengthMismatchError(InformationInputError):
    """Sample sequences passed to a joint histogram differ in length."""

    def __init__(self, lengths: tuple[int, ...]):
        self.lengths = tuple(int(n) for n in lengths)
        super().__init__(
            f"Sample sequences must have equal length, got lengths {self.lengths}."
        )


class OutOfRangeError(InformationInputError):
    """A category code does not fit the bin count declared for its dimension.

    Attributes
    ----------
    dimension : int
        Zero-based position of the offending sequence in the call.
    nbins : int
        Bin count declared for that dimension.
    value : int
        First offending category code found.
    """

    def __init__(self, dimension: int, nbins: int, value: int):
        self.dimension = int(dimension)
        self.nbins = int(nbins)
        self.value = int(value)
        super().__init__(
            f"Category code {self.value} in dimension {self.dimension} is outside "
            f"[0, {self.nbins}); raise the number of bins for this dimension."
        )


class EmptyInputError(InformationInputError):
    """A histogram with zero total count cannot be normalized."""


__all__ = [
    "InformationInputError",
    "LengthMismatchError",
    "OutOfRangeError",
    "EmptyInputError",
]
