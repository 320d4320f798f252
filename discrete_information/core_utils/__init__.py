"""Input coercion, validation and error types shared across the package."""

from .data_utils import (
    as_bin_count,
    as_code_array,
    check_codes_in_range,
    check_equal_length,
)
from .errors import (
    EmptyInputError,
    InformationInputError,
    LengthMismatchError,
    OutOfRangeError,
)

__all__ = [
    "as_bin_count",
    "as_code_array",
    "check_codes_in_range",
    "check_equal_length",
    "EmptyInputError",
    "InformationInputError",
    "LengthMismatchError",
    "OutOfRangeError",
]
