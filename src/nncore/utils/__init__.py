# Utils module
from .checks import (check_vector, check_non_empty, check_same_dtype, check_same_length, check_matmul,
                     check_distribution, check_top_p, FLOAT_DTYPES)

__all__ = [
    "check_vector", "check_non_empty", "check_same_dtype", "check_same_length", "check_matmul",
    "check_distribution", "check_top_p", "FLOAT_DTYPES",
]
