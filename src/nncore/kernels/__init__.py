# Kernels module
from .api import (
    accumulate_numpy,
    rms_norm_numpy,
    softmax_numpy,
    matmul_numpy,
    get_kernel,
    KERNELS,
    NUMPY_KERNELS,
)
from .numba_kernels import (
    accumulate_numba,
    rms_norm_numba,
    softmax_numba,
    matmul_numba,
    get_backend_info,
    NUMBA_KERNELS,
)

__all__ = [
    # Reference kernels
    "accumulate_numpy",
    "rms_norm_numpy",
    "softmax_numpy",
    "matmul_numpy",
    "get_kernel",
    "KERNELS",
    "NUMPY_KERNELS",
    # Numba kernels
    "accumulate_numba",
    "rms_norm_numba",
    "softmax_numba",
    "matmul_numba",
    "get_backend_info",
    "NUMBA_KERNELS",
]
