# Kernel API - NumPy reference kernels and the backend registry
import numpy as np

from ..config import BACKENDS, EPS, get_backend
from .numba_kernels import NUMBA_KERNELS


def accumulate_numpy(a: np.ndarray, b: np.ndarray) -> None:  # a += b
    np.add(a, b, out=a)


def rms_norm_numpy(out: np.ndarray, x: np.ndarray, weight: np.ndarray, eps: float = EPS) -> None:
    ms = np.dot(x, x) / x.dtype.type(x.shape[0])
    s = np.sqrt(ms + x.dtype.type(eps))  # eps goes in after the mean, before the sqrt
    np.multiply(weight, x, out=out)
    np.divide(out, s, out=out)


def softmax_numpy(x: np.ndarray) -> None:  # numerically stable, in place
    np.subtract(x, np.max(x), out=x)
    np.exp(x, out=x)
    np.divide(x, np.sum(x), out=x)


def matmul_numpy(out: np.ndarray, x: np.ndarray, w: np.ndarray) -> None:  # W(d, n) @ x(n,) -> out(d,)
    np.matmul(w.reshape(out.shape[0], x.shape[0]), x, out=out)


NUMPY_KERNELS = {"accumulate": accumulate_numpy, "rms_norm": rms_norm_numpy,
                 "softmax": softmax_numpy, "matmul": matmul_numpy}

# Kernel Registry
KERNELS = {"numba": NUMBA_KERNELS, "numpy": NUMPY_KERNELS}


def get_kernel(name: str, backend: str = None):
    backend = backend or get_backend()
    if backend not in KERNELS: raise ValueError(f"Unknown backend: {backend}. Available: {list(BACKENDS)}")
    kernels = KERNELS[backend]
    if name not in kernels: raise ValueError(f"Unknown kernel: {name}. Available: {list(kernels.keys())}")
    return kernels[name]
