# JIT-compiled vector kernels (Numba), one specialization per float32/float64 signature
import math

import numba
import numpy as np
from numba import njit

from ..config import EPS, get_backend

# No parallel/fastmath: results must not depend on thread count or reassociation.
# Reductions accumulate in float64, at least the precision of either input width.


@njit(cache=True)
def accumulate_numba(a: np.ndarray, b: np.ndarray) -> None:  # a += b
    for i in range(a.shape[0]):
        a[i] += b[i]


@njit(cache=True)
def rms_norm_numba(out: np.ndarray, x: np.ndarray, weight: np.ndarray, eps: float = EPS) -> None:
    ss = 0.0
    for i in range(x.shape[0]):
        ss += x[i] * x[i]
    ss /= x.shape[0]
    ss += eps
    s = math.sqrt(ss)
    for i in range(out.shape[0]):  # out may alias x: out[i] reads only x[i]
        out[i] = weight[i] * x[i] / s


@njit(cache=True)
def softmax_numba(x: np.ndarray) -> None:
    m = x[0]
    for i in range(1, x.shape[0]):
        if x[i] > m:
            m = x[i]
    total = 0.0
    for i in range(x.shape[0]):
        x[i] = math.exp(x[i] - m)
        total += x[i]
    for i in range(x.shape[0]):
        x[i] /= total


@njit(cache=True)
def matmul_numba(out: np.ndarray, x: np.ndarray, w: np.ndarray) -> None:  # W(d, n) @ x(n,) -> out(d,)
    n = x.shape[0]
    for i in range(out.shape[0]):
        acc = 0.0
        row = i * n
        for j in range(n):
            acc += w[row + j] * x[j]
        out[i] = acc


NUMBA_KERNELS = {"accumulate": accumulate_numba, "rms_norm": rms_norm_numba,
                 "softmax": softmax_numba, "matmul": matmul_numba}


def get_backend_info():
    return {"numba_version": numba.__version__, "numpy_version": np.__version__, "backend": get_backend()}
