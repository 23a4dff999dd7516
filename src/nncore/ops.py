# Public vector ops - dispatch to the configured backend, validate in checked mode
import numpy as np

from .config import EPS, checks_enabled
from .kernels import get_kernel
from .utils import checks


def accumulate(a: np.ndarray, b: np.ndarray) -> None:  # a[i] += b[i]
    if checks_enabled(): checks.check_same_length(a=a, b=b)
    get_kernel("accumulate")(a, b)


def rms_norm(out: np.ndarray, x: np.ndarray, weight: np.ndarray, eps: float = EPS) -> None:
    """out[i] = weight[i] * x[i] / sqrt(mean(x**2) + eps). out may be x itself."""
    if checks_enabled():
        checks.check_same_length(out=out, x=x, weight=weight)
        checks.check_non_empty("x", x)
    get_kernel("rms_norm")(out, x, weight, eps)


def softmax(x: np.ndarray) -> None:  # in place, x becomes a probability distribution
    if checks_enabled(): checks.check_non_empty("x", x)
    get_kernel("softmax")(x)


def matmul(out: np.ndarray, x: np.ndarray, w: np.ndarray) -> None:
    """Row-major W(d, n) flattened in w, times x(n,), written into out(d,). No aliasing allowed."""
    if checks_enabled(): checks.check_matmul(out, x, w)
    get_kernel("matmul")(out, x, w)
