# Precondition checks used in checked mode; the fast path never calls these
import numpy as np

from ..config import SUM_ATOL
from ..errors import (AliasingError, CandidateCountError, DistributionError, DTypeError,
                      EmptyInputError, ShapeMismatchError, ThresholdError)

FLOAT_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def check_vector(name: str, v: np.ndarray) -> None:
    if not isinstance(v, np.ndarray): raise DTypeError(f"{name} must be a numpy array, got {type(v).__name__}")
    if v.ndim != 1: raise ShapeMismatchError(f"{name} must be 1-D, got shape {v.shape}")
    if v.dtype not in FLOAT_DTYPES: raise DTypeError(f"{name} must be float32 or float64, got {v.dtype}")


def check_non_empty(name: str, v: np.ndarray) -> None:
    check_vector(name, v)
    if v.shape[0] == 0: raise EmptyInputError(f"{name} must be non-empty")


def check_same_dtype(**vectors: np.ndarray) -> None:
    dtypes = {name: v.dtype for name, v in vectors.items()}
    if len(set(dtypes.values())) > 1: raise DTypeError(f"dtypes must match: {dtypes}")


def check_same_length(**vectors: np.ndarray) -> None:
    for name, v in vectors.items(): check_vector(name, v)
    lengths = {name: v.shape[0] for name, v in vectors.items()}
    if len(set(lengths.values())) > 1: raise ShapeMismatchError(f"lengths must match: {lengths}")
    check_same_dtype(**vectors)


def check_matmul(out: np.ndarray, x: np.ndarray, w: np.ndarray) -> None:
    for name, v in (("out", out), ("x", x), ("w", w)): check_vector(name, v)
    check_same_dtype(out=out, x=x, w=w)
    d, n = out.shape[0], x.shape[0]
    if w.shape[0] != d * n: raise ShapeMismatchError(f"w must have len(out)*len(x) = {d}*{n} = {d * n} elements, got {w.shape[0]}")
    for name, v in (("x", x), ("w", w)):
        if np.shares_memory(out, v): raise AliasingError(f"out must not alias {name}")


def check_distribution(name: str, p: np.ndarray) -> None:
    check_non_empty(name, p)
    if not np.all(np.isfinite(p)): raise DistributionError(f"{name} contains non-finite values")
    if np.any(p < 0): raise DistributionError(f"{name} contains negative probabilities")
    total = float(np.sum(p, dtype=np.float64))
    if abs(total - 1.0) > SUM_ATOL[p.dtype]: raise DistributionError(f"{name} must sum to 1, got {total!r}")


def check_top_p(probabilities: np.ndarray, topp: float) -> None:
    check_distribution("probabilities", probabilities)
    if probabilities.shape[0] < 2: raise CandidateCountError(f"top-p sampling needs at least 2 candidates, got {probabilities.shape[0]}")
    if not 0.0 < topp <= 1.0: raise ThresholdError(f"topp must be in (0, 1], got {topp!r}")
