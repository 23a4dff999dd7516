# Sampling strategies: categorical, greedy, top-p
import logging

import numpy as np
from numba import njit

from ..config import checks_enabled
from ..utils import checks

logger = logging.getLogger(__name__)


def default_rng(seed: int = None) -> np.random.Generator:  # seedable random source for the samplers
    return np.random.default_rng(seed)


def uniform(rng, dtype) -> np.floating:  # rng.random() in the given width, kept below 1
    # narrowing to float32 rounds draws within 2**-25 of 1 up to 1.0
    return min(dtype(rng.random()), np.nextafter(dtype(1), dtype(0)))


def sample(probabilities: np.ndarray, rng) -> int:  # inverse-CDF draw, rng needs .random() in [0, 1)
    if checks_enabled(): checks.check_distribution("probabilities", probabilities)
    r = uniform(rng, probabilities.dtype.type)
    cdf = np.cumsum(probabilities)  # sequential running sum in the input dtype
    i = int(np.searchsorted(cdf, r, side="right"))  # first i with r < cdf[i]
    return min(i, probabilities.shape[0] - 1)  # rounding: cdf may never exceed r


@njit(cache=True)
def _argmax_scan(v: np.ndarray) -> int:  # strictly-greater scan: NaN after v[0] never wins
    best, best_v = 0, v[0]
    for i in range(1, v.shape[0]):
        if v[i] > best_v:
            best, best_v = i, v[i]
    return best


def argmax(v: np.ndarray) -> int:  # greedy; first occurrence wins on ties
    if checks_enabled(): checks.check_non_empty("v", v)
    return int(_argmax_scan(v))


def top_p_candidates(probabilities: np.ndarray, topp: float):
    """Return (indices, cumulative) of the nucleus: original indices sorted by
    descending probability, truncated after the first running sum above topp,
    with the running sums of the kept candidates."""
    dtype = probabilities.dtype.type
    topp = dtype(topp)
    n = probabilities.shape[0]
    # values below (1 - topp) / (n - 1) cannot be part of the result, crop them before sorting
    cutoff = (dtype(1) - topp) / dtype(n - 1)
    indices = np.flatnonzero(probabilities >= cutoff)
    if indices.shape[0] == 0:  # near-flat distribution with tiny topp: every candidate is below the cutoff
        logger.debug("top-p cutoff %r removed all %d candidates, considering all", cutoff, n)
        indices = np.arange(n)
    order = np.argsort(-probabilities[indices], kind="stable")  # descending, lower index first on ties
    indices = indices[order]
    cumulative = np.cumsum(probabilities[indices])
    last = int(np.searchsorted(cumulative, topp, side="right"))  # first running sum > topp, inclusive
    last = min(last, indices.shape[0] - 1)  # rounding: keep every candidate
    return indices[:last + 1], cumulative[:last + 1]


def sample_top_p(probabilities: np.ndarray, topp: float, rng) -> int:  # nucleus sampling
    if checks_enabled(): checks.check_top_p(probabilities, topp)
    indices, cumulative = top_p_candidates(probabilities, topp)
    r = uniform(rng, probabilities.dtype.type) * cumulative[-1]  # scaled by the truncated mass, not topp
    k = int(np.searchsorted(cumulative, r, side="right"))
    return int(indices[min(k, indices.shape[0] - 1)])
