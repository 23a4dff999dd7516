# nncore - numeric primitives for a transformer forward pass
from .ops import accumulate, rms_norm, softmax, matmul
from .sampling import sample, argmax, sample_top_p, default_rng, Sampler
from .errors import (PreconditionError, ShapeMismatchError, EmptyInputError, DTypeError, AliasingError,
                     DistributionError, CandidateCountError, ThresholdError)
from . import config

__version__ = "0.1.0"

__all__ = [
    "accumulate", "rms_norm", "softmax", "matmul",
    "sample", "argmax", "sample_top_p", "default_rng", "Sampler",
    "PreconditionError", "ShapeMismatchError", "EmptyInputError", "DTypeError", "AliasingError",
    "DistributionError", "CandidateCountError", "ThresholdError",
    "config",
]
