# Sampling module
from .sampling import sample, argmax, sample_top_p, top_p_candidates, default_rng, uniform
from .sampler import Sampler

__all__ = ["sample", "argmax", "sample_top_p", "top_p_candidates", "default_rng", "uniform", "Sampler"]
