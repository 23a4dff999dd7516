# Sampler - picks the next token from raw logits: greedy, categorical or top-p
import numpy as np

from ..ops import softmax
from .sampling import argmax, default_rng, sample, sample_top_p


class Sampler:
    def __init__(self, vocab_size: int, temperature: float = 1.0, topp: float = 0.9, rng=None, seed: int = None):
        if temperature < 0: raise ValueError(f"temperature must be >= 0, got {temperature}")
        if not 0.0 <= topp <= 1.0: raise ValueError(f"topp must be in [0, 1], got {topp}")
        self.vocab_size = vocab_size
        self.temperature = temperature
        self.topp = topp
        self.rng = rng if rng is not None else default_rng(seed)

    @property
    def strategy(self) -> str:
        if self.temperature == 0: return "greedy"
        return "top_p" if 0.0 < self.topp < 1.0 else "sample"

    def __call__(self, logits: np.ndarray) -> int:  # logits is left untouched
        logits = logits[:self.vocab_size]
        if self.temperature == 0: return argmax(logits)
        probs = logits / logits.dtype.type(self.temperature)
        softmax(probs)
        if 0.0 < self.topp < 1.0: return sample_top_p(probs, self.topp, self.rng)
        return sample(probs, self.rng)
