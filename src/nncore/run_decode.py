# Toy decode loop over random weights - exercises every primitive once per token
import argparse
import logging
import time
from typing import Dict, List, Optional

import numpy as np

from . import config
from .ops import accumulate, matmul, rms_norm
from .sampling import Sampler

logger = logging.getLogger(__name__)


def build_weights(dim: int = 64, vocab: int = 256, dtype: str = "float32", seed: Optional[int] = None) -> Dict[str, np.ndarray]:
    rng = np.random.default_rng(seed)
    scale = 1.0 / np.sqrt(dim)
    return {
        "token_embed": (rng.standard_normal((vocab, dim)) * scale).astype(dtype),  # [vocab, dim]
        "norm_w": np.ones(dim, dtype=dtype),
        "hidden_w": (rng.standard_normal(dim * dim) * scale).astype(dtype),  # flat [dim, dim]
        "final_norm_w": np.ones(dim, dtype=dtype),
        "lm_head": (rng.standard_normal(vocab * dim) * scale).astype(dtype),  # flat [vocab, dim]
    }


def decode(weights: Dict[str, np.ndarray], sampler: Sampler, prompt_token: int = 0, steps: int = 16) -> List[int]:
    vocab, dim = weights["token_embed"].shape
    dtype = weights["token_embed"].dtype
    x = np.empty(dim, dtype=dtype)  # residual stream
    h = np.empty(dim, dtype=dtype)
    h2 = np.empty(dim, dtype=dtype)
    logits = np.empty(vocab, dtype=dtype)

    token, tokens = prompt_token, []
    for _ in range(steps):
        x[:] = weights["token_embed"][token]
        rms_norm(h, x, weights["norm_w"])
        matmul(h2, h, weights["hidden_w"])
        accumulate(x, h2)  # residual
        rms_norm(x, x, weights["final_norm_w"])  # in place
        matmul(logits, x, weights["lm_head"])
        token = sampler(logits)
        tokens.append(token)
    return tokens


def run(argv: Optional[List[str]] = None) -> List[int]:  # parse args, decode, report; returns the tokens
    parser = argparse.ArgumentParser(description="Run a toy decode loop on nncore kernels")
    parser.add_argument("--dim", type=int, default=64, help="Model width")
    parser.add_argument("--vocab", type=int, default=256, help="Vocabulary size")
    parser.add_argument("--steps", type=int, default=32, help="Tokens to generate")
    parser.add_argument("--temperature", type=float, default=1.0, help="Sampling temperature, 0 for greedy")
    parser.add_argument("--topp", type=float, default=0.9, help="Nucleus threshold, 1 disables top-p")
    parser.add_argument("--seed", type=int, default=None, help="Seed for weights and sampling")
    parser.add_argument("--dtype", type=str, default="float32", choices=["float32", "float64"], help="Float width")
    parser.add_argument("--backend", type=str, default=config.get_backend(), choices=list(config.BACKENDS), help="Kernel backend")
    parser.add_argument("--check", action="store_true", help="Validate preconditions on every call")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config.set_backend(args.backend)
    config.set_checks(args.check)

    weights = build_weights(args.dim, args.vocab, args.dtype, args.seed)
    sampler = Sampler(args.vocab, temperature=args.temperature, topp=args.topp, seed=args.seed)
    print(f"Decoding {args.steps} tokens (dim={args.dim}, vocab={args.vocab}, dtype={args.dtype}, "
          f"backend={args.backend}, sampling={sampler.strategy})")

    decode(weights, sampler, steps=1)  # warm up numba compilation
    start_time = time.perf_counter()
    tokens = decode(weights, sampler, steps=args.steps)
    elapsed = time.perf_counter() - start_time
    print(" ".join(str(t) for t in tokens))
    print(f"\n[Generated {len(tokens)} tokens in {elapsed:.4f}s = {len(tokens) / max(elapsed, 1e-9):.1f} tok/s]")
    return tokens


def main(argv: Optional[List[str]] = None) -> None:  # console script entry point
    run(argv)


if __name__ == "__main__":
    main()
