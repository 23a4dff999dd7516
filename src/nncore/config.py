# Runtime configuration - kernel backend and precondition checks
import logging
import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)

EPS = 1e-5  # rms_norm stabilizer, added to the mean square before sqrt
BACKENDS = ("numba", "numpy")
SUM_ATOL = {np.dtype(np.float32): 1e-4, np.dtype(np.float64): 1e-8}  # |sum(p) - 1| allowed in checked mode

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _env_backend() -> str:
    name = os.environ.get("NNCORE_BACKEND", "numba").strip().lower()
    if name not in BACKENDS: raise ValueError(f"Unknown NNCORE_BACKEND: {name}. Available: {list(BACKENDS)}")
    return name


_state = {"backend": _env_backend(), "checks": _env_flag("NNCORE_CHECKS")}


def get_backend() -> str: return _state["backend"]


def set_backend(name: str) -> None:
    if name not in BACKENDS: raise ValueError(f"Unknown backend: {name}. Available: {list(BACKENDS)}")
    logger.debug("kernel backend %s -> %s", _state["backend"], name)
    _state["backend"] = name


def checks_enabled() -> bool: return _state["checks"]


def set_checks(enabled: bool) -> None:
    logger.debug("checked mode %s", "on" if enabled else "off")
    _state["checks"] = bool(enabled)


@contextmanager
def checks(enabled: bool = True) -> Iterator[None]:  # temporarily toggle precondition checks
    previous = checks_enabled()
    set_checks(enabled)
    try:
        yield
    finally:
        set_checks(previous)


@contextmanager
def backend(name: str) -> Iterator[None]:  # temporarily switch kernel backend
    previous = get_backend()
    set_backend(name)
    try:
        yield
    finally:
        set_backend(previous)
