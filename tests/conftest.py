import numpy as np
import pytest

from nncore import config


@pytest.fixture(autouse=True)
def restore_config():
    """Every test starts from and returns to the same backend / checked-mode state."""
    backend, checks = config.get_backend(), config.checks_enabled()
    yield
    config.set_backend(backend)
    config.set_checks(checks)


@pytest.fixture(params=config.BACKENDS)
def backend_name(request):
    with config.backend(request.param):
        yield request.param


@pytest.fixture(params=[np.float32, np.float64], ids=["float32", "float64"])
def dtype(request):
    return request.param


class FixedRandom:
    """Random source returning the same draw every time."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value
