import numpy as np
import pytest

from polymulpy.config import set_config


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    for name in ("POLYMUL_CHECK_CONTRACTS", "POLYMUL_NORMALIZE_ORDER", "POLYMUL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def reference_product():
    """Uniform double loop with explicit bounds checks, used as ground truth."""

    def _reference(a, b):
        out = [0] * (len(a) + len(b) - 1)
        for n in range(len(out)):
            for m in range(len(a)):
                k = n - m
                if 0 <= k < len(b):
                    out[n] += int(a[m]) * int(b[k])
        return np.array(out, dtype=np.int64)

    return _reference


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
