import pytest
import numpy as np


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * high + low,
        "normal": lambda low, high, s: np.random.randn(s) * high + low,
        "uniform_int": np.random.randint,
    }
