import numpy as np
import pytest


@pytest.fixture(scope="function")
def random_lon_lat():
    rng = np.random.default_rng(12345)
    lon = rng.uniform(0, 2 * np.pi, 20)
    lat = np.arcsin(rng.uniform(-1, 1, 20))
    return lon, lat
