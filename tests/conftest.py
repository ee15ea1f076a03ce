import matplotlib
matplotlib.use("Agg")

import pytest

from hill_lab.problems.samples import sample_heightmap


@pytest.fixture
def sample():
    return sample_heightmap()
