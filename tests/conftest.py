import sys
import os

import numpy as np
import pytest

# Make the package importable when running the tests from a source checkout.
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rng():
    """Seeded generator so the property sweeps are reproducible."""
    return np.random.default_rng(20151005)
