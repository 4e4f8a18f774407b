"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """Make numerical errors (e.g. a division by zero when normalizing a
    vector) raise, so that the code handles them explicitly.
    """
    np.seterr(all="raise")
