import pytest

from dualad import define_family


@pytest.fixture(scope="session")
def XYZ():
    return define_family("SampleXYZ", ["x", "y", "z"])


@pytest.fixture(scope="session")
def XY():
    return define_family("XY", ["x", "y"])
