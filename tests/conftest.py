import pytest

from hhsim import HHParameters


@pytest.fixture
def short_params():
    """A 60 ms run with the gate open for 21 <= t <= 49."""
    return HHParameters(t_max=60.0, I_start_time=20.0, I_end_time=50.0)
