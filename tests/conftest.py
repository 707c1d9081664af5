import pytest
from linalgebra.names import *
import linalgebra.config as config

# Initialize the list of root policies
policies = list(ROOT_POLICIES)


@pytest.fixture(params=policies, scope="session")
def curr_policy(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized root policies."""
    return request.param


@pytest.fixture(autouse=True)
def restore_settings():
    """Reset the process wide settings after every test."""
    policy = config.get_root_policy()
    precision = config.get_default_precision()
    yield
    config.set_root_policy(policy)
    config.set_default_precision(precision)
