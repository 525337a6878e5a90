import pytest

from src.label_lib import init_registry


@pytest.fixture(scope="session")
def registry():
    """Compiles every grammar once for the whole test session.

    Returns:
        Registry: The process-wide registry used by process_submission.
    """
    return init_registry()
