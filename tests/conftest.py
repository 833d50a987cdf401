import pytest

from floccus import config, diagnostics


@pytest.fixture
def restore_config():
    """Put back the process-wide settings after a test changes them"""
    saved = config.get_config()
    yield
    config._config = saved


@pytest.fixture
def no_observers():
    """Run a test with no diagnostics observers registered"""
    saved = diagnostics.get_observers()
    for observer in saved:
        diagnostics.remove_observer(observer)
    yield
    for observer in diagnostics.get_observers():
        diagnostics.remove_observer(observer)
    for observer in saved:
        diagnostics.add_observer(observer)
