import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CLASSICIPHER_* overrides from the host out of the tests."""
    for name in ('OUTPUT_FORMAT', 'GROUP_SIZE', 'LOG_LEVEL', 'HILL_ATTEMPTS'):
        monkeypatch.delenv(f'CLASSICIPHER_{name}', raising=False)
