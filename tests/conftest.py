import os

import pytest

from hsjwt.logging import reset_logging

REFERENCE_TOKEN = (
    "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIn0"
    ".TAtneEBsm45rVlvtZqHhllYoB0lgx3r6D1KiYHxv1qE"
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from HSJWT_* variables and global logging state."""
    for name in list(os.environ):
        if name.startswith("HSJWT_"):
            monkeypatch.delenv(name, raising=False)
    yield
    reset_logging()


@pytest.fixture
def reference_token() -> str:
    return REFERENCE_TOKEN
