import os

import pytest

from termmarkup import SpanParser
from termmarkup.config import ENV_PREFIX


@pytest.fixture
def parser():
    return SpanParser()


# config tests read the environment, keep the host's settings out
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
