from pathlib import Path
import pytest


@pytest.fixture(autouse=True)
def _ch2testdir(monkeypatch):
    testdir = Path(__file__).parent
    monkeypatch.chdir(testdir)
