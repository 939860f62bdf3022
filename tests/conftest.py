# tests/conftest.py
import pytest

WEALTHS = [0, 50000, 100000, 200000, 500000, 1000000, 5000000]

@pytest.fixture
def wealth_records():
    return [{"wealth": w} for w in WEALTHS]
