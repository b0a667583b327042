"""Shared test fixtures for donut chart tests."""
import pytest
from donut.layout import compute_layout


@pytest.fixture(scope="session")
def sample_data():
    """Four slices: 50% / 25% / 15% / 10%."""
    return [("A", 50.0), ("B", 25.0), ("C", 15.0), ("D", 10.0)]


@pytest.fixture(scope="session")
def donut_layout(sample_data):
    """DonutLayout on a 200x200 canvas, outer r=80, inner r=40."""
    return compute_layout(sample_data, 100, 100, 80, 40)
