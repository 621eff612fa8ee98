import pytest


CAR_FEATURES = [
    [25, 50000, 650],
    [40, 100000, 720],
    [35, 85000, 680],
    [22, 45000, 600],
    [50, 120000, 800],
]
CAR_LABELS = [0, 1, 1, 0, 1]


@pytest.fixture
def car_data():
    """Age, income and credit score of buyers (1) and non-buyers (0)."""
    return [list(row) for row in CAR_FEATURES], list(CAR_LABELS)
