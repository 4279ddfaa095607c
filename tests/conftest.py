"""
Shared test fixtures: test client, round-rate pricing model.
"""

import pytest
from fastapi.testclient import TestClient

from windowquote.main import app
from windowquote.pricing_model import PricingModel


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def round_pricing():
    """Pricing model with round rates so expected costs can be worked by hand."""
    return PricingModel(
        head_rate_per_mm=1.0,
        sill_rate_per_mm=1.0,
        jamb_rate_per_mm=1.0,
        mullion_rate_per_mm=1.0,
        glass_rate_per_sq_mm=0.001,
        powder_coat_rate_per_mm=0.1,
        fixed_cost_by_pane_kind={"awning": 10.0, "sliding": 20.0, "fixed": 30.0},
        markup_ratio=2.0,
        factory_cost_per_opening=100.0,
        install_cost_per_opening=50.0,
    )
