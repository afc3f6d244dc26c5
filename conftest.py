"""Shared pytest fixtures. Lives at the repo root so the top-level packages import."""

import pytest

from core.config import ProjectionConfig
from core.schema import create_default_assumptions, update_assumptions


@pytest.fixture
def config():
    # pin the calendar so snapshot years are stable
    return ProjectionConfig(start_year=2025)


@pytest.fixture
def defaults():
    return create_default_assumptions()


@pytest.fixture
def never_fi(defaults):
    """Nothing saved, nothing invested: net worth stays at 0."""
    return update_assumptions(
        defaults,
        {"monthly_savings": 0, "current_savings": 0, "investment_return": 0},
    )
