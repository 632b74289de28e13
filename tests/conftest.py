"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from officedays.domain.models import Base
from officedays.domain.types import Employee, Weekday


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_employee():
    """Factory for employee values with sensible defaults."""
    def _make(emp_id, required_days=1, fixed_days=(), name=None, sex="Female", role="Data Analyst"):
        return Employee(
            id=emp_id,
            name=name or f"Employee {emp_id}",
            sex=sex,
            role=role,
            required_days=required_days,
            fixed_days=tuple(Weekday.parse(d) for d in fixed_days),
        )
    return _make
