import pytest

from core.config import OneTimeEvent, SimulationConfig


@pytest.fixture
def scenario_a() -> SimulationConfig:
    return SimulationConfig(
        initial_principal=100_000,
        monthly_contribution=10_000,
        annual_rate=6,
        years_to_grow=1,
        start_age=25,
        retirement_year=30,
        monthly_withdrawal=0,
        one_time_events=(),
    )


@pytest.fixture
def lifecycle_config() -> SimulationConfig:
    """Accumulate 20 years, withdraw for 15, with events on both sides of retirement."""
    return SimulationConfig(
        initial_principal=250_000,
        monthly_contribution=4_000,
        annual_rate=5.5,
        years_to_grow=35,
        start_age=30,
        retirement_year=20,
        monthly_withdrawal=9_000,
        inflation_rate=2.0,
        one_time_events=(
            OneTimeEvent(id="bonus", year=5, amount=80_000, type="deposit", name="Bonus"),
            OneTimeEvent(id="house", year=12, amount=150_000, type="withdrawal", name="House"),
            OneTimeEvent(id="inherit", year=25, amount=60_000, type="deposit", name="Inheritance"),
        ),
    )


@pytest.fixture
def depleting_config() -> SimulationConfig:
    return SimulationConfig(
        initial_principal=10_000,
        monthly_contribution=0,
        annual_rate=0,
        years_to_grow=3,
        start_age=60,
        retirement_year=1,
        monthly_withdrawal=1_000,
    )
