import pytest

from core.config import OneTimeEvent, SimulationConfig
from engine.annual import simulate_annual


def test_row_count_and_years_strictly_increasing(lifecycle_config):
    rows = simulate_annual(lifecycle_config)

    assert len(rows) == lifecycle_config.years_to_grow + 1
    assert [r.year for r in rows] == list(range(lifecycle_config.years_to_grow + 1))


def test_year_zero_snapshot(lifecycle_config):
    first = simulate_annual(lifecycle_config)[0]

    assert first.interest_earned_yearly == 0
    assert first.total_assets == lifecycle_config.initial_principal
    assert first.total_invested == lifecycle_config.initial_principal
    assert first.purchasing_power == lifecycle_config.initial_principal
    assert first.age == lifecycle_config.start_age
    assert first.is_retirement is False


def test_scenario_a_one_year_of_contributions(scenario_a):
    rows = simulate_annual(scenario_a)
    year1 = rows[1]

    assert year1.total_invested == 220_000
    # 100000 * 1.005^12 + 10000 * (1.005^12 - 1) / 0.005 = 229523.40...
    assert year1.total_assets == 229_523
    assert year1.interest_earned_yearly == 9_523
    assert year1.age == 26
    assert year1.is_retirement is False


def test_scenario_a_is_reproducible(scenario_a):
    assert simulate_annual(scenario_a) == simulate_annual(scenario_a)


def test_scenario_b_deposit_event_jumps_at_its_year():
    cfg = SimulationConfig(
        initial_principal=0, monthly_contribution=0, annual_rate=0,
        years_to_grow=6, start_age=40, retirement_year=6,
        one_time_events=(OneTimeEvent(id="e1", year=3, amount=50_000, type="deposit", name="Gift"),),
    )

    rows = simulate_annual(cfg)

    assert [r.total_invested for r in rows] == [0, 0, 0, 50_000, 50_000, 50_000, 50_000]
    assert [r.total_assets for r in rows] == [0, 0, 0, 50_000, 50_000, 50_000, 50_000]


def test_scenario_c_retirement_flag_per_year():
    cfg = SimulationConfig(
        initial_principal=100_000, monthly_contribution=1_000, annual_rate=4,
        years_to_grow=6, retirement_year=5, monthly_withdrawal=2_000,
    )

    flags = [r.is_retirement for r in simulate_annual(cfg)]

    assert flags == [False, False, False, False, False, False, True]


def test_zero_everything_stays_zero():
    cfg = SimulationConfig(
        initial_principal=0, monthly_contribution=0, annual_rate=7,
        years_to_grow=25, retirement_year=10, monthly_withdrawal=0,
    )

    assert all(r.total_assets == 0 for r in simulate_annual(cfg))


def test_zero_rate_is_linear_in_contributions():
    cfg = SimulationConfig(
        initial_principal=5_000, monthly_contribution=100, annual_rate=0,
        years_to_grow=10, retirement_year=10,
    )

    rows = simulate_annual(cfg)

    for r in rows:
        assert r.total_assets == 5_000 + r.year * 12 * 100
        assert r.interest_earned_yearly == 0


def test_total_invested_is_non_decreasing(lifecycle_config):
    invested = [r.total_invested for r in simulate_annual(lifecycle_config)]

    assert all(b >= a for a, b in zip(invested, invested[1:]))


def test_contributions_stop_after_retirement(lifecycle_config):
    rows = simulate_annual(lifecycle_config)

    retired_invested = {r.total_invested for r in rows if r.year > 20 and r.year < 25}
    assert len(retired_invested) == 1


def test_balance_never_negative(depleting_config):
    rows = simulate_annual(depleting_config)

    assert [r.total_assets for r in rows] == [10_000, 10_000, 0, 0]
    assert all(r.total_assets >= 0 for r in rows)


def test_withdrawal_event_larger_than_balance_floors_at_zero():
    cfg = SimulationConfig(
        initial_principal=1_000, monthly_contribution=0, annual_rate=0,
        years_to_grow=2, retirement_year=2,
        one_time_events=(OneTimeEvent(id="big", year=1, amount=5_000, type="withdrawal"),),
    )

    rows = simulate_annual(cfg)

    assert rows[1].total_assets == 0
    # contributed principal is untouched by withdrawals
    assert rows[1].total_invested == 1_000


def test_multiple_events_same_year_all_apply():
    cfg = SimulationConfig(
        initial_principal=0, monthly_contribution=0, annual_rate=0,
        years_to_grow=2, retirement_year=2,
        one_time_events=(
            OneTimeEvent(id="a", year=2, amount=10_000, type="deposit"),
            OneTimeEvent(id="b", year=2, amount=2_500, type="withdrawal"),
            OneTimeEvent(id="c", year=2, amount=1_000, type="deposit"),
        ),
    )

    last = simulate_annual(cfg)[-1]

    assert last.total_assets == 8_500
    assert last.total_invested == 11_000


def test_purchasing_power_discounts_by_elapsed_years():
    cfg = SimulationConfig(
        initial_principal=102_000, monthly_contribution=0, annual_rate=0,
        years_to_grow=2, retirement_year=2, inflation_rate=2,
    )

    rows = simulate_annual(cfg)

    assert rows[0].purchasing_power == 102_000
    assert rows[1].purchasing_power == 100_000
    assert rows[2].purchasing_power == pytest.approx(102_000 / 1.02 ** 2, abs=1)


def test_purchasing_power_equals_nominal_without_inflation(scenario_a):
    for r in simulate_annual(scenario_a):
        assert r.purchasing_power == r.total_assets


def test_monthly_rate_is_simple_division():
    cfg = SimulationConfig(annual_rate=12)

    assert cfg.monthly_rate == pytest.approx(0.01)
