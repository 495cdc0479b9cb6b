import pytest

from talent_compass.ninebox.aggregator import (
    OTHERS_LABEL,
    NamedView,
    RiskImpactPoint,
    TalentAggregator,
    ViewShare,
    round_half_up,
)
from talent_compass.ninebox.classifier import classify_employee


def test_three_employee_scenario(make_employee):
    employees = [
        make_employee(performance=3, evolution_potential=3),
        make_employee(performance=1, evolution_potential=1),
        make_employee(performance=2, evolution_potential=2),
    ]
    aggregator = TalentAggregator(employees)

    assert [classify_employee(employee).value for employee in employees] == [
        "Future Leaders",
        "Underperformers",
        "Effective Performers",
    ]
    assert aggregator.average_performance() == 2.0
    assert aggregator.top_by_performance(1) == [employees[0]]


def test_distribution_by_risk_is_zero_filled(make_employee):
    employees = [
        make_employee(risk_of_loss="Low"),
        make_employee(risk_of_loss="Low"),
        make_employee(risk_of_loss="High"),
    ]

    assert TalentAggregator(employees).distribution_by("risk_of_loss") == {"Low": 2, "Medium": 0, "High": 1}


def test_distribution_by_rejects_unknown_field(make_employee):
    with pytest.raises(ValueError):
        TalentAggregator([make_employee()]).distribution_by("salary")


def test_empty_snapshot_is_total():
    aggregator = TalentAggregator([])

    assert aggregator.total_count == 0
    assert aggregator.critical_role_count == 0
    assert aggregator.average_performance() == 0
    assert aggregator.average_readiness_score() == 0
    assert aggregator.distribution_by("direction") == {
        "Operations": 0,
        "Finance": 0,
        "HR": 0,
        "Sales & Marketing": 0,
        "IT": 0,
    }
    assert aggregator.top_by_performance(5) == []
    assert aggregator.risk_impact_pairs() == []
    assert aggregator.named_view(NamedView.TOP_TALENT) == ViewShare(count=0, percent=0)
    assert sum(aggregator.view_counts().values()) == 0


def test_averages_round_half_up(make_employee):
    employees = [
        make_employee(performance=3, readiness="Ready Now"),
        make_employee(performance=2, readiness="Ready Now"),
        make_employee(performance=2, readiness="More than 3 Years"),
        make_employee(performance=2, readiness="More than 3 Years"),
    ]
    aggregator = TalentAggregator(employees)

    # 9 / 4 = 2.25 and 8 / 4 = 2.0
    assert aggregator.average_performance() == 2.3
    assert aggregator.average_readiness_score() == 2.0


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(2.25, 1) == 2.3
    assert round_half_up(12.5, 0) == 13
    assert round_half_up(2.0, 1) == 2.0


def test_critical_roles_need_high_risk_and_high_impact(make_employee):
    employees = [
        make_employee(risk_of_loss="High", impact_of_loss="High"),
        make_employee(risk_of_loss="High", impact_of_loss="Medium"),
        make_employee(risk_of_loss="Medium", impact_of_loss="High"),
    ]

    assert TalentAggregator(employees).critical_role_count == 1


def test_top_by_performance_is_stable_for_ties(make_employee):
    first = make_employee(name="First", performance=3, evolution_potential=3)
    core = make_employee(name="Core", performance=3, evolution_potential=2)
    second = make_employee(name="Second", performance=3, evolution_potential=3)
    low = make_employee(name="Low", performance=1, evolution_potential=3)
    aggregator = TalentAggregator([low, first, core, second])

    assert [employee.name for employee in aggregator.top_by_performance(4)] == ["First", "Second", "Core", "Low"]
    assert aggregator.top_by_performance(-1) == []


def test_snapshot_is_isolated_from_caller_list(make_employee):
    employees = [make_employee()]
    aggregator = TalentAggregator(employees)
    employees.append(make_employee())

    assert aggregator.total_count == 1


def test_cross_tab_counts_direction_by_readiness(make_employee):
    employees = [
        make_employee(direction="Finance", readiness="Ready Now"),
        make_employee(direction="Finance", readiness="Ready Now"),
        make_employee(direction="IT", readiness="1-3 Years"),
    ]

    matrix = TalentAggregator(employees).cross_tab()

    assert matrix["Finance"] == {"Ready Now": 2, "1-3 Years": 0, "More than 3 Years": 0}
    assert matrix["IT"]["1-3 Years"] == 1
    assert sum(matrix["Operations"].values()) == 0


def test_risk_impact_pairs_use_ordinals(make_employee):
    employee = make_employee(name="Sami", risk_of_loss="Medium", impact_of_loss="High")

    assert TalentAggregator([employee]).risk_impact_pairs() == [RiskImpactPoint("Sami", 2, 3)]


def test_view_counts_fold_remaining_categories_into_others(make_employee):
    employees = [
        make_employee(performance=3, evolution_potential=3),
        make_employee(performance=2, evolution_potential=3),
        make_employee(performance=3, evolution_potential=2),
        make_employee(performance=2, evolution_potential=2),
        make_employee(performance=3, evolution_potential=1),
        make_employee(performance=1, evolution_potential=3),
        make_employee(performance=1, evolution_potential=1),
    ]

    counts = TalentAggregator(employees).view_counts()

    assert counts == {
        "Future Leaders": 1,
        "Growth Employees": 1,
        "Core Employees": 1,
        "Effective Performers": 1,
        OTHERS_LABEL: 3,
    }


def test_named_views_sum_grid_cells(make_employee):
    employees = [
        make_employee(performance=3, evolution_potential=3),
        make_employee(performance=1, evolution_potential=1),
        make_employee(performance=2, evolution_potential=2),
        make_employee(performance=1, evolution_potential=3),
    ]
    aggregator = TalentAggregator(employees)

    assert aggregator.named_view(NamedView.TOP_TALENT) == ViewShare(count=1, percent=25)
    assert aggregator.named_view("Development Needed") == ViewShare(count=2, percent=50)
    assert aggregator.named_view(NamedView.AT_RISK) == ViewShare(count=2, percent=50)


def test_readiness_shares_round_to_whole_percent(make_employee):
    employees = [make_employee(readiness="Ready Now")] + [make_employee(readiness="1-3 Years") for _ in range(7)]

    shares = TalentAggregator(employees).readiness_shares()

    assert shares["Ready Now"] == ViewShare(count=1, percent=13)
    assert shares["1-3 Years"] == ViewShare(count=7, percent=88)
    assert shares["More than 3 Years"] == ViewShare(count=0, percent=0)


def test_category_distribution_over_sample_covers_every_category(store):
    distribution = TalentAggregator(store.employees()).category_distribution()

    assert len(distribution) == 9
    assert all(count > 0 for count in distribution.values())
    assert sum(distribution.values()) == len(store.employees())


def test_top_by_performance_is_idempotent(store):
    ranked = TalentAggregator(store.employees()).top_by_performance(len(store.employees()))

    assert TalentAggregator(ranked).top_by_performance(100) == ranked
    assert TalentAggregator(ranked).top_by_performance(5) == ranked[:5]


@pytest.mark.parametrize("field", ["risk_of_loss", "impact_of_loss", "direction", "readiness", "job_grade"])
def test_distribution_over_sample_sums_to_total(store, field):
    aggregator = TalentAggregator(store.employees())

    assert sum(aggregator.distribution_by(field).values()) == aggregator.total_count == 16


def test_sample_risk_and_readiness_distribution(store):
    aggregator = TalentAggregator(store.employees())

    assert aggregator.distribution_by("risk_of_loss") == {"Low": 6, "Medium": 5, "High": 5}
    assert aggregator.distribution_by("readiness") == {"Ready Now": 4, "1-3 Years": 6, "More than 3 Years": 6}
