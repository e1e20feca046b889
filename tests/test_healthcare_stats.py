import logging

import pytest
import requests

from data_processing import (
    HealthcareStats, derive_stats, fallback_stats, produce_stats, read_physician_density
)
from data_processing.constants import REGIONS, RURAL_MULTIPLIERS, URBAN_MULTIPLIERS
from tests.conftest import FakeResponse, indicator_payload

FALLBACK = {
    "doctorPopulationRatio": {
        "rural": {"maharashtra": 1 / 10500, "bihar": 1 / 17000, "kerala": 1 / 5000,
                  "uttarPradesh": 1 / 12000, "tamilNadu": 1 / 6500},
        "urban": {"maharashtra": 1 / 800, "bihar": 1 / 2000, "kerala": 1 / 500,
                  "uttarPradesh": 1 / 1500, "tamilNadu": 1 / 750},
        "who": 1 / 1000,
    },
    "vacancyRates": {"phc": 38, "chc": 42, "districthospitals": 28},
    "workforceShortage": {"doctors": 76500, "nurses": 201000, "specialists": 87500},
    "physicianDensity": 0.8,
}

FAILURES = [
    requests.ConnectionError("network down"),
    FakeResponse(status_code=500),
    FakeResponse(text="{not json"),
    FakeResponse([{"message": "bad indicator"}]),
    FakeResponse(indicator_payload(None, None, None)),
    FakeResponse(indicator_payload(10 ** 400)),
    FakeResponse(indicator_payload(None, float("inf"))),
]


def assert_shape(stats):
    d = stats.to_dict()
    assert list(d["doctorPopulationRatio"]["rural"]) == list(REGIONS)
    assert list(d["doctorPopulationRatio"]["urban"]) == list(REGIONS)
    assert set(d["vacancyRates"]) == {"phc", "chc", "districthospitals"}
    assert set(d["workforceShortage"]) == {"doctors", "nurses", "specialists"}
    assert isinstance(d["physicianDensity"], float)
    assert d["doctorPopulationRatio"]["who"] == 1 / 1000


def test_live_branch_scenario(fake_get):
    fake_get(FakeResponse(indicator_payload(None, 0.9, 0.8)))
    stats = produce_stats()

    assert stats.physician_density == 0.9
    assert stats.doctor_population_ratio.rural["maharashtra"] == 1 / (0.9 * 0.4 * 1000 * 1)
    assert stats.doctor_population_ratio.rural["maharashtra"] == pytest.approx(1 / 360)
    assert dict(stats.vacancy_rates) == {"phc": 38.4, "chc": 42.8, "districthospitals": 28.1}
    assert dict(stats.workforce_shortage) == {"doctors": 600000, "nurses": 2000000, "specialists": 100000}
    assert_shape(stats)


@pytest.mark.parametrize("density", [0.3, 0.9, 1.2, 2.5])
def test_live_ratios_follow_multiplier_tables(density):
    ratio = derive_stats(density).doctor_population_ratio
    for r in REGIONS:
        assert ratio.rural[r] == 1 / ((density * 0.4) * 1000 * RURAL_MULTIPLIERS[r])
        assert ratio.urban[r] == 1 / ((density * 3) * 1000 * URBAN_MULTIPLIERS[r])
    assert ratio.who == 1 / 1000


def test_live_literals_ignore_density():
    low, high = derive_stats(0.2), derive_stats(4.0)
    assert low.vacancy_rates == high.vacancy_rates
    assert low.workforce_shortage == high.workforce_shortage


def test_live_branch_distinguishable_from_fallback_at_same_density():
    live = derive_stats(0.8)
    assert live.physician_density == fallback_stats().physician_density
    assert live != fallback_stats()
    assert live.vacancy_rates["phc"] == 38.4


@pytest.mark.parametrize("failure", FAILURES)
def test_failures_return_fallback_exactly(fake_get, failure):
    fake_get(failure)
    stats = produce_stats()
    assert stats == fallback_stats()
    assert stats.to_dict() == FALLBACK
    assert_shape(stats)


def test_failure_is_logged(fake_get, caplog):
    fake_get(requests.ConnectionError("network down"))
    with caplog.at_level(logging.WARNING):
        produce_stats()
    assert "network down" in caplog.text


def test_derivation_errors_fall_back(fake_get, monkeypatch):
    fake_get(FakeResponse(indicator_payload(0.9)))

    def boom(density):
        raise ZeroDivisionError("float division by zero")

    monkeypatch.setattr("data_processing.healthcare_stats.derive_stats", boom)
    assert produce_stats() == fallback_stats()


def test_each_call_fetches_again(fake_get):
    calls = fake_get(FakeResponse(indicator_payload(0.9)))
    first, second = produce_stats(), produce_stats()
    assert len(calls) == 2
    assert first == second and first is not second


def test_rural_ranking_in_both_branches():
    order = ["bihar", "uttarPradesh", "maharashtra", "tamilNadu", "kerala"]
    for stats in (derive_stats(0.9), fallback_stats()):
        rural = stats.doctor_population_ratio.rural
        assert [rural[r] for r in order] == sorted(rural[r] for r in order)


def test_urban_ranking():
    order = ["bihar", "uttarPradesh", "maharashtra", "tamilNadu", "kerala"]
    urban = fallback_stats().doctor_population_ratio.urban
    assert [urban[r] for r in order] == sorted(urban.values())
    # the live urban table puts Tamil Nadu (0.85) ahead of Kerala (0.9)
    live = derive_stats(0.9).doctor_population_ratio.urban
    assert live["bihar"] < live["uttarPradesh"] < live["maharashtra"] < live["kerala"] < live["tamilNadu"]


def test_fallback_rural_worse_than_urban():
    ratio = fallback_stats().doctor_population_ratio
    for r in REGIONS:
        assert ratio.rural[r] < ratio.urban[r]


def test_stats_are_immutable():
    stats = fallback_stats()
    with pytest.raises(AttributeError):
        stats.physician_density = 1.0
    with pytest.raises(TypeError):
        stats.vacancy_rates["phc"] = 0
    with pytest.raises(TypeError):
        stats.doctor_population_ratio.rural["bihar"] = 0
    assert isinstance(stats, HealthcareStats)


def test_read_physician_density(fake_get):
    fake_get(FakeResponse(indicator_payload(None, 0.73)))
    assert read_physician_density() == 0.73


def test_read_physician_density_fallback(fake_get):
    fake_get(requests.Timeout("slow"))
    assert read_physician_density() == 0.8


@pytest.mark.parametrize("value", [10 ** 400, float("inf")])
def test_out_of_range_density_falls_back(fake_get, value):
    fake_get(FakeResponse(indicator_payload(value)))
    assert produce_stats() == fallback_stats()
    assert read_physician_density() == 0.8


def test_unexpected_errors_never_escape(monkeypatch):
    def boom():
        raise KeyError("value")

    monkeypatch.setattr("data_processing.healthcare_stats.try_physician_density", boom)
    assert produce_stats() == fallback_stats()
    assert read_physician_density() == 0.8
