# rural_health/data_processing/healthcare_stats.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from data_processing.constants import (
    REGIONS, FACILITY_TIERS, WORKFORCE_ROLES, WHO_RATIO,
    URBAN_BASELINE_FACTOR, RURAL_BASELINE_FACTOR, RURAL_MULTIPLIERS, URBAN_MULTIPLIERS,
    LIVE_VACANCY_RATES, LIVE_WORKFORCE_SHORTAGE,
    FALLBACK_PHYSICIAN_DENSITY, FALLBACK_RURAL_RATIOS, FALLBACK_URBAN_RATIOS,
    FALLBACK_VACANCY_RATES, FALLBACK_WORKFORCE_SHORTAGE,
)
from data_processing.worldbank import try_physician_density
from utils.logger import get_logger

logger = get_logger(__name__)


def _frozen(values, keys):
    return MappingProxyType({k: values[k] for k in keys})


@dataclass(frozen=True)
class DoctorPopulationRatio:
    rural: Mapping[str, float]
    urban: Mapping[str, float]
    who: float = WHO_RATIO


@dataclass(frozen=True)
class HealthcareStats:
    doctor_population_ratio: DoctorPopulationRatio
    vacancy_rates: Mapping[str, float]
    workforce_shortage: Mapping[str, int]
    physician_density: float

    def to_dict(self):
        ratio = self.doctor_population_ratio
        return {
            "doctorPopulationRatio": {
                "rural": dict(ratio.rural),
                "urban": dict(ratio.urban),
                "who": ratio.who,
            },
            "vacancyRates": dict(self.vacancy_rates),
            "workforceShortage": dict(self.workforce_shortage),
            "physicianDensity": self.physician_density,
        }


def regional_ratios(baseline, multipliers):
    """Doctors per person for each region given a baseline in doctors per 1,000."""
    return _frozen({r: 1 / (baseline * 1000 * multipliers[r]) for r in REGIONS}, REGIONS)


def derive_stats(physician_density: float) -> HealthcareStats:
    urban_ratio = physician_density * URBAN_BASELINE_FACTOR
    rural_ratio = physician_density * RURAL_BASELINE_FACTOR
    return HealthcareStats(
        doctor_population_ratio=DoctorPopulationRatio(
            rural=regional_ratios(rural_ratio, RURAL_MULTIPLIERS),
            urban=regional_ratios(urban_ratio, URBAN_MULTIPLIERS),
            who=WHO_RATIO,
        ),
        vacancy_rates=_frozen(LIVE_VACANCY_RATES, FACILITY_TIERS),
        workforce_shortage=_frozen(LIVE_WORKFORCE_SHORTAGE, WORKFORCE_ROLES),
        physician_density=physician_density,
    )


def fallback_stats() -> HealthcareStats:
    return HealthcareStats(
        doctor_population_ratio=DoctorPopulationRatio(
            rural=_frozen(FALLBACK_RURAL_RATIOS, REGIONS),
            urban=_frozen(FALLBACK_URBAN_RATIOS, REGIONS),
            who=WHO_RATIO,
        ),
        vacancy_rates=_frozen(FALLBACK_VACANCY_RATES, FACILITY_TIERS),
        workforce_shortage=_frozen(FALLBACK_WORKFORCE_SHORTAGE, WORKFORCE_ROLES),
        physician_density=FALLBACK_PHYSICIAN_DENSITY,
    )


def produce_stats() -> HealthcareStats:
    """Fetch India's physician density and derive the dashboard statistics.

    Always returns a complete structure: if anything goes wrong the fallback
    dataset is returned whole and the reason is logged. Nothing is cached, each
    call makes its own request.
    """
    try:
        acq = try_physician_density()
        if not acq.ok:
            logger.warning("Error fetching real data, using fallback dataset: %s", acq.error)
            return fallback_stats()
        return derive_stats(acq.value)
    except Exception as e:
        logger.warning("Could not produce stats, using fallback dataset: %r", e)
        return fallback_stats()


def read_physician_density() -> float:
    """Latest physician density per 1,000 people, or the fallback value."""
    try:
        acq = try_physician_density()
    except Exception as e:
        logger.warning("Error fetching physician density, using %s: %r", FALLBACK_PHYSICIAN_DENSITY, e)
        return FALLBACK_PHYSICIAN_DENSITY
    if not acq.ok:
        logger.warning("Error fetching physician density, using %s: %s", FALLBACK_PHYSICIAN_DENSITY, acq.error)
        return FALLBACK_PHYSICIAN_DENSITY
    return acq.value
