# rural_health/data_processing/__init__.py
from .worldbank import (
    AcquisitionError, Acquisition, fetch_indicator_payload, observations, latest_value,
    try_physician_density
)
from .healthcare_stats import (
    HealthcareStats, DoctorPopulationRatio, regional_ratios, derive_stats, fallback_stats,
    produce_stats, read_physician_density
)
