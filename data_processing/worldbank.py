# rural_health/data_processing/worldbank.py
"""World Bank indicator API access.

The v2 API answers ``?format=json`` with a two element list: paging metadata
and then the yearly observations, newest year first. Recent years are often
unreported (``"value": null``), so the latest usable figure is the first
observation that carries a value.
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional

import requests

from data_processing.constants import PHYSICIAN_DENSITY_URL, REQUEST_TIMEOUT


class AcquisitionError(RuntimeError):
    """The indicator could not be fetched or read."""


@dataclass(frozen=True)
class Acquisition:
    value: Optional[float] = None
    error: Optional[AcquisitionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_indicator_payload(url=PHYSICIAN_DENSITY_URL, timeout=REQUEST_TIMEOUT):
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        raise AcquisitionError(f"request to {url} failed: {e}") from e
    except ValueError as e:
        raise AcquisitionError(f"response from {url} is not JSON: {e}") from e


def observations(payload):
    """Return the observation list from an indicator payload."""
    if not isinstance(payload, list) or len(payload) < 2:
        # errors come back as a one element list holding a "message" block
        raise AcquisitionError(f"unexpected payload shape: {str(payload)[:200]}")
    obs = payload[1]
    if not isinstance(obs, list):
        raise AcquisitionError(f"observations missing from payload: {str(obs)[:200]}")
    return obs


def latest_value(obs):
    """First non-null value in source order, or None if every year is null."""
    for item in obs:
        if not isinstance(item, dict):
            raise AcquisitionError(f"malformed observation: {item!r}")
        value = item.get("value")
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, Real):
            raise AcquisitionError(f"non-numeric value for {item.get('date', '?')}: {value!r}")
        try:
            value = float(value)
        except OverflowError as e:
            raise AcquisitionError(f"value out of range for {item.get('date', '?')}") from e
        if not math.isfinite(value) or value <= 0:
            raise AcquisitionError(f"non-positive or non-finite value for {item.get('date', '?')}: {value!r}")
        return value
    return None


def try_physician_density(url=PHYSICIAN_DENSITY_URL) -> Acquisition:
    """One request for the physician density indicator. Never raises."""
    try:
        value = latest_value(observations(fetch_indicator_payload(url)))
    except AcquisitionError as e:
        return Acquisition(error=e)
    if value is None:
        return Acquisition(error=AcquisitionError("no reported physician density in any year"))
    return Acquisition(value=value)
