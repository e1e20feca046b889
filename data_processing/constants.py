# rural_health/data_processing/constants.py

# =========================
# CONFIG
# =========================
WORLD_BANK_API  = "https://api.worldbank.org/v2"
COUNTRY_CODE    = "IN"
INDICATOR_CODE  = "SH.MED.PHYS.ZS"            # Physicians (per 1,000 people)
REQUEST_TIMEOUT = None                        # transport default

PHYSICIAN_DENSITY_URL = f"{WORLD_BANK_API}/country/{COUNTRY_CODE}/indicator/{INDICATOR_CODE}?format=json"

# Baselines, in doctors per 1,000 people, as multiples of the national density
URBAN_BASELINE_FACTOR = 3
RURAL_BASELINE_FACTOR = 0.4

WHO_RECOMMENDED_DENSITY = 1.0                 # per 1,000 people
WHO_RATIO = 1 / 1000

REGIONS = ("maharashtra", "bihar", "kerala", "uttarPradesh", "tamilNadu")
FACILITY_TIERS = ("phc", "chc", "districthospitals")
WORKFORCE_ROLES = ("doctors", "nurses", "specialists")

# Synthetic per-region multipliers (higher = more people per doctor)
RURAL_MULTIPLIERS = {
    "maharashtra": 1.0,
    "bihar": 1.5,
    "kerala": 0.7,
    "uttarPradesh": 1.3,
    "tamilNadu": 0.8,
}
URBAN_MULTIPLIERS = {
    "maharashtra": 1.0,
    "bihar": 1.2,
    "kerala": 0.9,
    "uttarPradesh": 1.1,
    "tamilNadu": 0.85,
}

# Live branch literals (not derived from the fetched density)
LIVE_VACANCY_RATES = {"phc": 38.4, "chc": 42.8, "districthospitals": 28.1}
LIVE_WORKFORCE_SHORTAGE = {"doctors": 600000, "nurses": 2000000, "specialists": 100000}

# Fallback branch literals
FALLBACK_PHYSICIAN_DENSITY = 0.8
FALLBACK_RURAL_RATIOS = {
    "maharashtra": 1 / 10500,
    "bihar": 1 / 17000,
    "kerala": 1 / 5000,
    "uttarPradesh": 1 / 12000,
    "tamilNadu": 1 / 6500,
}
FALLBACK_URBAN_RATIOS = {
    "maharashtra": 1 / 800,
    "bihar": 1 / 2000,
    "kerala": 1 / 500,
    "uttarPradesh": 1 / 1500,
    "tamilNadu": 1 / 750,
}
FALLBACK_VACANCY_RATES = {"phc": 38, "chc": 42, "districthospitals": 28}
FALLBACK_WORKFORCE_SHORTAGE = {"doctors": 76500, "nurses": 201000, "specialists": 87500}

# ---------- display labels ----------
REGION_LABELS = {
    "maharashtra": "Maharashtra",
    "bihar": "Bihar",
    "kerala": "Kerala",
    "uttarPradesh": "Uttar Pradesh",
    "tamilNadu": "Tamil Nadu",
}
FACILITY_LABELS = {
    "phc": "Primary Health Centers",
    "chc": "Community Health Centers",
    "districthospitals": "District Hospitals",
}
ROLE_LABELS = {
    "doctors": "Doctors",
    "nurses": "Nurses",
    "specialists": "Specialists",
}
