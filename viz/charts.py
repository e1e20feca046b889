# rural_health/viz/charts.py
import pandas as pd
import plotly.graph_objects as go

from data_processing.constants import (
    REGIONS, FACILITY_TIERS, WORKFORCE_ROLES, REGION_LABELS, FACILITY_LABELS, ROLE_LABELS,
    WHO_RECOMMENDED_DENSITY,
)

RURAL_COLOR = "#ef4444"
URBAN_COLOR = "#3b82f6"
WHO_COLOR   = "#10b981"
VACANCY_COLOR  = "#8884d8"
SHORTAGE_COLOR = "#82ca9d"

def _layout(fig, height, **kw):
    fig.update_layout(height=height, margin=dict(l=0, r=0, t=40, b=0), **kw)
    return fig

# ---------- frames ----------
def ratio_frame(stats) -> pd.DataFrame:
    """Population per doctor by state (lower is better)."""
    ratio = stats.doctor_population_ratio
    return pd.DataFrame({
        "region": list(REGIONS),
        "name":   [REGION_LABELS[r] for r in REGIONS],
        "rural":  [round(1 / ratio.rural[r]) for r in REGIONS],
        "urban":  [round(1 / ratio.urban[r]) for r in REGIONS],
        "who":    [round(1 / ratio.who)] * len(REGIONS),
    })

def vacancy_frame(stats) -> pd.DataFrame:
    return pd.DataFrame({
        "name": [FACILITY_LABELS[k] for k in FACILITY_TIERS],
        "rate": [stats.vacancy_rates[k] for k in FACILITY_TIERS],
    })

def shortage_frame(stats) -> pd.DataFrame:
    return pd.DataFrame({
        "name":     [ROLE_LABELS[k] for k in WORKFORCE_ROLES],
        "shortage": [stats.workforce_shortage[k] / 1000 for k in WORKFORCE_ROLES],
    })

def density_frame(physician_density) -> pd.DataFrame:
    return pd.DataFrame({
        "name":  ["India", "WHO Recommended"],
        "value": [physician_density, WHO_RECOMMENDED_DENSITY],
    })

# ---------- figures ----------
def doctor_ratio_chart(stats) -> go.Figure:
    df = ratio_frame(stats)
    fig = go.Figure(data=[
        go.Bar(x=df["name"], y=df["rural"], name="Rural", marker_color=RURAL_COLOR),
        go.Bar(x=df["name"], y=df["urban"], name="Urban", marker_color=URBAN_COLOR),
        go.Bar(x=df["name"], y=df["who"],   name="WHO Standard", marker_color=WHO_COLOR),
    ])
    return _layout(fig, 320, barmode="group", yaxis_title="Population per doctor")

def vacancy_chart(stats) -> go.Figure:
    df = vacancy_frame(stats)
    fig = go.Figure(data=[go.Bar(x=df["rate"], y=df["name"], orientation="h", name="Vacancy Rate (%)",
                                 text=[f"{v:g}%" for v in df["rate"]], textposition="auto",
                                 marker_color=VACANCY_COLOR)])
    return _layout(fig, 280, xaxis_title="Vacancy Rate (%)", showlegend=True)

def shortage_chart(stats) -> go.Figure:
    df = shortage_frame(stats)
    fig = go.Figure(data=[go.Bar(x=df["name"], y=df["shortage"], name="Shortage (thousands)",
                                 text=[f"{v:,.1f}k" for v in df["shortage"]], textposition="auto",
                                 marker_color=SHORTAGE_COLOR)])
    return _layout(fig, 280, yaxis_title="Shortage (thousands)", showlegend=True)

def physician_density_chart(physician_density) -> go.Figure:
    df = density_frame(physician_density)
    fig = go.Figure(data=[go.Bar(x=df["name"], y=df["value"], name="Physician Density",
                                 hovertemplate="%{y} physicians per 1,000 people<extra></extra>",
                                 marker_color=URBAN_COLOR)])
    return _layout(fig, 260, yaxis_title="per 1,000 people", showlegend=True)
