# rural_health/app/app.py
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add parent directory to sys.path so we can import our modules
# This is needed because streamlit runs app.py as a top-level script
parent_dir = Path(__file__).parent.parent.absolute()
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from data_processing import produce_stats, read_physician_density
from data_processing.constants import PHYSICIAN_DENSITY_URL
from content import narrative as txt
from viz.charts import doctor_ratio_chart, vacancy_chart, shortage_chart, physician_density_chart
from viz.causal_loop import build_causal_loop_svg

TABS = ["Home", "Analysis", "Solutions", "Data"]

def bullets(items):
    st.markdown("\n".join(f"- {i}" for i in items))

def render_diagram():
    st.markdown(f'<div style="background:#f3f4f6;padding:1rem;border:1px solid #d1d5db;border-radius:4px">'
                f'{build_causal_loop_svg()}</div>', unsafe_allow_html=True)

# ---------- pages ----------
def home_page():
    st.header("Rural Healthcare Workforce Shortage in India")
    for p in txt.INTRO: st.markdown(p)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Key Findings")
        bullets(txt.KEY_FINDINGS)
    with col2:
        st.subheader("Physician Density in India (per 1,000 people)")
        with st.spinner("Loading physician density data..."):
            density = read_physician_density()
        st.plotly_chart(physician_density_chart(density), use_container_width=True)
        st.caption(f"Latest data from World Bank: {density} physicians per 1,000 people")

    st.subheader("System Dynamics Diagram")
    render_diagram()
    st.caption(txt.DIAGRAM_CAPTION)

def analysis_page():
    st.header("System Narrative")
    st.markdown("The Causal Loop Diagram illustrates the key variables and relationships "
                "perpetuating rural healthcare workforce shortages:")
    st.markdown("#### Core Variables")
    st.markdown(", ".join(txt.CORE_VARIABLES))
    st.markdown("#### Key Relationships")
    bullets([f"{src} → {dst} ({sign}): {why}" for src, dst, sign, why in txt.KEY_RELATIONSHIPS])
    st.markdown("#### Feedback Loops")
    bullets([f"**{l['id']}: {l['name']} ({l['kind']}):** " + " → ".join(l["chain"]) for l in txt.FEEDBACK_LOOPS])

    st.divider()
    st.header("Event-Pattern-Structure Analysis")
    for title, body in txt.EPS_SECTIONS:
        with st.expander(title, expanded=False):
            if isinstance(body, dict):
                for group, items in body.items():
                    st.markdown(f"**{group}**")
                    bullets(items)
            else:
                bullets(body)

    st.divider()
    st.header("System Archetypes")
    for name, desc in txt.ARCHETYPES:
        st.info(f'**"{name}"**  \n{desc}')

def solutions_page():
    st.header("Analysis of Existing Solutions")
    st.dataframe(pd.DataFrame(txt.EXISTING_SOLUTIONS, columns=txt.SOLUTION_COLUMNS),
                 use_container_width=True, hide_index=True)
    st.caption(f"*{txt.SOLUTIONS_NOTE}*")

    st.divider()
    st.header("Leverage Points for Intervention")
    for impact, groups in txt.LEVERAGE_POINTS.items():
        st.subheader(impact)
        for group, items in groups.items():
            st.markdown(f"**{group}**")
            bullets(items)

    st.divider()
    st.header("Implementation Priorities")
    for col, (horizon, items) in zip(st.columns(len(txt.IMPLEMENTATION_PRIORITIES)), txt.IMPLEMENTATION_PRIORITIES):
        with col:
            st.markdown(f"**{horizon}**")
            bullets(items)

def data_page():
    st.header("Healthcare Workforce Data")
    with st.spinner("Loading healthcare data..."):
        stats = produce_stats()

    st.subheader("Doctor-to-Population Ratio by State")
    st.caption("Population per doctor (lower is better)")
    st.plotly_chart(doctor_ratio_chart(stats), use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Vacancy Rates (%)")
        st.plotly_chart(vacancy_chart(stats), use_container_width=True)
    with col2:
        st.subheader("Workforce Shortages (thousands)")
        st.plotly_chart(shortage_chart(stats), use_container_width=True)

    st.markdown("**Data Sources:**")
    bullets([f"Physician density data from World Bank API ([World Bank API]({PHYSICIAN_DENSITY_URL}))"]
            + txt.DATA_SOURCES)

PAGES = dict(zip(TABS, [home_page, analysis_page, solutions_page, data_page]))

def main():
    st.set_page_config(page_title="Rural Healthcare Workforce Analysis", layout="wide")

    if 'active_tab' not in st.session_state: st.session_state.active_tab = TABS[0]

    st.title("Rural Healthcare Workforce Analysis")
    # only the selected page runs, so stats are fetched when a page needs them
    active = st.radio("Navigation", TABS, key="active_tab", horizontal=True, label_visibility="collapsed")
    st.divider()

    PAGES[active]()

    st.divider()
    for line in txt.FOOTER: st.caption(line)

if __name__ == "__main__":
    main()
