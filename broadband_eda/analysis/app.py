import streamlit as st
import pandas as pd
import plotly.express as px

from broadband_eda import config
from broadband_eda.pipeline import run

# ==================================================
# PAGE CONFIG
# ==================================================
st.set_page_config(
    page_title="Broadband Block Explorer",
    page_icon="📶",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ==================================================
# CUSTOM CSS
# ==================================================
SAAS_CSS = """
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

.stApp {
    background-color: #f5f7fb;
    font-family: system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", sans-serif;
}

.top-header {
    background: #ffffff;
    padding: 1.2rem 1.8rem;
    border-radius: 18px;
    box-shadow: 0 8px 18px rgba(15, 23, 42, 0.06);
    margin-bottom: 1.3rem;
    border: 1px solid #e5e7eb;
}

.metric-card {
    background: #ffffff;
    border-radius: 18px;
    padding: 1.1rem 1.3rem;
    box-shadow: 0 6px 14px rgba(15, 23, 42, 0.05);
    border: 1px solid #e5e7eb;
}

.small-label {
    font-size: 0.75rem;
    text-transform: uppercase;
    color: #6b7280;
    font-weight: 600;
    margin-bottom: 0.35rem;
}
</style>
"""
st.markdown(SAAS_CSS, unsafe_allow_html=True)


@st.cache_data(show_spinner="Running block-level analysis…")
def load_result(coverage_path, geometry_path, geometry_key, state_abbr):
    return run(
        coverage_path=coverage_path,
        geometry_path=geometry_path,
        geometry_key=geometry_key,
        state_abbr=state_abbr,
    )


def metric_card(col, label, value):
    with col:
        st.markdown('<div class="metric-card">', unsafe_allow_html=True)
        st.markdown(f'<div class="small-label">{label}</div>', unsafe_allow_html=True)
        st.metric(label, value, label_visibility="collapsed")
        st.markdown("</div>", unsafe_allow_html=True)


def fmt_r(r):
    return "n/a" if pd.isna(r) else f"{r:0.3f}"


# ==================================================
# LOAD DATA
# ==================================================
try:
    result = load_result(
        str(config.PATH_COVERAGE),
        str(config.PATH_BLOCKS),
        config.GEOMETRY_KEY,
        config.STATE_ABBR,
    )
except Exception as e:
    st.error(f"Error loading broadband data: {e}")
    st.stop()

summary = result.summary
blocks = result.blocks

# ==================================================
# HEADER
# ==================================================
st.markdown('<div class="top-header">', unsafe_allow_html=True)
c1, c2 = st.columns([0.8, 6])

with c1:
    st.write("📶")

with c2:
    st.markdown(f"### Broadband Provider Coverage – {config.STATE_ABBR or 'All states'}")
    st.markdown(
        "Census-block provider counts and advertised speeds from **FCC Form 477**."
    )

st.markdown("</div>", unsafe_allow_html=True)

# ==================================================
# KPIs
# ==================================================
k1, k2, k3, k4, k5 = st.columns(5)
metric_card(k1, "Census blocks", f"{summary.blocks:,}")
metric_card(k2, "Mean providers (rounded)", f"{summary.mean}")
metric_card(k3, "Median providers", f"{summary.median:g}")
metric_card(k4, "r(providers, download)", fmt_r(result.correlations.get("max_down")))
metric_card(k5, "r(providers, upload)", fmt_r(result.correlations.get("max_up")))

st.write("")

# ==================================================
# TABS
# ==================================================
tab_map, tab_dist, tab_data = st.tabs(["🗺 Map", "📈 Distribution", "📄 Data"])

with tab_map:
    map_choices = {
        label: name
        for name, label in config.MAP_METRICS.items()
        if f"map_{name}" in result.figures
    }
    metric_label = st.selectbox("Color blocks by", list(map_choices.keys()), index=0)
    if result.joined.empty:
        st.warning("No census blocks matched between coverage and geometry files.")
    else:
        st.plotly_chart(result.figures[f"map_{map_choices[metric_label]}"], width="stretch")
        st.caption(
            "Each polygon is a census block. Colors use a square-root scale; "
            "the color bar is labelled in the original units."
        )

with tab_dist:
    st.plotly_chart(result.figures["hist_provider_count"], width="stretch")

    svc_counts = blocks["service_category"].value_counts().reset_index()
    svc_counts.columns = ["service_category", "count"]
    fig_svc = px.bar(
        svc_counts,
        x="service_category",
        y="count",
        color="service_category",
        color_discrete_map={
            "Unserved": "red",
            "Underserved": "orange",
            "Served": "green",
            "Unknown": "gray",
        },
        text="count",
        title="Blocks by service category",
    )
    fig_svc.update_layout(showlegend=False)
    st.plotly_chart(fig_svc, width="stretch")

    st.text(result.report)

with tab_data:
    st.subheader("County summary")
    st.dataframe(result.counties, width="stretch", height=350)

    st.subheader("Block aggregates (first 300 rows)")
    st.dataframe(blocks.head(300), width="stretch", height=450)
