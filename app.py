import logging

import streamlit as st

from charts import CHART_KINDS, build_chart
from sales_data import filter_totals, load_yearly_totals
from settings import Settings

st.set_page_config(
    page_title="Sales Dashboard",
    page_icon="📊",
    layout="wide",
)

settings = Settings.load()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False)
def load_data(source: str, years: tuple):
    return load_yearly_totals(source, years)


# ---------------- UI ----------------
st.title("Sales Dashboard")
st.caption("Supplement units sold per year. Filter out years below a threshold and switch chart type.")

totals = load_data(settings.csv_path, settings.years)

col_threshold, col_kind = st.columns([1, 2])
threshold = col_threshold.number_input("Sales Threshold", value=0.0, step=1.0, format="%g")
chart_kind = col_kind.radio(
    "Chart type",
    CHART_KINDS,
    index=0,
    horizontal=True,
    format_func=str.title,
)

filtered = filter_totals(totals, threshold)
logger.debug("Rendering %s chart for %d of %d years (threshold=%s)", chart_kind, len(filtered), len(totals), threshold)

with st.container(border=True):
    st.plotly_chart(build_chart(filtered, chart_kind), use_container_width=True)
