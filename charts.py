from typing import Iterable

import plotly.express as px
import plotly.graph_objects as go

from sales_data import YearTotal, totals_frame

CHART_KINDS = ("bar", "line", "pie")

PIE_COLORS = ["#8884d8", "#82ca9d", "#ffc658"]
BAR_COLOR = "#38bdf8"
LINE_COLOR = "#10b981"

LABELS = {"year": "Year", "sales": "Units Sold"}


def build_chart(totals: Iterable[YearTotal], kind: str = "bar") -> go.Figure:
    """Plotly figure of yearly totals as a bar, line or pie chart."""
    df = totals_frame(totals)

    if kind == "bar":
        fig = px.bar(df, x="year", y="sales", title="Units Sold by Year", labels=LABELS,
                     color_discrete_sequence=[BAR_COLOR])
        fig.update_xaxes(type="category")
        fig.update_yaxes(tickformat=",.0f")
    elif kind == "line":
        fig = px.line(df, x="year", y="sales", markers=True, title="Units Sold by Year", labels=LABELS,
                      color_discrete_sequence=[LINE_COLOR])
        fig.update_xaxes(type="category")
        fig.update_yaxes(tickformat=",.0f")
    elif kind == "pie":
        fig = px.pie(df, names="year", values="sales", title="Share of Units Sold by Year",
                     color_discrete_sequence=PIE_COLORS)
        fig.update_traces(textinfo="label+value")
    else:
        raise ValueError(f"Unknown chart kind {kind!r}; expected one of {CHART_KINDS}")

    fig.update_layout(height=400, margin=dict(l=10, r=10, t=55, b=10))
    return fig
