from __future__ import annotations

import pandas as pd
import streamlit as st
import altair as alt
from dotenv import load_dotenv

from sales_pipeline.formatting import format_currency, format_percent, trend_points
from sales_pipeline.logging_config import configure_logging
from sales_pipeline.models import DashboardState, LoadStatus
from sales_pipeline.pipeline import load_dashboard

COLORS = ["#2563eb", "#16a34a", "#eab308", "#dc2626"]

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Furniture Sales Dashboard", layout="wide")
st.title("Furniture Sales Dashboard")

load_dotenv()
configure_logging(None)


@st.cache_data(show_spinner="Loading sales data...")
def load_state() -> DashboardState:
    """Run ingestion and aggregation once per session cache."""
    return load_dashboard()


state = load_state()

if state.status is not LoadStatus.READY or state.data is None:
    # only READY results stay cached so a reload retries ingestion
    load_state.clear()
    st.error(state.error or "Failed to load dashboard data. Please try again later.")
    st.stop()

data = state.data

# =====================================================
# SECTION 0 — KEY METRICS
# =====================================================
agg = data.aggregate
c1, c2, c3, c4 = st.columns(4)
with c1:
    st.metric("Total Sales", format_currency(agg.total_sales))
with c2:
    st.metric("Total Profit", format_currency(agg.total_profit))
with c3:
    st.metric("Total Orders", f"{agg.total_orders:,}")
with c4:
    st.metric("Avg Order Value", format_currency(agg.avg_order_value))

st.divider()

left, right = st.columns(2)

# =====================================================
# SECTION 1 — YEARLY SALES TREND
# =====================================================
df_yearly = pd.DataFrame([y.model_dump() for y in data.yearly_summaries])

with left:
    st.header("Yearly Sales Trend")
    chart_yearly = (
        alt.Chart(df_yearly)
        .mark_line(point=True, color=COLORS[0], strokeWidth=2)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("total_sales:Q", title="Sales", axis=alt.Axis(format="$,.0f")),
            tooltip=["year:O", alt.Tooltip("total_sales:Q", format="$,.0f")],
        )
        .properties(height=320)
    )
    st.altair_chart(chart_yearly, width="stretch")

# =====================================================
# SECTION 2 — SALES BY SUB-CATEGORY
# =====================================================
df_sub = pd.DataFrame([s.model_dump() for s in data.sub_category_summaries])

with right:
    st.header("Sales by Sub-Category")
    chart_sub = (
        alt.Chart(df_sub)
        .mark_arc(outerRadius=120)
        .encode(
            theta=alt.Theta("total_sales:Q"),
            color=alt.Color("name:N", title="Sub-Category", scale=alt.Scale(range=COLORS)),
            tooltip=["name:N", alt.Tooltip("total_sales:Q", format="$,.0f"), "order_count:Q"],
        )
        .properties(height=320)
    )
    st.altair_chart(chart_sub, width="stretch")

# =====================================================
# SECTION 3 — SUB-CATEGORY TRENDS
# =====================================================
st.header("Sub-Category Trends")

# Null sales points are drawn as breaks in the line
df_trend = pd.DataFrame(trend_points(data.trend_rows))

chart_trend = (
    alt.Chart(df_trend)
    .mark_line(point=True, strokeWidth=2, invalid=None)
    .encode(
        x=alt.X("year:O", title="Year"),
        y=alt.Y("sales:Q", title="Sales", axis=alt.Axis(format="$,.0f")),
        color=alt.Color("sub_category:N", title="Sub-Category", scale=alt.Scale(range=COLORS)),
        tooltip=["year:O", "sub_category:N", alt.Tooltip("sales:Q", format="$,.0f")],
    )
    .properties(height=320)
)
st.altair_chart(chart_trend, width="stretch")

# =====================================================
# SECTION 4 — YEARLY TABLE
# =====================================================
st.header("Year over Year")

st.dataframe(
    pd.DataFrame(
        [
            {
                "Year": y.year,
                "Sales": format_currency(y.total_sales),
                "Profit": format_currency(y.total_profit),
                "Orders": y.order_count,
                "Avg Order Value": format_currency(y.avg_order_value),
                "Sales Growth": format_percent(y.sales_growth_pct),
                "Profit Growth": format_percent(y.profit_growth_pct),
            }
            for y in data.yearly_summaries
        ]
    ),
    width="stretch",
    hide_index=True,
)
