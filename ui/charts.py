import pandas as pd
import altair as alt
import streamlit as st

def trend_chart(trend: pd.DataFrame, title: str):
    """
    Espera columnas:
      - month (YYYY-MM)
      - value
    """
    if trend is None or trend.empty:
        st.info("No trend data.")
        return
    chart = (
        alt.Chart(trend)
        .mark_line(point=True, color="#00B8F0")
        .encode(
            x=alt.X("month:N", title="Month", sort=None),
            y=alt.Y("value:Q", title=title, scale=alt.Scale(zero=False)),
            tooltip=["month:N", alt.Tooltip("value:Q", format=",.2f")],
        )
        .properties(height=320)
    )
    st.altair_chart(chart, use_container_width=True)

def forecast_chart(long_df: pd.DataFrame):
    """
    Espera formato largo:
      - month, series ("Actual Sales" | "Forecast"), units, order
    """
    if long_df is None or long_df.empty:
        st.info("No forecast data.")
        return
    month_order = list(dict.fromkeys(long_df.sort_values("order", kind="stable")["month"]))
    chart = (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("month:N", title="Month", sort=month_order, axis=alt.Axis(labelAngle=-45)),
            y=alt.Y("units:Q", title="Units"),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(domain=["Actual Sales", "Forecast"], range=["#00B8F0", "#9333EA"]),
            ),
            strokeDash=alt.StrokeDash(
                "series:N",
                scale=alt.Scale(domain=["Actual Sales", "Forecast"], range=[[1, 0], [5, 5]]),
                legend=None,
            ),
            tooltip=["month:N", "series:N", "units:Q"],
        )
        .properties(height=480)
    )
    st.altair_chart(chart, use_container_width=True)
