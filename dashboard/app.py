"""Weather Dashboard — Streamlit + Plotly + OpenWeatherMap API."""

from __future__ import annotations

import asyncio

import plotly.graph_objects as go
import streamlit as st

from shared import (
    FORECAST_CARD_SLICE,
    HUMIDITY_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    TEMP_COLOR,
    OpenWeatherRepository,
    SearchError,
    SearchResult,
    SearchService,
    SearchState,
    Settings,
    format_hour,
    format_local_datetime,
    format_percent,
    format_temperature,
    format_wind,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Dashboard",
    page_icon="\U0001f324️",
    layout="centered",
)

settings = Settings.from_env()
state: SearchState = st.session_state.setdefault("search_state", SearchState())


async def _run_search(query: str) -> SearchResult:
    async with OpenWeatherRepository.from_settings(settings) as repo:
        return await SearchService(repo).search(query)


# ── Header & search form ─────────────────────────────────────────────────────

st.title("Weather Dashboard")
st.caption("Real-time weather conditions and hourly forecasts for any city worldwide")

with st.form("search", clear_on_submit=False):
    query = st.text_input("City", placeholder="Enter city name...")
    submitted = st.form_submit_button("Search")

if submitted:
    state = state.begin(query)
    with st.spinner("Searching..."):
        try:
            result = asyncio.run(_run_search(query))
        except SearchError as exc:
            state = state.fail(exc)
            st.toast(str(exc), icon="⚠️")
        else:
            state = state.succeed(result)
            if result.source == "demo":
                st.toast(
                    f"Showing demo data for {result.current.name}. "
                    "Add your OpenWeatherMap API key for real data."
                )
            else:
                st.toast(f"Showing weather for {result.current.name}, {result.current.country}")
    st.session_state["search_state"] = state


# ── Error ────────────────────────────────────────────────────────────────────

if state.error:
    st.error(state.error)
    if st.button("Try Again"):
        st.session_state["search_state"] = state.clear_error()
        st.rerun()
    st.stop()


# ── Empty state ──────────────────────────────────────────────────────────────

if state.result is None:
    st.subheader("Ready to explore the weather?")
    st.write('Enter any city name above to get started, or type "demo" to see sample data.')
    if not settings.has_real_key:
        st.info("Set OPENWEATHER_API_KEY in the environment for real weather data.")
    st.stop()


current = state.result.current
forecast = state.result.forecast


# ── Current conditions ───────────────────────────────────────────────────────

header_cols = st.columns([1, 4])
with header_cols[0]:
    st.image(current.condition.icon_url, width=100)
with header_cols[1]:
    st.markdown(
        f"# {current.name}, {current.country or ''}"
        f"  \n{format_local_datetime(current.dt, current.timezone)}"
        f"  \n**{current.condition.description.capitalize()}**"
    )

kpi1, kpi2, kpi3, kpi4 = st.columns(4)
kpi1.metric(
    "Temperature", format_temperature(current.main.temp),
    delta=f"Feels like {format_temperature(current.main.feels_like)}", delta_color="off",
)
kpi2.metric("Humidity", format_percent(current.main.humidity))
kpi3.metric("Wind", format_wind(current.wind.speed, current.wind.deg))
kpi4.metric("Pressure", f"{current.main.pressure:.0f} hPa")

sun_cols = st.columns(3)
if current.sys.sunrise is not None:
    sun_cols[0].metric("Sunrise", format_hour(current.sys.sunrise, current.timezone))
if current.sys.sunset is not None:
    sun_cols[1].metric("Sunset", format_hour(current.sys.sunset, current.timezone))
if current.visibility is not None:
    sun_cols[2].metric("Visibility", f"{current.visibility / 1000:.1f} km")


# ── Hourly forecast ──────────────────────────────────────────────────────────

st.subheader("Hourly Forecast")

cards = forecast.points[FORECAST_CARD_SLICE]
for col, point in zip(st.columns(max(len(cards), 1)), cards):
    with col:
        st.caption(format_hour(point.dt, forecast.city.timezone))
        st.image(point.condition.icon_url, width=48)
        st.markdown(f"**{format_temperature(point.main.temp)}**")
        st.caption(f"Humidity {format_percent(point.main.humidity)}")
        st.caption(point.condition.description)

times = [format_hour(p.dt, forecast.city.timezone) for p in forecast.points]
fig = go.Figure()
fig.add_trace(go.Scatter(
    x=times, y=[p.main.temp for p in forecast.points],
    name="Temperature (°C)", mode="lines+markers", line=dict(color=TEMP_COLOR),
))
fig.add_trace(go.Bar(
    x=times, y=[p.main.humidity for p in forecast.points],
    name="Humidity (%)", yaxis="y2", marker_color=HUMIDITY_COLOR, opacity=0.35,
))
fig.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    yaxis=dict(title="°C"),
    yaxis2=dict(title="%", overlaying="y", side="right", range=[0, 100]),
    legend=dict(orientation="h", y=1.1),
    height=320,
)
st.plotly_chart(fig, use_container_width=True)

if state.result.source == "demo":
    st.caption("Demo data: readings are randomly varied around a fixed base.")
