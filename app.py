import streamlit as st

from core.config import get_settings
from core.context import DashboardState
from core.logs import setup_logging
from services.sources import source_from_setting
from ui.navigation import forecast_target, navbar
from views.forecast import ForecastView
from views.performance import PerformanceView
from views.recommendations import RecommendationView

st.set_page_config(page_title="Min/Max Dashboard", layout="wide", initial_sidebar_state="collapsed")

STATE_KEY = "dashboard_state"

def get_state(settings) -> DashboardState:
    # un estado por sesión; se descarta con la sesión
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState(capabilities=settings.capabilities())
    return st.session_state[STATE_KEY]

def main():
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    state = get_state(settings)

    # Detalle de pronóstico direccionado por query params
    target = forecast_target()
    if target:
        ForecastView(*target).render()
        return

    section = navbar()
    if section == "Min/Max":
        source = source_from_setting(settings.DATA_SOURCE, timeout=settings.HTTP_TIMEOUT)
        RecommendationView(state, source).render()
    else:
        PerformanceView().render()

if __name__ == "__main__":
    main()
