import streamlit as st
import uuid
from src.core.config import SETTINGS
from src.utils.logging import setup_logging, set_log_context
from src.pages import population

# Setup logging
setup_logging(SETTINGS.log_level)

st.set_page_config(page_title="Модель динамики популяций", layout="wide")

# Session initialization
def _init_session() -> None:
    st.session_state.setdefault("session_id", str(uuid.uuid4()))
    st.session_state.setdefault("run_id", 0)

_init_session()
st.session_state["run_id"] += 1
set_log_context(session_id=st.session_state["session_id"], run_id=st.session_state["run_id"])

population.render()

with st.sidebar:
    st.caption(f"Session: {st.session_state['session_id']}")
    st.caption(f"Env: {SETTINGS.env}")
