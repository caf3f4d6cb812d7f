from __future__ import annotations

from typing import Dict

import pandas as pd
import streamlit as st

from src.core.config import PARAMETER_FIELDS, SETTINGS
from src.core.schemas import ModelParameters, Projection
from src.utils.cache import ProjectionCache
from src.utils.logging import get_logger
from src.utils.population_engine import run_projection
from src.utils.presentation import build_figure, row_style, table_frame
from src.utils.summary import sustainability_report
from src.utils.validators import FIELD_LABELS, InvalidParameterError, check_policy_bounds, parse_number

logger = get_logger("pages.population")

_VALUES_KEY = "_param_values"
_ERRORS_KEY = "_param_errors"


@st.cache_resource
def _projection_cache() -> ProjectionCache:
    return ProjectionCache(max_items=SETTINGS.cache_max_items)


def _text_key(name: str) -> str:
    return f"{name}_text"


def _slider_key(name: str) -> str:
    return f"{name}_slider"


def _clamp_to_slider(name: str, value: float) -> float:
    lo, hi, _ = SETTINGS.bounds[name]
    return float(min(max(value, lo), hi))


def _init_state() -> None:
    if _VALUES_KEY in st.session_state:
        return
    values = {name: float(SETTINGS.defaults[name]) for name in PARAMETER_FIELDS}
    st.session_state[_VALUES_KEY] = values
    st.session_state[_ERRORS_KEY] = {}
    for name, v in values.items():
        st.session_state[_text_key(name)] = f"{v:g}"
        st.session_state[_slider_key(name)] = _clamp_to_slider(name, v)


def _on_text_change(name: str) -> None:
    raw = st.session_state[_text_key(name)]
    errors: Dict[str, str] = st.session_state[_ERRORS_KEY]
    try:
        value = parse_number(raw, name)
    except InvalidParameterError as e:
        # keep the last valid value; the field shows the error instead
        errors[name] = str(e)
        logger.info(f"param_rejected field={name} raw={raw!r}")
        return

    errors.pop(name, None)
    st.session_state[_VALUES_KEY][name] = value
    st.session_state[_slider_key(name)] = _clamp_to_slider(name, value)
    logger.info(f"param_changed field={name} value={value:g} source=text")


def _on_slider_change(name: str) -> None:
    value = float(st.session_state[_slider_key(name)])
    st.session_state[_ERRORS_KEY].pop(name, None)
    st.session_state[_VALUES_KEY][name] = value
    st.session_state[_text_key(name)] = f"{value:g}"
    logger.info(f"param_changed field={name} value={value:g} source=slider")


def _render_parameters() -> None:
    st.subheader("Параметры модели")
    errors: Dict[str, str] = st.session_state[_ERRORS_KEY]
    for name in PARAMETER_FIELDS:
        lo, hi, step = SETTINGS.bounds[name]
        st.text_input(
            FIELD_LABELS[name],
            key=_text_key(name),
            on_change=_on_text_change,
            args=(name,),
        )
        st.slider(
            FIELD_LABELS[name],
            min_value=float(lo),
            max_value=float(hi),
            step=float(step),
            key=_slider_key(name),
            on_change=_on_slider_change,
            args=(name,),
            label_visibility="collapsed",
        )
        if name in errors:
            st.error(errors[name])


def _style_row(row: pd.Series):
    return [row_style(int(row.name), bool(row["critical"]))] * len(row)


def _render_table(proj: Projection) -> None:
    st.subheader("Таблица динамики популяции")
    df = table_frame(proj)
    styler = df.style.apply(_style_row, axis=1).hide(axis="columns", subset=["critical"])
    st.dataframe(styler, use_container_width=True, hide_index=True)


def _render_alert(proj: Projection) -> None:
    report = sustainability_report(proj)
    if report.level == "warning":
        st.warning(report.message, icon="⚠️")
    else:
        st.success(report.message, icon="✅")


def _render_about() -> None:
    with st.container(border=True):
        st.subheader("О модели")
        st.markdown(
            "**Модель неограниченного роста с отловом** позволяет изучать динамику численности "
            "популяций промысловых рыб с учетом ежегодного прироста и отлова.\n\n"
            "**Формула расчета:** Количество рыбы в году N = (Количество в году N-1) × (1 + Прирост%) - Отлов\n\n"
            "**Критический минимум** — это наименьший запас рыбы, при котором популяция становится "
            "невосстановимой. Если запас опускается ниже этого уровня, популяция деградирует."
        )


def render() -> None:
    _init_state()

    st.title("Модель динамики популяций")
    st.caption("Исследование развития биосистем с учетом роста и отлова промысловых рыб")

    col_l, col_r = st.columns([0.35, 0.65], gap="large")

    with col_l:
        _render_parameters()

    params = ModelParameters(**st.session_state[_VALUES_KEY])
    proj = run_projection(params, cache=_projection_cache(), years=SETTINGS.horizon_years)

    with col_r:
        st.subheader("График динамики популяции")
        st.plotly_chart(build_figure(proj), use_container_width=True)
        for w in check_policy_bounds(params, SETTINGS.bounds).warnings:
            st.caption(w.message)

    _render_alert(proj)
    _render_table(proj)
    _render_about()
