"""Input and display primitives for the planner page."""

import streamlit as st
from engine.inputs import coerce_number, clamp_count
from utils.formatting import (
    format_input, format_result_amount, result_row_style,
    STYLE_COLORS, SEVERITY_COLORS
)


def _widget_key(key):
    return f"input::{key}"


def _commit(key, clamp):
    """on_change: coerce the typed text and store the number under `key`."""
    widget_key = _widget_key(key)
    coerce = clamp_count if clamp else coerce_number
    value = coerce(st.session_state[widget_key])
    st.session_state[key] = value
    st.session_state[widget_key] = format_input(value)


def _unit_label(label, prefix, suffix):
    unit = " ".join(u for u in (prefix, suffix) if u)
    return f"{label} ({unit})" if unit else label


def number_field(label, key, prefix="$", suffix="", clamp=False):
    """Numeric text input bound to one assumption in session state."""
    widget_key = _widget_key(key)
    if widget_key not in st.session_state:
        st.session_state[widget_key] = format_input(st.session_state[key])
    st.text_input(
        _unit_label(label, prefix, suffix),
        key=widget_key,
        on_change=_commit,
        args=(key, clamp),
    )
    return st.session_state[key]


def readonly_field(label, value, key, prefix="$"):
    """Derived value shown like an input but not editable."""
    widget_key = f"derived::{key}"
    st.session_state[widget_key] = format_input(value)
    st.text_input(
        _unit_label(label, prefix, "readonly"),
        key=widget_key,
        disabled=True,
    )


def toggle_field(label, key):
    return st.toggle(label, key=key)


def result_row(label, value, negative=False, total=False, subtext=""):
    """One breakdown line: label left, absolute dollar amount right."""
    color = STYLE_COLORS[result_row_style(value, negative, total)]
    weight = "700" if total else "400"
    size = "1.1rem" if total else "0.9rem"
    border = "border-top:1px solid #334155;margin-top:0.5rem;padding-top:0.5rem;" if total else ""
    sub = f"<div style='font-size:0.65rem;color:#475569'>{subtext}</div>" if subtext else ""
    st.markdown(
        f"<div style='display:flex;justify-content:space-between;align-items:flex-end;{border}'>"
        f"<div><span style='font-weight:{weight}'>{label}</span>{sub}</div>"
        f"<span style='font-family:monospace;font-size:{size};color:{color}'>"
        f"{format_result_amount(value, negative)}</span></div>",
        unsafe_allow_html=True,
    )


def stat_box(label, value, sub_value=None):
    st.metric(label, value)
    if sub_value:
        st.caption(sub_value)


def analysis_point(advisory):
    """Render one advisory coloured by its severity."""
    background, text = SEVERITY_COLORS[advisory.severity]
    st.markdown(
        f"<div style='background:{background};color:{text};padding:0.75rem 1rem;"
        f"border-radius:0.5rem;margin-bottom:0.5rem'>"
        f"<strong>{advisory.title}</strong><br>"
        f"<span style='font-size:0.8rem;opacity:0.8'>{advisory.message}</span></div>",
        unsafe_allow_html=True,
    )
