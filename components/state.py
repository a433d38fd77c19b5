"""Session-state binding between the widgets and the engine assumptions."""

import streamlit as st
from config.default_params import EVENT_DEFAULTS
from engine.models import Assumptions


def state_key(group, field):
    return f"{group}.{field}"


def init_state(defaults=EVENT_DEFAULTS):
    """Seed st.session_state with default assumptions once per session."""
    for group, fields in defaults.items():
        for field, value in fields.items():
            key = state_key(group, field)
            if key not in st.session_state:
                st.session_state[key] = value


def current_assumptions(defaults=EVENT_DEFAULTS):
    """Rebuild the Assumptions record from session state on every rerun."""
    data = {
        group: {field: st.session_state.get(state_key(group, field), value)
                for field, value in fields.items()}
        for group, fields in defaults.items()
    }
    return Assumptions.from_dict(data)
