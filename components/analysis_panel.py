"""Advisory panel component."""

import streamlit as st
from engine.advisory import evaluate
from components.widgets import analysis_point


def render_analysis_panel(res):
    """Render every advisory that fires for the current projection."""
    with st.container(border=True):
        st.subheader("💡 Analysis")
        for advisory in evaluate(res):
            analysis_point(advisory)
