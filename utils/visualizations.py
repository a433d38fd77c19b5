"""Visualization utilities for the event financial planner."""

import plotly.graph_objects as go


def create_stream_profit_chart(streams_df):
    """Create annual profit by stream bar chart, losses in red."""
    colors = ['#fb7185' if p < 0 else '#10b981' for p in streams_df['annual_profit']]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=streams_df['stream'],
        y=streams_df['annual_profit'],
        marker_color=colors,
        name='Annual Profit'
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    fig.update_layout(
        title='Annual Profit by Stream',
        xaxis_title='Stream',
        yaxis_title='Profit ($)',
        height=350
    )
    return fig


def create_revenue_cost_chart(streams_df):
    """Create grouped annual revenue vs cost chart per stream."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=streams_df['stream'],
        y=streams_df['annual_rev'],
        name='Revenue',
        marker_color='green'
    ))
    fig.add_trace(go.Bar(
        x=streams_df['stream'],
        y=streams_df['annual_cost'],
        name='Costs',
        marker_color='red'
    ))
    fig.update_layout(
        title='Annual Revenue vs Costs',
        xaxis_title='Stream',
        yaxis_title='Amount ($)',
        barmode='group',
        height=350
    )
    return fig
