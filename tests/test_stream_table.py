"""Test the per-stream DataFrame and charts built from it"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine.models import Assumptions
from engine.compute import compute, stream_table, STREAM_LABELS
from utils.visualizations import create_stream_profit_chart, create_revenue_cost_chart

def test_one_row_per_stream():
    df = stream_table(compute(Assumptions()))
    assert list(df["stream"]) == list(STREAM_LABELS.values())
    assert list(df.columns) == ["stream", "annual_rev", "annual_cost", "annual_profit", "monthly_profit"]

def test_profit_column_sums_to_grand_total():
    res = compute(Assumptions())
    df = stream_table(res)
    assert abs(df["annual_profit"].sum() - res["totals"]["annual_profit"]) < 1e-6
    assert abs(df["monthly_profit"].sum() - res["totals"]["monthly_avg"]) < 1e-6

def test_revenue_minus_cost_equals_profit():
    df = stream_table(compute(Assumptions()))
    for _, row in df.iterrows():
        assert abs(row["annual_rev"] - row["annual_cost"] - row["annual_profit"]) < 1e-6

def test_charts_have_one_bar_per_stream():
    df = stream_table(compute(Assumptions()))
    profit_fig = create_stream_profit_chart(df)
    assert len(profit_fig.data) == 1
    assert len(profit_fig.data[0].x) == 4

    rc_fig = create_revenue_cost_chart(df)
    assert [t.name for t in rc_fig.data] == ["Revenue", "Costs"]
