"""Aggregation engine, trend deltas and the insight selector."""

from hrmetrics.metrics.engine import DerivedMetrics, compute_metrics
from hrmetrics.metrics.trends import TrendBaseline, TrendDelta, calc_trend
from hrmetrics.metrics.insights import Insight, select_alerts, select_insights, top_department
