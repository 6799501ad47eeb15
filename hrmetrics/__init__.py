"""Workforce metrics aggregation and report assembly."""
