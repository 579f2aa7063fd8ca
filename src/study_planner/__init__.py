"""Adaptive daily study planner."""
