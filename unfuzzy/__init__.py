"""Fuzzy sets, norms, implications, variables, rule-base inference and node networks."""

__version__ = "3.0.0"

__all__ = ["fuzzy_sets", "implications", "inference", "network", "norms", "rule", "variable"]