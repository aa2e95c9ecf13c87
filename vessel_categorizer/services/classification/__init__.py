"""Vessel classification service.

This module provides name-based vessel categorization using:
- Ordered substring rules loaded from config
- First-match-wins evaluation

Key Components:
    - load_rule_set: Build a RuleSet from config entries
    - classify: Pure name -> VesselType | NO_MATCH lookup
"""
from vessel_categorizer.services.classification.loader import load_rule_set
from vessel_categorizer.services.classification.classifier import (
    NO_MATCH,
    NoMatch,
    canonicalize,
    classify,
    match_rule,
)

__all__ = [
    "load_rule_set",
    "NO_MATCH",
    "NoMatch",
    "canonicalize",
    "classify",
    "match_rule",
]
