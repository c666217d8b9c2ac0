"""Classifier module for zone asset classification."""

from .classifier import (
    AssetClassifier,
    ClassificationResult,
    classify,
    classify_and_format,
)
from .rules import RULES, Rule, match_rule

__all__ = [
    "AssetClassifier",
    "ClassificationResult",
    "classify",
    "classify_and_format",
    "Rule",
    "RULES",
    "match_rule",
]
