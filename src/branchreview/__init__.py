"""Branch diff analysis with local LLM review."""

from branchreview.analysis import analyze
from branchreview.classifier import CommentaryClassifier, classify
from branchreview.diff_parser import parse_details, parse_summary

__all__ = [
    "CommentaryClassifier",
    "analyze",
    "classify",
    "parse_details",
    "parse_summary",
]
