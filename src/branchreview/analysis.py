"""Composition of the diff parsers and the commentary classifier."""

from branchreview.classifier import CommentaryClassifier, classify
from branchreview.diff_parser import DEFAULT_EXCERPT_LIMIT, parse_details, parse_summary
from branchreview.models import AnalysisResult


def analyze(
    stat_text: str,
    diff_text: str,
    ai_analysis: str,
    excerpt_limit: int = DEFAULT_EXCERPT_LIMIT,
    classifier: CommentaryClassifier | None = None,
) -> AnalysisResult:
    """Build an AnalysisResult from raw `--stat` output, diff output and commentary.

    Pure function: no I/O, same inputs give the same result.
    """
    errors_warnings = (
        classifier.classify(ai_analysis) if classifier else classify(ai_analysis)
    )
    return AnalysisResult(
        diff_summary=parse_summary(stat_text),
        file_changes=parse_details(diff_text, excerpt_limit=excerpt_limit),
        ai_analysis=ai_analysis,
        errors_warnings=errors_warnings,
    )
