"""Tests for the commentary classifier."""

from branchreview.classifier import CommentaryClassifier, classify
from branchreview.models import IssueType


def test_error_keyword() -> None:
    items = classify("This has a security issue")
    assert len(items) == 1
    assert items[0].type == IssueType.ERROR
    assert items[0].message == "this has a security issue"


def test_warning_keyword() -> None:
    items = classify("You should refactor this")
    assert len(items) == 1
    assert items[0].type == IssueType.WARNING


def test_no_keyword() -> None:
    assert classify("Looks fine") == []


def test_empty_input() -> None:
    assert classify("") == []


def test_error_wins_over_warning() -> None:
    items = classify("Security concern in the login handler")
    assert [item.type for item in items] == [IssueType.ERROR]


def test_preserves_order_and_duplicates() -> None:
    commentary = (
        "## Review\n"
        "  Consider adding tests.  \n"
        "Possible bug in parser\n"
        "\n"
        "Possible bug in parser\n"
        "Nice naming.\n"
    )
    items = classify(commentary)
    assert [(item.type, item.message) for item in items] == [
        (IssueType.WARNING, "consider adding tests."),
        (IssueType.ERROR, "possible bug in parser"),
        (IssueType.ERROR, "possible bug in parser"),
    ]


def test_substring_match() -> None:
    # "errors" and "Issues" contain the keywords.
    items = classify("No Errors found\nIssues: none")
    assert [item.type for item in items] == [IssueType.ERROR, IssueType.ERROR]


def test_file_and_line_are_not_set() -> None:
    item = classify("bug here")[0]
    assert item.file is None
    assert item.line is None


def test_custom_rules() -> None:
    classifier = CommentaryClassifier({"todo": IssueType.WARNING, "crash": IssueType.ERROR})
    items = classifier.classify("TODO: tidy\nmay crash\nthis bug is ignored")
    assert [item.type for item in items] == [IssueType.WARNING, IssueType.ERROR]


def test_custom_rules_keep_error_priority() -> None:
    classifier = CommentaryClassifier({"slow": IssueType.WARNING, "leak": IssueType.ERROR})
    items = classifier.classify("slow leak")
    assert [item.type for item in items] == [IssueType.ERROR]
