"""Keyword heuristics that tag review commentary as errors or warnings."""

from typing import Iterable, List, Mapping

from branchreview.models import ErrorWarningItem, IssueType


ERROR_KEYWORDS = ("error", "bug", "issue", "problem", "security", "vulnerability")
WARNING_KEYWORDS = ("warning", "concern", "consider", "should", "recommend")

# Kinds are checked in this order; the first kind with a matching keyword wins.
_PRIORITY = (IssueType.ERROR, IssueType.WARNING)


def default_rules() -> dict[str, IssueType]:
    rules = {keyword: IssueType.ERROR for keyword in ERROR_KEYWORDS}
    rules.update({keyword: IssueType.WARNING for keyword in WARNING_KEYWORDS})
    return rules


class CommentaryClassifier:
    """Tags each line of free-text commentary using a keyword -> kind rule set.

    A line matching keywords of both kinds is tagged as an error.
    """

    def __init__(self, rules: Mapping[str, IssueType] | None = None) -> None:
        rules = default_rules() if rules is None else rules
        self._keywords: dict[IssueType, tuple[str, ...]] = {
            kind: tuple(k.lower() for k, v in rules.items() if v == kind)
            for kind in _PRIORITY
        }

    def classify(self, commentary: str) -> List[ErrorWarningItem]:
        items = []
        for line in commentary.lower().split("\n"):
            kind = self._match(line)
            if kind is not None:
                items.append(ErrorWarningItem(type=kind, message=line.strip()))
        return items

    def _match(self, line: str) -> IssueType | None:
        for kind in _PRIORITY:
            if _contains_any(line, self._keywords[kind]):
                return kind
        return None


def _contains_any(line: str, keywords: Iterable[str]) -> bool:
    return any(keyword in line for keyword in keywords)


_default_classifier = CommentaryClassifier()


def classify(commentary: str) -> List[ErrorWarningItem]:
    """Classify commentary with the default keyword rules."""
    return _default_classifier.classify(commentary)
