class BranchReviewError(RuntimeError):
    """Base class for failures outside the parsing pipeline."""


class GitCommandError(BranchReviewError):
    """A git invocation failed."""


class DiffTooLargeError(GitCommandError):
    """Diff output exceeded the configured size limit."""


class OllamaError(BranchReviewError):
    """The Ollama server could not produce a response."""


class OllamaConnectionError(OllamaError):
    """The Ollama server could not be reached."""
