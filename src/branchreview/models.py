from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LineType(str, Enum):
    """Type of line in a diff."""
    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"


class IssueType(str, Enum):
    """Kind of finding extracted from review commentary."""
    ERROR = "error"
    WARNING = "warning"


class DiffSummary(BaseModel):
    """Aggregate counts from the `git diff --stat` footer."""
    model_config = ConfigDict(frozen=True)

    files_changed: int = Field(default=0, ge=0)
    insertions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)


class LineChange(BaseModel):
    """A single line inside a file's hunks."""
    model_config = ConfigDict(frozen=True)

    old_line_number: int | None = None
    new_line_number: int | None = None
    type: LineType
    content: str


class FileChange(BaseModel):
    """A file touched by the diff."""
    model_config = ConfigDict(frozen=True)

    path: str
    insertions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    changes: int = Field(ge=0)
    diff: str
    line_changes: list[LineChange] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_changes(self) -> "FileChange":
        if self.changes != self.insertions + self.deletions:
            raise ValueError("changes must equal insertions + deletions")
        return self


class ErrorWarningItem(BaseModel):
    """An error or warning tagged in the review commentary."""
    model_config = ConfigDict(frozen=True)

    type: IssueType
    message: str
    file: str | None = None
    line: int | None = None


class AnalysisResult(BaseModel):
    """Complete result of analysing one diff."""
    model_config = ConfigDict(frozen=True)

    diff_summary: DiffSummary
    file_changes: list[FileChange]
    ai_analysis: str
    errors_warnings: list[ErrorWarningItem]


class AnalyzeBranchRequest(BaseModel):
    """Request to review the difference between two branches."""
    project_path: str | None = None
    main_branch: str | None = None
    feature_branch: str | None = None
    ollama_url: str | None = None
    ollama_model: str | None = None
    excluded_folders: list[str] = Field(default_factory=list)


class AnalyzeTextRequest(BaseModel):
    """Request to analyse already captured git and model output."""
    stat_text: str = ""
    diff_text: str = ""
    ai_analysis: str = ""


class AnalyzeBranchResponse(AnalysisResult):
    """Branch review result as returned over HTTP."""
    status: str = "completed"
