"""Reader error types and closed-vocabulary errors."""

from dataclasses import dataclass, field
from enum import Enum


class ReaderIssueType(Enum):
    """Kinds of problems found while reading a part."""

    MALFORMED_INPUT = "malformed_input"  # Non-well-formed token, recovered
    READER_FAILURE = "reader_failure"  # Stream cannot be read to completion


@dataclass
class ReaderIssue:
    """A problem found while reading a part."""

    issue_type: ReaderIssueType
    description: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" (line {self.line}, column {self.column})"
        return f"[{self.issue_type.value}]{location}: {self.description}"


class ReaderError(Exception):
    """Exception raised when a part cannot be read back into its typed form."""

    def __init__(self, message: str, issues: list[ReaderIssue] | None = None):
        super().__init__(message)
        self.issues = issues or []


@dataclass(eq=False)
class UnsupportedValueError(ValueError):
    """A wire value outside the modeled subset of a closed vocabulary."""

    vocabulary: str
    value: str
    supported: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Unsupported {self.vocabulary} value '{self.value}'; "
            f"supported values: {self.supported}"
        )
