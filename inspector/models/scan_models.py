"""
Request/Response Models — API contract schemas and tagged failures.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    EMPTY_PATH = "empty_path"
    NOT_FOUND = "not_found"
    TOO_LARGE = "too_large"
    UNREADABLE = "unreadable"
    DECODE_ERROR = "decode_error"


class AnalysisFailure(BaseModel):
    """Tagged failure returned instead of raising for bad input."""

    path: str
    error: FailureKind
    detail: str = ""


class AnalyzeFileRequest(BaseModel):
    path: str = Field(..., description="Path of the file to analyze")


class AnalyzeContentRequest(BaseModel):
    """A file submitted inline, bypassing the file reader."""

    path: str = Field(default="inline.php", description="Path used to label the report")
    content: str = Field(..., description="File source content")


class AnalyzeTreeRequest(BaseModel):
    root: str = Field(..., description="Directory to scan")
    pattern: str | None = Field(
        default=None, description="Glob filter; defaults to the configured source extension"
    )
    recursive: bool = True


class DiagnoseRequest(BaseModel):
    error_message: str = Field(..., min_length=1)
    file: str = ""
    line: int = Field(default=1, ge=1)


class SnippetRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Code snippet without the opening tag")
