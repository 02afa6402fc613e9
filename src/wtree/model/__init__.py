"""Core data models for wtree."""

from .artifacts import CopyResult, SourceSelection
from .commands import (
    AddResult,
    AnalyzeResult,
    ArtifactStatus,
    CleanItem,
    CleanResult,
    DoctorCheck,
    DoctorResult,
    InitResult,
    ListResult,
    RemoveResult,
    RestoreResult,
    WorktreeListing,
)
from .detection import DetectionResult

__all__ = [
    "AddResult",
    "AnalyzeResult",
    "ArtifactStatus",
    "CleanItem",
    "CleanResult",
    "CopyResult",
    "DetectionResult",
    "DoctorCheck",
    "DoctorResult",
    "InitResult",
    "ListResult",
    "RemoveResult",
    "RestoreResult",
    "SourceSelection",
    "WorktreeListing",
]
