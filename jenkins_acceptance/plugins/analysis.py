from __future__ import annotations

from enum import Enum


class AnalysisPlugin(str, Enum):
    """Static-analysis plugins that report on a job page; values are display names."""

    CHECKSTYLE = "Checkstyle"
    DRY = "Duplicate Code"
    FINDBUGS = "FindBugs"
    PMD = "PMD"
    TASKS = "Open Tasks"
    WARNINGS = "Compiler Warnings"

    @property
    def display_name(self) -> str:
        return self.value
