"""
Validation Models

Shared data types for project validation.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .project import ProjectFiles


class CheckSeverity(str, Enum):
    """How a failed check is counted."""
    REQUIRED = "required"
    OPTIONAL = "optional"


class Outcome(str, Enum):
    """Outcome of a single report entry."""
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class ReportStatus(str, Enum):
    """Overall status of a validation run."""
    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed_with_warnings"
    FAILED = "failed"


@dataclass(frozen=True)
class Verdict:
    """
    One finding produced by a check predicate.

    The outcome is normally derived from `ok` and the owning check's
    severity. `outcome` pins it explicitly, e.g. a legacy layout that is
    reported as a warning under a required check.
    """
    ok: bool
    message: str
    outcome: Optional[Outcome] = None
    check_id: Optional[str] = None
    details: Tuple[str, ...] = ()


Predicate = Callable[["ProjectFiles"], Iterable[Verdict]]


@dataclass(frozen=True)
class Check:
    """A named, declarative unit of verification."""
    id: str
    severity: CheckSeverity
    description: str
    predicate: Predicate = field(repr=False, compare=False)

    def outcome_for(self, verdict: Verdict) -> Outcome:
        """Map a verdict onto an outcome under this check's severity."""
        if verdict.outcome is not None:
            return verdict.outcome
        if verdict.ok:
            return Outcome.PASS
        if self.severity == CheckSeverity.REQUIRED:
            return Outcome.FAIL
        return Outcome.WARN


@dataclass(frozen=True)
class CheckResult:
    """A single entry of a validation report."""
    check_id: str
    outcome: Outcome
    message: str
    details: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.check_id,
            "outcome": self.outcome.value,
            "message": self.message,
            "details": list(self.details),
        }

    def __str__(self) -> str:
        return f"[{self.outcome.name}] {self.check_id}: {self.message}"


@dataclass(frozen=True)
class Report:
    """
    Result of running every check once against a project.

    Totals are always derived from the entries, so they cannot drift
    from what the report actually contains.
    """
    results: Tuple[CheckResult, ...]
    project_root: Optional[Path] = None
    fatal: bool = False

    @property
    def errors(self) -> List[CheckResult]:
        """Get all failed entries."""
        return [r for r in self.results if r.outcome == Outcome.FAIL]

    @property
    def warnings(self) -> List[CheckResult]:
        """Get all warning entries."""
        return [r for r in self.results if r.outcome == Outcome.WARN]

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def passed_count(self) -> int:
        return len([r for r in self.results if r.passed])

    @property
    def passed(self) -> bool:
        """True when no entry failed; warnings are allowed."""
        return self.error_count == 0

    @property
    def clean(self) -> bool:
        """True when there are neither errors nor warnings."""
        return self.error_count == 0 and self.warning_count == 0

    @property
    def status(self) -> ReportStatus:
        if self.error_count > 0:
            return ReportStatus.FAILED
        if self.warning_count > 0:
            return ReportStatus.PASSED_WITH_WARNINGS
        return ReportStatus.PASSED

    @property
    def exit_code(self) -> int:
        """Process exit code: the error count, clamped to what POSIX can carry."""
        return min(self.error_count, 255)

    def summary(self) -> str:
        """Get summary string."""
        total = len(self.results)
        status = {
            ReportStatus.FAILED: "FAILED",
            ReportStatus.PASSED_WITH_WARNINGS: "PASSED with warnings",
            ReportStatus.PASSED: "PASSED",
        }[self.status]

        return (
            f"{status}: {self.passed_count}/{total} checks passed "
            f"({self.error_count} errors, {self.warning_count} warnings)"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_root": str(self.project_root) if self.project_root else None,
            "status": self.status.value,
            "fatal": self.fatal,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "results": [r.to_dict() for r in self.results],
        }
