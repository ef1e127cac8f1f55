"""
Project Validation Module

Read-only health checks for a scaffolded Expo project.
"""

from .models import Check, CheckResult, CheckSeverity, Outcome, Report, ReportStatus, Verdict
from .project import ManifestError, ProjectFiles, first_existing
from .checker import ConfigValidator
from .checks import build_checks, strip_range_qualifier, versions_match

__all__ = [
    "ConfigValidator",
    "Check",
    "CheckResult",
    "CheckSeverity",
    "Outcome",
    "Report",
    "ReportStatus",
    "Verdict",
    "ManifestError",
    "ProjectFiles",
    "first_existing",
    "build_checks",
    "strip_range_qualifier",
    "versions_match",
]
