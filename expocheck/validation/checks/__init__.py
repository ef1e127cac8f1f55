"""
Check Implementations

The declarative check table, assembled from the individual check modules.
"""

from typing import Tuple

from ...config.models import ValidationProfile
from ..models import Check
from .files import file_checks
from .layout import layout_checks
from .manifest import manifest_checks, strip_range_qualifier, versions_match


def build_checks(profile: ValidationProfile) -> Tuple[Check, ...]:
    """
    Build the ordered check table for a profile.

    Order is the presentation order of the report.
    """
    checks = []
    checks.extend(manifest_checks(profile))
    checks.extend(file_checks(profile))
    checks.extend(layout_checks(profile))

    ids = [c.id for c in checks]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate check ids: {', '.join(duplicates)}")

    return tuple(checks)


__all__ = [
    "build_checks",
    "manifest_checks",
    "file_checks",
    "layout_checks",
    "strip_range_qualifier",
    "versions_match",
]
