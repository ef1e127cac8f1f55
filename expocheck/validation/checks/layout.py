"""
Project Layout Validation

Checks the app directory convention and the root layout's stylesheet import.
"""

from typing import Iterator, List

from ...config.models import LayoutConfig, ValidationProfile
from ..models import Check, CheckSeverity, Outcome, Verdict
from ..project import ProjectFiles, first_existing


def layout_checks(profile: ValidationProfile) -> List[Check]:
    """
    Build the layout checks for a profile.

    Args:
        profile: Active validation profile

    Returns:
        Checks in declaration order
    """
    if profile.layout is None:
        return []

    layout = profile.layout
    return [
        directory_convention_check(layout),
        ambiguous_layout_check(layout),
        layout_import_check(layout),
    ]


def directory_convention_check(layout: LayoutConfig) -> Check:
    """
    Preferred directory, then legacy fallback, then failure.

    With the preferred directory present, each required file inside it
    is reported on its own; the directory itself gets no entry.
    """

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if project.is_dir(layout.preferred):
            for filename in layout.required_files:
                path = f"{layout.preferred}/{filename}"
                if project.is_file(path):
                    yield Verdict(True, f"Found: {path}", check_id=path)
                else:
                    yield Verdict(False, f"Missing: {path}", check_id=path)
        elif project.is_dir(layout.fallback):
            yield Verdict(
                False,
                f"Using {layout.fallback}/ instead of {layout.preferred}/ "
                f"({layout.preferred}/ recommended)",
                outcome=Outcome.WARN,
            )
        else:
            yield Verdict(
                False,
                f"No app directory found (need {layout.preferred}/ or {layout.fallback}/)",
            )

    return Check(
        id="layout",
        severity=CheckSeverity.REQUIRED,
        description=f"App directory convention ({layout.preferred}/)",
        predicate=predicate,
    )


def ambiguous_layout_check(layout: LayoutConfig) -> Check:
    """Warn when both app directories exist; reported on top of the convention check."""

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if project.is_dir(layout.preferred) and project.is_dir(layout.fallback):
            yield Verdict(
                False,
                f"Both {layout.preferred}/ and {layout.fallback}/ exist - "
                f"may cause routing confusion",
            )

    return Check(
        id="layout:ambiguous",
        severity=CheckSeverity.OPTIONAL,
        description="Single app directory",
        predicate=predicate,
    )


def layout_import_check(layout: LayoutConfig) -> Check:
    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        entry = first_existing(project, layout.entry_candidates)
        if entry is None:
            return
        if project.contains(entry, layout.import_needle):
            yield Verdict(True, f"{layout.import_needle} imported in {entry}")
        else:
            yield Verdict(False, f"{layout.import_needle} not imported in {entry}")

    return Check(
        id=f"import:{layout.import_needle}",
        severity=CheckSeverity.REQUIRED,
        description=f"Root layout imports {layout.import_needle}",
        predicate=predicate,
    )
