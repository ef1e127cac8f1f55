"""
Manifest Validation

Checks the entry point and dependency mappings declared in the manifest.
"""

from typing import Iterator, List

from ...config.models import ValidationProfile, VersionPairConfig
from ..models import Check, CheckSeverity, Verdict
from ..project import ProjectFiles

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")
RANGE_QUALIFIERS = "^~"


def manifest_checks(profile: ValidationProfile) -> List[Check]:
    """
    Build the manifest checks for a profile.

    Args:
        profile: Active validation profile

    Returns:
        Checks in declaration order
    """
    checks = [entry_point_check(profile.entry_point)]

    for name in profile.required_dependencies:
        checks.append(dependency_check(name, CheckSeverity.REQUIRED))

    for name in profile.optional_dependencies:
        checks.append(dependency_check(name, CheckSeverity.OPTIONAL))

    if profile.version_pair is not None:
        checks.append(version_match_check(profile.version_pair))

    return checks


def entry_point_check(expected: str) -> Check:
    """Manifest 'main' must equal the expected entry point."""

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        actual = project.manifest().get("main")
        if actual == expected:
            yield Verdict(True, f"Entry point is '{expected}'")
        else:
            details = (f"Found: {actual!r}",) if actual is not None else ()
            yield Verdict(False, f"Entry point should be '{expected}'", details=details)

    return Check(
        id="entry-point",
        severity=CheckSeverity.REQUIRED,
        description="Manifest entry point",
        predicate=predicate,
    )


def has_dependency(project: ProjectFiles, name: str) -> bool:
    """True if the name is a key in any dependency mapping."""
    return any(name in project.dependency_section(s) for s in DEPENDENCY_SECTIONS)


def dependency_check(name: str, severity: CheckSeverity) -> Check:
    label = "Dependency" if severity == CheckSeverity.REQUIRED else "Optional dependency"

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if has_dependency(project, name):
            yield Verdict(True, f"{label}: {name}")
        elif severity == CheckSeverity.REQUIRED:
            yield Verdict(False, f"Missing dependency: {name}")
        else:
            yield Verdict(False, f"Optional dependency not installed: {name}")

    return Check(
        id=f"dependency:{name}",
        severity=severity,
        description=f"{label} '{name}' declared",
        predicate=predicate,
    )


def strip_range_qualifier(version: str) -> str:
    """Remove at most one leading '^' or '~'."""
    if version and version[0] in RANGE_QUALIFIERS:
        return version[1:]
    return version


def versions_match(first: str, second: str) -> bool:
    """
    Naive version comparison.

    Exact string equality after stripping one range qualifier from each
    side. '1.0.0' and 'v1.0.0' are a mismatch.
    """
    return strip_range_qualifier(first) == strip_range_qualifier(second)


def version_match_check(pair: VersionPairConfig) -> Check:
    """Runtime versions of two paired dependencies must agree."""

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        runtime = project.dependency_section("dependencies")
        secondary = runtime.get(pair.secondary)

        if not secondary:
            hint = f" ({pair.secondary_hint})" if pair.secondary_hint else ""
            yield Verdict(False, f"{pair.secondary} not installed{hint}")
            return

        primary = str(runtime.get(pair.primary) or "")
        secondary = str(secondary)
        versions = f"{pair.primary} ({primary}) and {pair.secondary} ({secondary})"

        if versions_match(primary, secondary):
            yield Verdict(True, f"{versions} versions match")
        else:
            yield Verdict(False, f"{versions} versions may not match")

    return Check(
        id=f"version-match:{pair.primary}/{pair.secondary}",
        severity=CheckSeverity.OPTIONAL,
        description=f"{pair.primary} and {pair.secondary} versions consistent",
        predicate=predicate,
    )
