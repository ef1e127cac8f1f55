"""
Config File Validation

Checks that config files exist and declare the settings the starter needs.
"""

from typing import Iterator, List, Optional

from ...config.models import PresetConfig, SettingConfig, ValidationProfile
from ..models import Check, CheckSeverity, Outcome, Verdict
from ..project import ProjectFiles


def file_checks(profile: ValidationProfile) -> List[Check]:
    """
    Build the config file checks for a profile.

    Args:
        profile: Active validation profile

    Returns:
        Checks in declaration order
    """
    checks = []

    if profile.settings_file:
        checks.append(presence_guard_check(profile.settings_file))
        for setting in profile.settings:
            checks.append(setting_check(profile.settings_file, setting))

    for path in profile.required_files:
        checks.append(file_exists_check(path, CheckSeverity.REQUIRED))

    for optional in profile.optional_files:
        checks.append(file_exists_check(optional.path, CheckSeverity.OPTIONAL, optional.hint))

    if profile.preset is not None:
        checks.append(preset_check(profile.preset))

    return checks


def presence_guard_check(path: str) -> Check:
    """
    Fail once when a settings file is missing.

    Emits nothing when the file exists; the individual setting checks
    report on its contents.
    """

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if not project.is_file(path):
            yield Verdict(False, f"{path} not found", outcome=Outcome.FAIL)

    return Check(
        id=f"config:{path}",
        severity=CheckSeverity.REQUIRED,
        description=f"{path} present",
        predicate=predicate,
    )


def setting_check(path: str, setting: SettingConfig) -> Check:
    """Literal setting must appear in the file; skipped if the file is missing."""
    severity = CheckSeverity(setting.severity)

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if not project.is_file(path):
            return
        if project.contains(path, setting.needle):
            yield Verdict(True, setting.description)
        else:
            message = setting.missing_hint or f"{setting.description}: not found in {path}"
            yield Verdict(False, message)

    return Check(
        id=f"setting:{path}:{setting.key}",
        severity=severity,
        description=setting.description,
        predicate=predicate,
    )


def file_exists_check(path: str, severity: CheckSeverity, hint: Optional[str] = None) -> Check:
    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if project.is_file(path):
            yield Verdict(True, f"File exists: {path}")
        elif hint:
            yield Verdict(False, f"Missing file: {path} ({hint})")
        else:
            yield Verdict(False, f"Missing file: {path}")

    return Check(
        id=f"file:{path}",
        severity=severity,
        description=f"{path} exists",
        predicate=predicate,
    )


def preset_check(preset: PresetConfig) -> Check:
    """Preset must be referenced in its config file, if that file exists."""

    def predicate(project: ProjectFiles) -> Iterator[Verdict]:
        if not project.is_file(preset.file):
            return
        if project.contains(preset.file, preset.needle):
            yield Verdict(True, f"{preset.label} configured in {preset.file}")
        else:
            yield Verdict(False, f"{preset.label} missing in {preset.file}")

    return Check(
        id=f"preset:{preset.file}",
        severity=CheckSeverity.REQUIRED,
        description=f"{preset.label} declared",
        predicate=predicate,
    )
