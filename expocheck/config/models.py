"""
Pydantic models for validation profiles.

A profile names everything the validator looks for: the manifest and
its entry point, the dependency sets, the config files and the settings
they must declare, and the app directory convention.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


SeverityName = Literal["required", "optional"]


class ProfileModel(BaseModel):
    """Base for all profile sections: immutable, unknown keys rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# ============================================================
# Manifest Sections
# ============================================================

class VersionPairConfig(ProfileModel):
    """Two dependencies whose versions must be kept in lockstep."""

    primary: str = Field(..., description="Dependency whose version is the reference")
    secondary: str = Field(..., description="Dependency compared against the primary")
    secondary_hint: Optional[str] = Field(
        None, description="Why the secondary is needed, shown when it is missing"
    )

    @model_validator(mode="after")
    def check_distinct(self):
        """A dependency cannot be compared with itself."""
        if self.primary == self.secondary:
            raise ValueError(f"Version pair must name two dependencies, got '{self.primary}' twice")
        return self


# ============================================================
# Config File Sections
# ============================================================

class SettingConfig(ProfileModel):
    """A literal setting that must appear in the settings file."""

    key: str = Field(..., description="Short identifier used in the check id")
    needle: str = Field(..., description="Literal text searched for in the file")
    severity: SeverityName = Field(default="required", description="required or optional")
    description: str = Field(..., description="Label shown when the setting is present")
    missing_hint: Optional[str] = Field(None, description="Message shown when it is absent")


class OptionalFileConfig(ProfileModel):
    """A recommended companion file; its absence is only a warning."""

    path: str = Field(..., description="Path relative to the project root")
    hint: Optional[str] = Field(None, description="What the file is for")


class PresetConfig(ProfileModel):
    """A build-tool preset that must be declared in a config file."""

    file: str = Field(..., description="Config file that declares the preset")
    needle: str = Field(..., description="Literal preset reference")
    label: str = Field(..., description="Human-readable preset name")


class LayoutConfig(ProfileModel):
    """App directory convention with a deprecated fallback."""

    preferred: str = Field(..., description="Preferred app directory")
    fallback: str = Field(..., description="Legacy app directory")
    required_files: List[str] = Field(
        default_factory=list, description="Files required inside the preferred directory"
    )
    entry_file: str = Field(..., description="Root layout file name inside the app directory")
    import_needle: str = Field(..., description="Import the root layout must contain")

    @field_validator("preferred", "fallback")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.rstrip("/")
        if not v:
            raise ValueError("Directory must not be empty")
        return v

    @model_validator(mode="after")
    def check_distinct(self):
        if self.preferred == self.fallback:
            raise ValueError("Preferred and fallback directories must differ")
        return self

    @property
    def entry_candidates(self) -> List[str]:
        """Root layout candidates in precedence order."""
        return [f"{self.preferred}/{self.entry_file}", f"{self.fallback}/{self.entry_file}"]


# ============================================================
# Profile (Main)
# ============================================================

class ValidationProfile(ProfileModel):
    """
    Complete validation profile.

    Defines every file, dependency and setting the validator checks
    for a scaffolded project.
    """

    name: str = Field(default="custom", description="Profile name")
    manifest: str = Field(default="package.json", description="Project manifest file")
    entry_point: str = Field(..., description="Expected value of the manifest 'main' field")
    required_dependencies: List[str] = Field(default_factory=list)
    optional_dependencies: List[str] = Field(default_factory=list)
    version_pair: Optional[VersionPairConfig] = Field(None)
    settings_file: Optional[str] = Field(None, description="Secondary config file")
    settings: List[SettingConfig] = Field(default_factory=list)
    required_files: List[str] = Field(default_factory=list)
    optional_files: List[OptionalFileConfig] = Field(default_factory=list)
    preset: Optional[PresetConfig] = Field(None)
    layout: Optional[LayoutConfig] = Field(None)

    @field_validator("required_dependencies", "optional_dependencies", "required_files")
    @classmethod
    def reject_duplicates(cls, v: List[str]) -> List[str]:
        seen = set()
        for item in v:
            if item in seen:
                raise ValueError(f"Duplicate entry: {item}")
            seen.add(item)
        return v

    @model_validator(mode="after")
    def check_settings_file(self):
        """Settings need a file to live in."""
        if self.settings and not self.settings_file:
            raise ValueError("'settings' requires 'settings_file'")
        return self

    @model_validator(mode="after")
    def check_dependency_overlap(self):
        overlap = set(self.required_dependencies) & set(self.optional_dependencies)
        if overlap:
            raise ValueError(
                f"Dependencies listed as both required and optional: {', '.join(sorted(overlap))}"
            )
        return self

    @model_validator(mode="after")
    def check_file_overlap(self):
        overlap = set(self.required_files) & {f.path for f in self.optional_files}
        if overlap:
            raise ValueError(
                f"Files listed as both required and optional: {', '.join(sorted(overlap))}"
            )
        return self
