"""
Project Validator

Runs the declarative check table against a project directory.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..config.models import ValidationProfile
from ..config.loader import ConfigLoader
from .checks import build_checks
from .models import Check, CheckResult, CheckSeverity, Outcome, Report
from .project import ProjectFiles

logger = logging.getLogger(__name__)

MANIFEST_CHECK_ID = "manifest"


class ConfigValidator:
    """
    Validates a scaffolded project against a profile.

    Every check is independent and read-only. A missing manifest is the
    only condition that stops the run; any other problem is reported
    against the check that hit it.
    """

    def __init__(self, profile: Optional[ValidationProfile] = None, workers: int = 1):
        """
        Initialize the validator.

        Args:
            profile: Validation profile, defaults to the Expo starter profile
            workers: Number of threads used to evaluate checks
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self.profile = profile or ConfigLoader().load().profile
        self.workers = workers
        self.checks: Tuple[Check, ...] = build_checks(self.profile)

    def validate(self, project_root: Union[str, Path]) -> Report:
        """
        Run all checks against a project.

        Args:
            project_root: Project directory

        Returns:
            Report with one entry per finding, in check-table order
        """
        root = Path(project_root)
        project = ProjectFiles(root, manifest_name=self.profile.manifest)

        if not project.is_file(self.profile.manifest):
            logger.info("No %s in %s, aborting", self.profile.manifest, root)
            return Report(
                results=(CheckResult(
                    check_id=MANIFEST_CHECK_ID,
                    outcome=Outcome.FAIL,
                    message=f"Not in a project directory ({self.profile.manifest} not found)",
                ),),
                project_root=root,
                fatal=True,
            )

        logger.debug("Running %d checks against %s", len(self.checks), root)

        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                batches = list(pool.map(lambda c: self._run_check(c, project), self.checks))
        else:
            batches = [self._run_check(check, project) for check in self.checks]

        report = Report(
            results=tuple(r for batch in batches for r in batch),
            project_root=root,
        )
        logger.info("%s: %s", root, report.summary())
        return report

    def _run_check(self, check: Check, project: ProjectFiles) -> List[CheckResult]:
        """Evaluate one check, turning any error into a result for that check."""
        try:
            return [
                CheckResult(
                    check_id=f"{check.id}:{v.check_id}" if v.check_id else check.id,
                    outcome=check.outcome_for(v),
                    message=v.message,
                    details=v.details,
                )
                for v in check.predicate(project)
            ]
        except Exception as e:
            logger.warning("Check %s could not be evaluated: %s", check.id, e)
            outcome = Outcome.FAIL if check.severity == CheckSeverity.REQUIRED else Outcome.WARN
            return [CheckResult(
                check_id=check.id,
                outcome=outcome,
                message=f"{check.description}: could not evaluate ({e})",
            )]
