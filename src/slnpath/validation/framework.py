"""Batch validation of paths collected from solution files.

Runs the character rules over a list of paths and aggregates the outcome
into a result with a CI-friendly exit code.
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from enum import Enum

from ..config import SlnpathConfig, create_default_config
from ..utils.paths import normalize_path_no_throw
from .path_rules import find_invalid_character

logger = logging.getLogger(__name__)

MISSING_PATH_RULE = "missing-path"


class ValidationStatus(str, Enum):
    """Overall validation status."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass
class PathIssue:
    """A single invalid path found during validation."""
    rule: str
    severity: ValidationStatus
    message: str
    path: str | None = None
    normalized: str | None = None
    index: int | None = None

    def __str__(self) -> str:
        location = f" in {self.normalized or self.path!r}" if self.path is not None else ""
        return f"[{self.severity.value.upper()}] {self.rule}: {self.message}{location}"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class PathValidationResult:
    """Outcome of checking a batch of paths.

    Counters are keyed by name (paths_checked, paths_invalid); issues keep
    the order the paths were given in.
    """
    status: ValidationStatus
    issues: list[PathIssue] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def exit_code(self) -> int:
        """Process exit status: non-zero only when some path failed."""
        return int(self.status is ValidationStatus.FAIL)

    def add_issue(self, issue: PathIssue) -> None:
        """Record an invalid path; the status only ever gets worse (fail > warn > pass)."""
        self.issues.append(issue)

        if issue.severity == ValidationStatus.FAIL:
            self.status = ValidationStatus.FAIL
        elif issue.severity == ValidationStatus.WARN and self.status == ValidationStatus.PASS:
            self.status = ValidationStatus.WARN

    def count(self, name: str) -> None:
        self.counters[name] = self.counters.get(name, 0) + 1

    def to_dict(self) -> dict:
        """Report shape printed by `slnpath check --json`."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": dict(self.counters),
            "issues": [issue.to_dict() for issue in self.issues],
        }


class PathValidator:
    """Validates batches of paths against the character rules."""

    def __init__(self, config: SlnpathConfig | None = None):
        self.config = config or create_default_config()

    @property
    def issue_severity(self) -> ValidationStatus:
        if self.config.validation.fail_on_invalid:
            return ValidationStatus.FAIL
        return ValidationStatus.WARN

    def _display_path(self, path: str) -> str:
        if not self.config.validation.normalize_reported_paths:
            return path
        return normalize_path_no_throw(path, self.config.paths)

    def check(self, path: str | None) -> PathIssue | None:
        """Check a single path and describe the problem, if any."""
        if not isinstance(path, str):
            return PathIssue(
                rule=MISSING_PATH_RULE,
                severity=self.issue_severity,
                message=f"expected a path string, got {type(path).__name__}",
            )

        invalid = find_invalid_character(path)
        if invalid is None:
            return None

        return PathIssue(
            rule=invalid.rule.value,
            severity=self.issue_severity,
            message=invalid.describe(),
            path=path,
            normalized=self._display_path(path),
            index=invalid.index,
        )

    def validate(self, paths: Iterable[str | None]) -> PathValidationResult:
        """Run the character rules over every path.

        Args:
            paths: Paths to check, typically taken verbatim from a solution file

        Returns:
            PathValidationResult with status, issues, and counters
        """
        result = PathValidationResult(status=ValidationStatus.PASS)
        result.counters = {"paths_checked": 0, "paths_invalid": 0}

        for path in paths:
            result.count("paths_checked")
            issue = self.check(path)
            if issue is None:
                continue

            logger.debug(f"Invalid path {path!r}: {issue.message}")
            result.count("paths_invalid")
            result.add_issue(issue)

        logger.info(
            f"Checked {result.counters['paths_checked']} paths, "
            f"{result.counters['paths_invalid']} invalid; status: {result.status.value}"
        )
        return result
