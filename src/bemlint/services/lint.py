"""LintService: class-name validation for names and project files.

Follows the linter pattern: every operation returns a ServiceResult
whose ``ok`` means "the run happened" and whose ``data["healthy"]``
means "nothing at error severity was found".

Severity mapping:
- syntax and semantic violations are errors,
- advisory violations are warnings, or errors in strict mode.
"""

from __future__ import annotations

import fnmatch
import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bemlint.domain.errors import ConfigError
from bemlint.domain.types import Violation, ViolationKind
from bemlint.domain.validator import ClassNameValidator, ValidationResult
from bemlint.domain.variants import list_variants
from bemlint.infrastructure.extract import extract_file, find_source_files
from bemlint.services.result import ServiceResult

if TYPE_CHECKING:
    from bemlint.config.settings import BemlintSettings

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"
SEVERITIES = (SEVERITY_WARNING, SEVERITY_ERROR)


def _display_path(path: Path) -> str:
    try:
        return path.resolve().relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return str(path)


class LintService:
    """Validates class names under the configured naming variant.

    Per-call *variant* and *strict* arguments override ``[lint]`` config.
    """

    def __init__(self, settings: BemlintSettings) -> None:
        self._settings = settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_names(
        self,
        names: Iterable[str],
        *,
        variant: str | None = None,
        strict: bool | None = None,
    ) -> ServiceResult:
        """Validate explicit class names, one result per name in order."""
        op = "validate"
        names = list(names)
        if not names:
            return ServiceResult.failure(op, "NO_INPUT", "No class names given")
        try:
            validator = self._validator(variant, strict)
        except ConfigError as exc:
            return ServiceResult.failure(op, "CONFIG_ERROR", str(exc))

        results = validator.validate_many(names)
        entries = [self._entry(result, validator.strict) for result in results]
        error_count = sum(1 for r in results if not r.ok)
        warning_count = sum(
            1 for e in entries for v in e["violations"] if v["severity"] == SEVERITY_WARNING
        )
        logger.debug("Validated %d class names (%d failing)", len(results), error_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "variant": validator.variant.name,
                "strict": validator.strict,
                "results": entries,
                "count": len(entries),
                "error_count": error_count,
                "warning_count": warning_count,
                "healthy": error_count == 0,
            },
        )

    def lint_paths(
        self,
        paths: Iterable[Path],
        *,
        variant: str | None = None,
        strict: bool | None = None,
        min_severity: str | None = None,
    ) -> ServiceResult:
        """Extract class names from files under *paths* and validate them.

        Unreadable files are skipped with a warning. Issues below
        *min_severity* are hidden but still decide ``healthy``.
        """
        op = "lint"
        started = time.perf_counter()
        paths = list(paths)
        threshold = min_severity or self._settings.lint.min_severity
        if threshold not in SEVERITIES:
            return ServiceResult.failure(op, "CONFIG_ERROR", f"Unknown severity {threshold!r}")
        if not paths:
            return ServiceResult.failure(op, "NO_INPUT", "No paths given")
        missing = [str(p) for p in paths if not p.exists()]
        if missing:
            return ServiceResult.failure(
                op,
                "PATH_NOT_FOUND",
                f"Path not found: {', '.join(missing)}",
                detail={"missing": missing},
            )
        try:
            validator = self._validator(variant, strict)
        except ConfigError as exc:
            return ServiceResult.failure(op, "CONFIG_ERROR", str(exc))

        scan = self._settings.scan
        warnings: list[str] = []
        cache: dict[str, ValidationResult] = {}
        issues: list[dict[str, Any]] = []
        files_scanned = 0
        classes_checked = 0

        for root in paths:
            for file_path in find_source_files(
                root, extensions=scan.extensions, exclude=scan.exclude
            ):
                try:
                    occurrences = extract_file(file_path)
                except (OSError, UnicodeDecodeError) as exc:
                    logger.warning("Skipping unreadable file %s: %s", file_path, exc)
                    warnings.append(f"Failed to read {_display_path(file_path)}: {exc}")
                    continue
                files_scanned += 1
                for occurrence in occurrences:
                    if self._ignored(occurrence.name):
                        continue
                    classes_checked += 1
                    result = cache.get(occurrence.name)
                    if result is None:
                        result = validator.validate_many([occurrence.name])[0]
                        cache[occurrence.name] = result
                    for violation in result.violations:
                        issues.append(
                            {
                                "path": _display_path(occurrence.path),
                                "line": occurrence.line,
                                "name": occurrence.name,
                                "kind": str(violation.kind),
                                "severity": _severity(violation, validator.strict),
                                "message": violation.message,
                            }
                        )

        total_errors = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)
        if threshold == SEVERITY_ERROR:
            issues = [i for i in issues if i["severity"] == SEVERITY_ERROR]
        error_count = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)
        logger.debug(
            "Linted %d files, %d classes, %d issues", files_scanned, classes_checked, len(issues)
        )

        meta: dict[str, Any] | None = None
        if self._settings.verbose:
            meta = {"duration_ms": round((time.perf_counter() - started) * 1000, 2)}
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "variant": validator.variant.name,
                "strict": validator.strict,
                "files_scanned": files_scanned,
                "classes_checked": classes_checked,
                "unique_classes": len(cache),
                "issues": issues,
                "count": len(issues),
                "error_count": error_count,
                "warning_count": len(issues) - error_count,
                "healthy": total_errors == 0,
            },
            warnings=warnings,
            meta=meta,
        )

    def describe_variants(self) -> ServiceResult:
        """List the built-in variants with their prefix and rule tables."""
        op = "variants"
        custom = self._settings.lint.custom_namespaces
        described: list[dict[str, Any]] = []
        try:
            for variant in list_variants():
                extended = variant.with_custom_namespaces(custom)
                described.append(
                    {
                        "name": extended.name,
                        "aliases": list(extended.aliases),
                        "description": extended.description,
                        "element_delimiter": extended.element_delimiter,
                        "modifier_delimiter": extended.modifier_delimiter,
                        "prefix_required": extended.prefix_required,
                        "prefixes": [
                            {
                                "prefix": prefix,
                                "namespace": str(namespace),
                                "allow_element": extended.rule_for(namespace).allow_element,
                                "allow_modifier": extended.rule_for(namespace).allow_modifier,
                            }
                            for prefix, namespace in extended.prefixes
                        ],
                    }
                )
        except ConfigError as exc:
            return ServiceResult.failure(op, "CONFIG_ERROR", str(exc))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "default": self._settings.lint.variant,
                "variants": described,
                "count": len(described),
            },
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validator(self, variant: str | None, strict: bool | None) -> ClassNameValidator:
        lint = self._settings.lint
        return ClassNameValidator(
            variant or lint.variant,
            strict=lint.strict if strict is None else strict,
            custom_namespaces=lint.custom_namespaces,
        )

    def _ignored(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, p) for p in self._settings.scan.ignore_classes)

    @staticmethod
    def _entry(result: ValidationResult, strict: bool) -> dict[str, Any]:
        return {
            "name": result.raw,
            "ok": result.ok,
            "namespace": str(result.namespace),
            "block": result.block,
            "element": result.element,
            "modifier": result.modifier,
            "violations": [
                {
                    "kind": str(v.kind),
                    "severity": _severity(v, strict),
                    "message": v.message,
                }
                for v in result.violations
            ],
        }


def _severity(violation: Violation, strict: bool) -> str:
    if violation.kind is ViolationKind.ADVISORY and not strict:
        return SEVERITY_WARNING
    return SEVERITY_ERROR

