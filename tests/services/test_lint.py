"""Tests for LintService: validate, lint and variants operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from bemlint.config.settings import BemlintSettings
from bemlint.services.lint import LintService


class TestValidateNames:
    def test_mixed_batch(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names(["c-card__title", "u-x--y", "navbar"])
        assert result.ok is True
        assert result.op == "validate"
        data = result.data
        assert data["variant"] == "double-underscore-bem"
        assert data["count"] == 3
        assert [e["name"] for e in data["results"]] == ["c-card__title", "u-x--y", "navbar"]
        assert [e["ok"] for e in data["results"]] == [True, False, True]
        assert data["error_count"] == 1
        assert data["warning_count"] == 1
        assert data["healthy"] is False

    def test_entry_shape(self, settings: BemlintSettings) -> None:
        entry = LintService(settings).validate_names(["o-media--rev"]).data["results"][0]
        assert entry == {
            "name": "o-media--rev",
            "ok": True,
            "namespace": "object",
            "block": "media",
            "element": None,
            "modifier": "rev",
            "violations": [],
        }

    def test_strict_override(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names(["navbar"], strict=True)
        violation = result.data["results"][0]["violations"][0]
        assert violation["kind"] == "advisory"
        assert violation["severity"] == "error"
        assert result.data["healthy"] is False

    def test_variant_override(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names(["c-card-title"], variant="dash-modifier")
        entry = result.data["results"][0]
        assert result.data["variant"] == "dash-modifier"
        assert (entry["block"], entry["element"]) == ("card", "title")

    def test_syntax_error_reported_not_raised(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names(["c-card", ""])
        assert result.ok is True
        assert result.data["results"][1]["violations"][0]["kind"] == "syntax"

    def test_no_input(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names([])
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_INPUT"

    def test_unknown_variant(self, settings: BemlintSettings) -> None:
        result = LintService(settings).validate_names(["c-card"], variant="atomic")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "CONFIG_ERROR"
        assert "atomic" in result.error.message


class TestLintPaths:
    def test_sample_project(self, settings: BemlintSettings, project_root: Path) -> None:
        result = LintService(settings).lint_paths([project_root])
        assert result.ok is True
        data = result.data
        assert data["files_scanned"] == 2
        assert data["classes_checked"] == 8
        assert data["unique_classes"] == 8
        assert data["error_count"] == 2
        assert data["warning_count"] == 1
        assert data["healthy"] is False
        assert [(i["line"], i["name"], i["severity"]) for i in data["issues"]] == [
            (4, "is-open--fast", "error"),
            (5, "u-hidden__x", "error"),
            (6, "navbar", "warning"),
        ]

    def test_issue_fields(self, settings: BemlintSettings, project_root: Path) -> None:
        issue = LintService(settings).lint_paths([project_root]).data["issues"][0]
        assert set(issue) == {"path", "line", "name", "kind", "severity", "message"}
        assert issue["path"].endswith("main.scss")
        assert issue["kind"] == "semantic"

    def test_paths_relative_to_cwd(
        self, settings: BemlintSettings, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(project_root)
        issue = LintService(settings).lint_paths([Path("styles")]).data["issues"][0]
        assert issue["path"] == "styles/main.scss"

    def test_errors_only_keeps_health(self, settings: BemlintSettings, project_root: Path) -> None:
        data = LintService(settings).lint_paths([project_root], min_severity="error").data
        assert data["count"] == 2
        assert data["warning_count"] == 0
        assert data["healthy"] is False

    def test_clean_file_is_healthy(self, settings: BemlintSettings, project_root: Path) -> None:
        data = LintService(settings).lint_paths([project_root / "templates"]).data
        assert data["files_scanned"] == 1
        assert data["issues"] == []
        assert data["healthy"] is True

    def test_warnings_alone_are_healthy(self, tmp_path: Path) -> None:
        (tmp_path / "a.css").write_text(".navbar { }\n")
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        data = service.lint_paths([tmp_path]).data
        assert data["warning_count"] == 1
        assert data["healthy"] is True

    def test_strict_turns_advisories_into_errors(self, tmp_path: Path) -> None:
        (tmp_path / "a.css").write_text(".navbar { }\n")
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        data = service.lint_paths([tmp_path], strict=True).data
        assert data["error_count"] == 1
        assert data["healthy"] is False

    def test_repeated_names_counted_per_occurrence(self, tmp_path: Path) -> None:
        (tmp_path / "a.css").write_text(".u-x--y { }\n.u-x--y:hover { }\n")
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        data = service.lint_paths([tmp_path]).data
        assert data["classes_checked"] == 2
        assert data["unique_classes"] == 1
        assert [i["line"] for i in data["issues"]] == [1, 2]

    def test_ignore_classes_from_config(self, project_root: Path) -> None:
        (project_root / "bemlint.toml").write_text(
            '[scan]\nignore_classes = ["navbar", "u-*"]\n', encoding="utf-8"
        )
        service = LintService(BemlintSettings.from_cli(project_root=project_root))
        data = service.lint_paths([project_root]).data
        assert [i["name"] for i in data["issues"]] == ["is-open--fast"]
        assert data["classes_checked"] == 6

    def test_variant_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "bemlint.toml").write_text('[lint]\nvariant = "dash-modifier"\n')
        (tmp_path / "a.css").write_text(".c-card-title--big { }\n")
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        result = service.lint_paths([tmp_path])
        assert result.data["variant"] == "dash-modifier"
        assert result.data["issues"] == []

    def test_unreadable_file_becomes_warning(self, tmp_path: Path) -> None:
        (tmp_path / "bad.css").write_bytes(b".c-caf\xe9 { }")
        (tmp_path / "good.css").write_text(".c-ok { }\n")
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        result = service.lint_paths([tmp_path])
        assert result.ok is True
        assert result.data["files_scanned"] == 1
        assert len(result.warnings) == 1
        assert "bad.css" in result.warnings[0]

    def test_missing_path(self, settings: BemlintSettings, tmp_path: Path) -> None:
        missing = tmp_path / "nowhere"
        result = LintService(settings).lint_paths([missing])
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "PATH_NOT_FOUND"
        assert result.error.detail == {"missing": [str(missing)]}

    def test_no_paths(self, settings: BemlintSettings) -> None:
        result = LintService(settings).lint_paths([])
        assert result.error is not None
        assert result.error.code == "NO_INPUT"

    def test_bad_severity(self, settings: BemlintSettings, project_root: Path) -> None:
        result = LintService(settings).lint_paths([project_root], min_severity="info")
        assert result.error is not None
        assert result.error.code == "CONFIG_ERROR"

    def test_bad_custom_namespace_config(self, tmp_path: Path) -> None:
        (tmp_path / "bemlint.toml").write_text('[lint.custom_namespaces]\n"p-" = "page"\n')
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        result = service.lint_paths([tmp_path])
        assert result.error is not None
        assert result.error.code == "CONFIG_ERROR"

    def test_timing_meta_when_verbose(self, project_root: Path) -> None:
        settings = BemlintSettings.from_cli(project_root=project_root, verbose=True)
        result = LintService(settings).lint_paths([project_root])
        assert result.meta is not None
        assert "duration_ms" in result.meta

    def test_no_meta_by_default(self, settings: BemlintSettings, project_root: Path) -> None:
        assert LintService(settings).lint_paths([project_root]).meta is None


class TestDescribeVariants:
    def test_lists_builtins(self, settings: BemlintSettings) -> None:
        result = LintService(settings).describe_variants()
        assert result.ok is True
        assert result.data["default"] == "double-underscore-bem"
        assert result.data["count"] == 4
        names = [v["name"] for v in result.data["variants"]]
        assert names[0] == "dash-modifier"

    def test_prefix_rows(self, settings: BemlintSettings) -> None:
        variants = LintService(settings).describe_variants().data["variants"]
        bem = next(v for v in variants if v["name"] == "double-underscore-bem")
        rows = {row["prefix"]: row for row in bem["prefixes"]}
        assert rows["c-"]["namespace"] == "component"
        assert rows["c-"]["allow_element"] is True
        assert rows["u-"]["allow_modifier"] is False
        assert rows["js-"]["namespace"] == "jsHook"
        assert bem["element_delimiter"] == "__"
        assert bem["prefix_required"] is True

    def test_custom_namespaces_applied(self, tmp_path: Path) -> None:
        (tmp_path / "bemlint.toml").write_text('[lint.custom_namespaces]\n"p-" = "component"\n')
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        for variant in service.describe_variants().data["variants"]:
            assert "p-" in [row["prefix"] for row in variant["prefixes"]]

    def test_bad_custom_namespace(self, tmp_path: Path) -> None:
        (tmp_path / "bemlint.toml").write_text('[lint.custom_namespaces]\n"P" = "component"\n')
        service = LintService(BemlintSettings.from_cli(project_root=tmp_path))
        result = service.describe_variants()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "CONFIG_ERROR"
