"""Shared pytest fixtures for bemlint tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bemlint.config.settings import BemlintSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BEMLINT_* environment out of every test."""
    monkeypatch.delenv("BEMLINT_CONFIG", raising=False)
    monkeypatch.delenv("BEMLINT_LINT__VARIANT", raising=False)
    monkeypatch.delenv("BEMLINT_LINT__STRICT", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by ``configure_logging``.

    Every CLI invocation reconfigures logging against the runner's
    stderr, which is closed once the invocation ends.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    package_logger = logging.getLogger("bemlint")
    package_level = package_logger.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    package_logger.setLevel(package_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a small stylesheet tree.

    This is the single source of truth for the sample project layout.
    ``styles/main.scss`` holds two errors and one advisory under the
    default variant; ``templates/index.html`` is clean.
    """
    styles = tmp_path / "styles"
    styles.mkdir()
    (styles / "main.scss").write_text(
        "// layout\n"
        ".l-grid { display: grid; }\n"
        ".c-card__title--large { font-size: 2rem; }\n"
        ".is-open--fast { opacity: .5; }\n"
        ".u-hidden__x { display: none; }\n"
        ".navbar { color: red; }\n",
        encoding="utf-8",
    )
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "index.html").write_text(
        '<div class="c-card js-card">\n  <h2 class="c-card__title">Hi</h2>\n</div>\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> BemlintSettings:
    """Settings rooted at the sample project with code defaults."""
    return BemlintSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample project so the CLI lints it by default.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)
