"""Class-name extraction from stylesheets and markup.

Feeds the validator with the class names a project actually uses.
Stylesheets (brace syntax, or the indented ``.sass`` syntax) yield class
selectors; markup yields ``class`` attribute tokens. Every occurrence
keeps its file and 1-based line number.

Sass parent-selector suffixes (``&__title``) and interpolated names
(``.c-#{$name}``) cannot be resolved without compiling, so they are
skipped rather than reported.
"""

from __future__ import annotations

import bisect
import fnmatch
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

STYLESHEET_SUFFIXES = frozenset({".css", ".scss", ".sass", ".less"})
MARKUP_SUFFIXES = frozenset({".html", ".htm", ".jinja", ".j2", ".vue", ".svelte"})
LINE_COMMENT_SUFFIXES = frozenset({".scss", ".sass", ".less"})

# Directories never worth scanning.
_SKIP_DIRS = frozenset({".git", "node_modules", ".venv", "__pycache__", ".bemlint"})

_OPAQUE = re.compile(
    r"""/\*.*?\*/"""
    r"""|"(?:\\.|[^"\\\n])*\""""
    r"""|'(?:\\.|[^'\\\n])*'"""
    r"""|url\([^)]*\)""",
    re.DOTALL,
)
_LINE_COMMENT = re.compile(r"(?<![:\w])//[^\n]*")
_CLASS_SELECTOR = re.compile(r"\.(-?[_a-zA-Z](?:[\w-]|\\.)*)(#\{)?")
_BLOCK_DELIMITER = re.compile(r"[{};]")
_TEMPLATE_EXPR = re.compile(r"\{\{.*?\}\}|\{%.*?%\}|\{#.*?#\}", re.DOTALL)
_CLASS_ATTR = re.compile(r"""(?<![\w:.-])class\s*=\s*(?:"([^"]*)"|'([^']*)')""", re.IGNORECASE)
_SASS_PROPERTY = re.compile(r"^[\w-]+\s*:(?:\s|$)")
# Indented-syntax lines that open a block without being a selector.
_SASS_NON_SELECTOR = ("@", "=", "+", "$")


@dataclass(frozen=True)
class ClassOccurrence:
    """One use of a class name in a source file."""

    path: Path
    line: int
    name: str


def _blank(match: re.Match[str]) -> str:
    """Replace a span with spaces, keeping newlines so offsets and lines survive."""
    return re.sub(r"[^\n]", " ", match.group(0))


def _newline_offsets(text: str) -> list[int]:
    return [m.start() for m in re.finditer("\n", text)]


def _line_at(newlines: list[int], offset: int) -> int:
    return bisect.bisect_left(newlines, offset) + 1


def extract_from_stylesheet(text: str, *, line_comments: bool = False) -> list[tuple[int, str]]:
    """Return ``(line, class_name)`` pairs for every class selector in *text*.

    Comments, string literals and ``url(...)`` bodies are ignored, as are
    decimals such as ``.5em`` (a class never starts with a digit). Only
    selector context counts: a match must be followed by ``{`` before any
    ``;`` or ``}``, which rules out ``math.div(...)`` and ``@extend``.
    """
    cleaned = _OPAQUE.sub(_blank, text)
    if line_comments:
        cleaned = _LINE_COMMENT.sub(_blank, cleaned)
    delimiters = [(m.start(), m.group(0)) for m in _BLOCK_DELIMITER.finditer(cleaned)]
    offsets = [offset for offset, _char in delimiters]
    newlines = _newline_offsets(cleaned)

    found: list[tuple[int, str]] = []
    for match in _CLASS_SELECTOR.finditer(cleaned):
        if match.group(2):
            continue
        index = bisect.bisect_left(offsets, match.end())
        if index == len(delimiters) or delimiters[index][1] != "{":
            continue
        found.append((_line_at(newlines, match.start()), match.group(1)))
    return found


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _opens_block(lines: list[str], index: int) -> bool:
    depth = _indent(lines[index])
    for following in lines[index + 1 :]:
        if following.strip():
            return _indent(following) > depth
    return False


def extract_from_indented_sass(text: str) -> list[tuple[int, str]]:
    """Return ``(line, class_name)`` pairs for class selectors in indented Sass.

    The ``.sass`` syntax has no braces: a selector line is one that opens
    an indented block, or ends in a comma continuing onto the next
    selector line. Property lines (``color: red``), variables, directives
    and mixin shorthands (``=name``, ``+name``) are not selectors.
    """
    cleaned = _LINE_COMMENT.sub(_blank, _OPAQUE.sub(_blank, text))
    lines = cleaned.split("\n")

    found: list[tuple[int, str]] = []
    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith(_SASS_NON_SELECTOR):
            continue
        if stripped.endswith(":") or _SASS_PROPERTY.match(stripped):
            continue
        if not (stripped.endswith(",") or _opens_block(lines, index)):
            continue
        for match in _CLASS_SELECTOR.finditer(line):
            if not match.group(2):
                found.append((index + 1, match.group(1)))
    return found


def extract_from_markup(text: str) -> list[tuple[int, str]]:
    """Return ``(line, class_name)`` pairs for ``class="..."`` tokens in *text*.

    Template expressions inside the attribute (``{{ ... }}``, ``{% ... %}``)
    are dropped; literal classes around them are kept.
    """
    newlines = _newline_offsets(text)
    found: list[tuple[int, str]] = []
    for match in _CLASS_ATTR.finditer(text):
        group = 1 if match.group(1) is not None else 2
        value = _TEMPLATE_EXPR.sub(_blank, match.group(group))
        start = match.start(group)
        for token in re.finditer(r"\S+", value):
            name = token.group(0)
            if any(ch in name for ch in "{}%<>"):
                continue
            found.append((_line_at(newlines, start + token.start()), name))
    return found


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------


def _excluded(relative: str, exclude: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(relative, pattern) for pattern in exclude)


def find_source_files(
    root: Path,
    *,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Discover scannable files under *root* (or *root* itself if a file).

    Skips VCS, dependency and cache directories, and any path whose
    root-relative POSIX form matches one of the *exclude* globs.
    """
    suffixes = {ext if ext.startswith(".") else f".{ext}" for ext in extensions}
    patterns = list(exclude)
    if root.is_file():
        return [root]

    results: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        relative = path.relative_to(root)
        if any(part in _SKIP_DIRS for part in relative.parts[:-1]):
            continue
        if _excluded(relative.as_posix(), patterns):
            continue
        results.append(path)
    return sorted(results)


def extract_file(path: Path) -> list[ClassOccurrence]:
    """Extract class occurrences from one file, chosen by its suffix.

    Raises:
        OSError: the file cannot be read.
        UnicodeDecodeError: the file is not UTF-8.
    """
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in MARKUP_SUFFIXES:
        pairs = extract_from_markup(text)
    elif suffix == ".sass":
        pairs = extract_from_indented_sass(text)
    else:
        pairs = extract_from_stylesheet(text, line_comments=suffix in LINE_COMMENT_SUFFIXES)
    return [ClassOccurrence(path=path, line=line, name=name) for line, name in pairs]
