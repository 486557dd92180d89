"""Infrastructure: materialize a bundled template into a project root.

The copy is structural first, then two optional content edits:

* ``package.json`` gets its ``name`` field replaced.
* ``index.html`` and ``playground/index.html`` get their ``<title>``
  replaced.

Templates may omit any of these files.
"""

from __future__ import annotations

import json
import os
import re
import shutil
from collections.abc import Callable
from pathlib import Path

from create_rolldown.core.constants import RENAME_FILES, TEMPLATES
from create_rolldown.exceptions import (
    CreateRolldownError,
    TemplateCopyError,
    TemplateNotFoundError,
)
from create_rolldown.infra.filesystem import copy_dir

TEMPLATES_ROOT: Path = Path(__file__).resolve().parent.parent / "templates"
"""Directory holding the ``template-<name>`` trees shipped with the package."""

_TITLE_RE = re.compile(r"<title>.*?</title>")

_HTML_ENTRY_POINTS: tuple[tuple[str, ...], ...] = (
    ("index.html",),
    ("playground", "index.html"),
)


# ---------------------------------------------------------------------------
# Template lookup
# ---------------------------------------------------------------------------

def template_dir_for(name: str, templates_root: Path | None = None) -> Path:
    """Return the directory of the registered template *name*.

    Raises
    ------
    TemplateNotFoundError
        If *name* is not a registered framework identifier.
    """
    if name not in TEMPLATES:
        raise TemplateNotFoundError(
            f"Unknown template: {name}",
            hint=f"Available templates: {', '.join(TEMPLATES)}",
        )
    root = TEMPLATES_ROOT if templates_root is None else templates_root
    return root / f"template-{name}"


# ---------------------------------------------------------------------------
# Content edits
# ---------------------------------------------------------------------------

def _edit_file(path: Path, transform: Callable[[str], str]) -> None:
    content = path.read_text(encoding="utf-8")
    path.write_text(transform(content), encoding="utf-8")


def _rename_package(content: str, package_name: str) -> str:
    pkg = json.loads(content)
    pkg["name"] = package_name
    return json.dumps(pkg, indent=2, ensure_ascii=False) + "\n"


def _retitle(content: str, project_name: str) -> str:
    # A callable replacement keeps backslashes in the name literal.
    return _TITLE_RE.sub(lambda _match: f"<title>{project_name}</title>", content, count=1)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def copy_template(
    template_dir: str | os.PathLike[str],
    root: str | os.PathLike[str],
    project_name: str,
    package_name: str,
) -> None:
    """Copy *template_dir* into *root* and stamp the project identity.

    Parameters
    ----------
    template_dir:
        Source ``template-<name>`` directory.
    root:
        Target project root; created with parents when absent.
    project_name:
        Inserted verbatim as the HTML ``<title>``.  No escaping is done.
    package_name:
        Written to the ``name`` field of ``package.json``.

    Raises
    ------
    TemplateNotFoundError
        If *template_dir* does not exist.  Checked before any mutation.
    TemplateCopyError
        For any failure after that check.
    """
    source = Path(template_dir)
    target = Path(root)

    if not source.exists():
        raise TemplateNotFoundError(f"Template directory not found: {source}")

    try:
        target.mkdir(parents=True, exist_ok=True)

        for entry in sorted(source.iterdir()):
            if entry.is_dir():
                copy_dir(entry, target / entry.name)
            else:
                dest_name = RENAME_FILES.get(entry.name, entry.name)
                shutil.copyfile(entry, target / dest_name)

        pkg_json = target / "package.json"
        if pkg_json.exists():
            _edit_file(pkg_json, lambda content: _rename_package(content, package_name))

        for parts in _HTML_ENTRY_POINTS:
            html = target.joinpath(*parts)
            if html.exists():
                _edit_file(html, lambda content: _retitle(content, project_name))
    except (CreateRolldownError, OSError, TypeError, ValueError) as exc:
        raise TemplateCopyError(f"Failed to copy template: {exc}") from exc
