"""Template name validation and lookup under the templates directory."""

from __future__ import annotations

import re
from pathlib import Path

from newfile.errors import ErrorKind, InstantiateError

TEMPLATES_DIR = "templates"
TEMPLATE_PREFIX = "template."

_TEMPLATE_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_valid_template_name(name: str) -> bool:
    """Return whether ``name`` is non-empty and made only of ASCII letters and digits."""
    return _TEMPLATE_NAME_PATTERN.fullmatch(name) is not None


def validate_template_name(name: str) -> str:
    """Return ``name`` unchanged or raise when it contains a disallowed character."""
    if not is_valid_template_name(name):
        raise InstantiateError(ErrorKind.INVALID_TEMPLATE_NAME, {"template": name})
    return name


def ensure_templates_dir(templates_dir: str | Path = TEMPLATES_DIR) -> Path:
    """Fail unless the templates directory exists relative to the working directory."""
    path = Path(templates_dir)
    if not path.is_dir():
        raise InstantiateError(ErrorKind.NOT_TOP_LEVEL, {"templates_dir": str(templates_dir)})
    return path


def template_path(name: str, *, templates_dir: str | Path = TEMPLATES_DIR, prefix: str = TEMPLATE_PREFIX) -> Path:
    """Resolve a template name to its file path.

    An empty name resolves to ``templates/template.``, which normally does not
    exist and so fails the lookup in :func:`resolve_template`.
    """
    return Path(templates_dir) / f"{prefix}{name}"


def resolve_template(name: str, *, templates_dir: str | Path = TEMPLATES_DIR, prefix: str = TEMPLATE_PREFIX) -> Path:
    """Return the template file for ``name``, failing when it is not a regular file."""
    path = template_path(name, templates_dir=templates_dir, prefix=prefix)
    if not path.is_file():
        raise InstantiateError(ErrorKind.TEMPLATE_NOT_FOUND, {"template": name, "path": str(path)})
    return path


def list_templates(templates_dir: str | Path = TEMPLATES_DIR, *, prefix: str = TEMPLATE_PREFIX) -> list[str]:
    """List template names that can be selected with ``-t``."""
    directory = Path(templates_dir)
    if not directory.is_dir():
        return []
    names = []
    for entry in directory.iterdir():
        if not entry.is_file() or not entry.name.startswith(prefix):
            continue
        name = entry.name[len(prefix):]
        if is_valid_template_name(name):
            names.append(name)
    return sorted(names)
