"""Generation of the plugin's ``composer.json``."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path

from .utils import ProjectNameError, capitalize_first_letter, split_on_capitals

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class Author:
    """A package author as listed in ``composer.json``."""

    name: str
    email: str


def generate_project_name_slug(project_name: str) -> str:
    """Composer package name, e.g. ``company/my-project``."""
    parts = project_name.split("/")
    if len(parts) < 2:
        raise ProjectNameError(
            f"Expecting projectname format {{company}}/{{pluginname}}, got {project_name}"
        )
    return "/".join(
        "-".join(word.lower() for word in split_on_capitals(part)) for part in parts
    )


def _psr4_namespace(project_name: str) -> str:
    segments = (
        "".join(capitalize_first_letter(word) for word in part.split("-"))
        for part in project_name.split("/")
    )
    return "\\".join(segments) + "\\"


def _escape_html(text: str) -> str:
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def generate_composer_json(project_name: str, authors: Iterable[Author]) -> str:
    """Return the text of ``composer.json`` for ``project_name``."""
    name = generate_project_name_slug(project_name)
    namespace = _psr4_namespace(project_name)
    psr4 = {
        namespace: "includes/",
        namespace + "Public\\": "public/",
        namespace + "Admin\\": "admin/",
        namespace + "API\\": "api/",
    }
    document = {
        "name": name,
        "type": "project",
        "autoload": {"psr-4": dict(sorted(psr4.items()))},
        "authors": [asdict(author) for author in authors],
        "require-dev": {"php-stubs/wordpress-stubs": "^6.8"},
    }
    return _escape_html(json.dumps(document, indent=4, ensure_ascii=False))


def write_composer_json(
    export_dir: str | Path, project_name: str, authors: Iterable[Author]
) -> Path:
    """Write ``composer.json`` into ``export_dir`` and return its path."""
    content = generate_composer_json(project_name, authors)
    path = Path(export_dir) / "composer.json"
    path.write_text(content, encoding="utf-8")
    return path