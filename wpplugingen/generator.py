"""Creation of a plugin project on disk."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .composer import write_composer_json
from .plugin_data import PluginData, generate_plugin_data
from .utils import ProjectNameError

_INVALID_CHARACTERS = (".", "'", ",")

DIRECTORIES = (
    "",
    "includes",
    "public",
    "public/css",
    "public/js",
    "admin",
    "admin/css",
    "admin/js",
    "api",
    "languages",
    "vendor",
)


def contains_invalid_characters(s: str) -> bool:
    """Tell whether ``s`` holds a character not allowed in project names."""
    return any(char in s for char in _INVALID_CHARACTERS)


def create_directories(export_dir: str | Path) -> None:
    """Create the plugin's directory tree below ``export_dir``."""
    for directory in DIRECTORIES:
        (Path(export_dir) / directory).mkdir(mode=0o755, parents=True, exist_ok=True)


def run_composer_install(export_dir: str | Path) -> None:
    """Run ``composer install`` inside ``export_dir``."""
    try:
        subprocess.run(
            ["composer", "install"],
            cwd=export_dir,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"Error running composer install: {exc}")
        raise


def generate_plugin(export_dir: str | Path, project_name: str) -> PluginData:
    """Lay out a new plugin project in ``export_dir`` and install its packages."""
    if contains_invalid_characters(project_name):
        raise ProjectNameError("project name contains invalid characters")
    data = generate_plugin_data(project_name)
    create_directories(export_dir)
    write_composer_json(export_dir, project_name, [])
    run_composer_install(export_dir)
    return data