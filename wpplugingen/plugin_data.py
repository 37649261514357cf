"""Names and identifiers derived from a ``company/plugin-name`` project name."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import (
    ProjectNameError,
    capitalize_first_letter,
    last_part_of_project_name,
    split_on_capitals,
)


@dataclass(frozen=True)
class PluginData:
    """Values filled into the generated plugin files."""

    plugin_name: str
    slug: str
    description: str
    version: str
    author: str
    text_domain: str
    namespace_name: str
    class_prefix: str
    constant_prefix: str
    function_postfix: str


def _pascal_case(text: str, project_name: str) -> str:
    words = text.split("-")
    if any(not word for word in words):
        raise ProjectNameError(f"project name {project_name!r} contains an empty word")
    return "".join(capitalize_first_letter(word) for word in words)


def generate_class_prefix(project_name: str) -> str:
    """PHP class prefix, e.g. ``MyWordpressPlugin``."""
    return _pascal_case(last_part_of_project_name(project_name), project_name)


def generate_namespace(project_name: str) -> str:
    """PHP namespace, one segment per ``/``-separated part."""
    return "\\".join(_pascal_case(part, project_name) for part in project_name.split("/"))


def generate_constant_prefix(project_name: str) -> str:
    """Prefix for PHP constants, e.g. ``MY_WORDPRESS_PLUGIN``."""
    words = split_on_capitals(last_part_of_project_name(project_name))
    joined = "_".join(words).upper()
    return "_".join(joined.split("-"))


def generate_function_postfix(project_name: str) -> str:
    """Postfix for PHP functions, e.g. ``my_wordpress_plugin``."""
    words = split_on_capitals(last_part_of_project_name(project_name))
    joined = "_".join(words).lower()
    return "_".join(joined.split("-"))


def generate_plugin_name(project_name: str) -> str:
    """Human readable plugin name, e.g. ``My Wordpress Plugin``."""
    words = split_on_capitals(last_part_of_project_name(project_name))
    joined = " ".join(capitalize_first_letter(word) for word in words)
    return " ".join(capitalize_first_letter(word) for word in joined.split("-"))


def generate_slug(project_name: str) -> str:
    """Plugin slug, e.g. ``my-wordpress-plugin``."""
    words = split_on_capitals(last_part_of_project_name(project_name))
    return "-".join(word.lower() for word in words)


def generate_plugin_data(project_name: str) -> PluginData:
    """Derive every template value from ``project_name``."""
    plugin_name = generate_plugin_name(project_name)
    slug = generate_slug(project_name)
    class_prefix = generate_class_prefix(project_name)
    namespace = generate_namespace(project_name)
    constant_prefix = generate_constant_prefix(project_name)
    function_postfix = generate_function_postfix(project_name)
    return PluginData(
        plugin_name=plugin_name,
        slug=slug,
        description="A WordPress plugin",
        version="0.1.0",
        author="Your Name",
        text_domain=slug,
        namespace_name=namespace,
        class_prefix=class_prefix,
        constant_prefix=constant_prefix,
        function_postfix=function_postfix,
    )