"""Derive WordPress plugin names and lay out a plugin project with composer.json."""

__version__ = "0.1.0"