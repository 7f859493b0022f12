"""Exceptions raised while loading a Vite manifest."""

from __future__ import annotations


class ViteError(RuntimeError):
    pass


class ManifestIOError(ViteError):
    """The manifest file is missing or could not be read."""


class ManifestParseError(ViteError):
    """The manifest is not valid JSON or does not match the manifest schema."""
