from in_vite.config import ViteMode, ViteSettings, guess_mode
from in_vite.core import Vite, ViteReactRefresh
from in_vite.errors import ManifestIOError, ManifestParseError, ViteError
from in_vite.manifest import Chunk, Manifest
from in_vite.resource import Resource, ResourceKind

__all__ = [
    "Chunk",
    "Manifest",
    "ManifestIOError",
    "ManifestParseError",
    "Resource",
    "ResourceKind",
    "Vite",
    "ViteError",
    "ViteMode",
    "ViteReactRefresh",
    "ViteSettings",
    "guess_mode",
]
