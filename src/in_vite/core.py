"""Mode-aware rendering of Vite entrypoints into HTML."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from markupsafe import Markup

from in_vite.config import DEFAULT_HOST, DEFAULT_MANIFEST_PATH, ViteMode, ViteSettings
from in_vite.manifest import Manifest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from in_vite.resource import Resource

logger = logging.getLogger(__name__)

_REACT_REFRESH_TEMPLATE: Final[str] = """\
<script type="module">
import RefreshRuntime from "{host}/@react-refresh"
RefreshRuntime.injectIntoGlobalHook(window)
window.$RefreshReg$ = () => {{}}
window.$RefreshSig$ = () => (type) => type
window.__vite_plugin_react_preamble_installed__ = true
</script>"""


def _normalize_entrypoints(resources: object) -> list[str]:
    if resources is None:
        msg = "Missing argument 'resources' in vite function."
        raise TypeError(msg)

    if isinstance(resources, str):
        return [resources]

    if isinstance(resources, Iterable) and not isinstance(resources, Mapping):
        entrypoints = list(resources)
        if all(isinstance(entry, str) for entry in entrypoints):
            return entrypoints

    msg = "The argument 'resources' must be either a string or a list of strings."
    raise TypeError(msg)


def _render(resources: list[Resource]) -> str:
    resources.sort()
    return "\n".join(resource.to_html() for resource in resources)


@dataclass(frozen=True, slots=True, kw_only=True)
class Vite:
    """Resolves entrypoints into the tags needed to load them.

    In development the tags point at the Vite dev server and the manifest is
    never read. In production every call loads the manifest, either from
    ``manifest_source`` or from the file at ``manifest_path``.
    """

    host: str = DEFAULT_HOST
    manifest_path: Path = DEFAULT_MANIFEST_PATH
    manifest_source: str | None = None
    mode: ViteMode = ViteMode.DEVELOPMENT

    @classmethod
    def from_settings(cls, settings: ViteSettings | None = None) -> Vite:
        """Build a facade from ``VITE_*`` environment settings."""
        settings = ViteSettings() if settings is None else settings
        return cls(
            host=settings.host,
            manifest_path=settings.manifest_path,
            manifest_source=settings.manifest_source,
            mode=settings.mode,
        )

    @property
    def react_refresh(self) -> ViteReactRefresh:
        return ViteReactRefresh(host=self.host, mode=self.mode)

    def _load_manifest(self) -> Manifest:
        if self.manifest_source is not None:
            return Manifest.from_json(self.manifest_source)
        return Manifest.from_path(self.manifest_path)

    async def _aload_manifest(self) -> Manifest:
        if self.manifest_source is not None:
            return Manifest.from_json(self.manifest_source)
        return await Manifest.afrom_path(self.manifest_path)

    def _development_html(self, entrypoints: Iterable[str]) -> str:
        lines = [f'<script type="module" src="{self.host}/@vite/client"></script>']
        lines.extend(f'<script type="module" src="{self.host}/{entry}"></script>' for entry in entrypoints)
        return "\n".join(lines)

    @staticmethod
    def _production_html(manifest: Manifest, entrypoints: Iterable[str]) -> str:
        # Resources shared between entrypoints are intentionally kept once per entrypoint.
        resources = [resource for entry in entrypoints for resource in manifest.resolve_resources(entry)]
        return _render(resources)

    def to_html(self, entrypoints: Iterable[str]) -> str:
        """Render the tags for ``entrypoints``.

        Raises ``ManifestIOError`` or ``ManifestParseError`` in production when
        the manifest cannot be loaded.
        """
        logger.debug("Rendering %s in %s mode", entrypoints, self.mode)
        if self.mode == ViteMode.DEVELOPMENT:
            return self._development_html(entrypoints)
        return self._production_html(self._load_manifest(), entrypoints)

    async def ato_html(self, entrypoints: Iterable[str]) -> str:
        """Like :meth:`to_html`, reading the manifest file without blocking the event loop."""
        logger.debug("Rendering %s in %s mode", entrypoints, self.mode)
        if self.mode == ViteMode.DEVELOPMENT:
            return self._development_html(entrypoints)
        return self._production_html(await self._aload_manifest(), entrypoints)

    def __call__(self, resources: str | Sequence[str] | None = None) -> Markup:
        return Markup(self.to_html(_normalize_entrypoints(resources)))  # noqa: S704


@dataclass(frozen=True, slots=True, kw_only=True)
class ViteReactRefresh:
    """Preamble required by ``@vitejs/plugin-react`` when served by the dev server."""

    host: str = DEFAULT_HOST
    mode: ViteMode = ViteMode.DEVELOPMENT

    def react_refresh(self) -> str:
        if self.mode == ViteMode.DEVELOPMENT:
            return _REACT_REFRESH_TEMPLATE.format(host=self.host)
        return ""

    def __call__(self) -> Markup:
        return Markup(self.react_refresh())  # noqa: S704
