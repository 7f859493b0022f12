from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class ResourceKind(IntEnum):
    # Declaration order is render order: stylesheets, entry modules, then preload hints.
    STYLESHEET = 0
    MODULE = 1
    PRELOAD_MODULE = 2


_TEMPLATES: Final[dict[ResourceKind, str]] = {
    ResourceKind.STYLESHEET: '<link rel="stylesheet" href="{uri}" />',
    ResourceKind.MODULE: '<script type="module" src="{uri}"></script>',
    ResourceKind.PRELOAD_MODULE: '<link rel="modulepreload" href="{uri}" />',
}


@dataclass(frozen=True, slots=True, order=True)
class Resource:
    """A single asset required to load an entrypoint.

    Resources order by kind first and by uri second, so sorting a list of them
    yields stable output independent of the order the manifest was walked in.
    """

    kind: ResourceKind
    uri: str

    @classmethod
    def stylesheet(cls, uri: str) -> Resource:
        return cls(ResourceKind.STYLESHEET, uri)

    @classmethod
    def module(cls, uri: str) -> Resource:
        return cls(ResourceKind.MODULE, uri)

    @classmethod
    def preload_module(cls, uri: str) -> Resource:
        return cls(ResourceKind.PRELOAD_MODULE, uri)

    def to_html(self) -> str:
        """Render the tag that includes this resource. The uri is not escaped."""
        return _TEMPLATES[self.kind].format(uri=self.uri)
