"""Models for Vite's build manifest and resolution of entrypoints into resources.

See https://vitejs.dev/guide/backend-integration for the manifest format.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Final

from anyio import Path as APath
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from in_vite.errors import ManifestIOError, ManifestParseError
from in_vite.resource import Resource

if TYPE_CHECKING:
    from collections.abc import Iterator
    from os import PathLike

logger = logging.getLogger(__name__)

_MODULE_SUFFIXES: Final[tuple[str, ...]] = (".js", ".jsx", ".ts", ".tsx")


class Chunk(BaseModel):
    """One build output of the manifest, keyed by its source path."""

    model_config = ConfigDict(alias_generator=to_camel, strict=True, frozen=True, extra="ignore")

    file: str
    src: str | None = None
    css: list[str] = Field(default_factory=list)
    assets: list[str] = Field(default_factory=list)
    is_entry: bool = False
    is_dynamic_entry: bool = False
    imports: list[str] = Field(default_factory=list)
    dynamic_imports: list[str] = Field(default_factory=list)


_CHUNKS: Final[TypeAdapter[dict[str, Chunk]]] = TypeAdapter(dict[str, Chunk])


class Manifest(Mapping[str, Chunk]):
    """Read-only view over a parsed manifest."""

    __slots__ = ("_chunks",)

    def __init__(self, chunks: Mapping[str, Chunk]) -> None:
        self._chunks = dict(chunks)

    @classmethod
    def from_json(cls, source: str | bytes) -> Manifest:
        try:
            chunks = _CHUNKS.validate_json(source)
        except ValidationError as exc:
            msg = f"The manifest is not a valid Vite manifest: {exc}"
            raise ManifestParseError(msg) from exc
        return cls(chunks)

    @classmethod
    def from_path(cls, path: str | PathLike[str]) -> Manifest:
        try:
            source = Path(path).read_bytes()
        except OSError as exc:
            msg = f"The manifest (i.e. {path}) could not be read"
            raise ManifestIOError(msg) from exc
        logger.debug("Loaded manifest from %s", path)
        return cls.from_json(source)

    @classmethod
    async def afrom_path(cls, path: str | PathLike[str]) -> Manifest:
        try:
            source = await APath(path).read_bytes()
        except OSError as exc:
            msg = f"The manifest (i.e. {path}) could not be read"
            raise ManifestIOError(msg) from exc
        logger.debug("Loaded manifest from %s", path)
        return cls.from_json(source)

    def __getitem__(self, key: str) -> Chunk:
        return self._chunks[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._chunks)!r})"

    def resolve_resources(self, entrypoint: str) -> list[Resource]:
        """Return the sorted resources required to include ``entrypoint``.

        Unknown entrypoints and chunks that are not entries resolve to an empty
        list rather than an error.
        """
        chunk = self._chunks.get(entrypoint)
        if chunk is None:
            logger.debug("Entrypoint %s is not in the manifest", entrypoint)
            return []

        if not chunk.is_entry:
            logger.debug("Chunk %s is not an entry and cannot be rendered directly", entrypoint)
            return []

        resources: list[Resource] = []
        self._resolve_imports(resources, entrypoint, chunk)
        resources.sort()
        return resources

    def _resolve_imports(self, resources: list[Resource], key: str, chunk: Chunk) -> None:
        # Depth-first over an explicit stack; ``path`` holds the keys on the current descent.
        path = {key}
        resources.extend(Resource.stylesheet(css) for css in chunk.css)
        stack: list[tuple[str, Chunk, Iterator[str]]] = [(key, chunk, iter(chunk.imports))]

        while stack:
            current_key, current, imports = stack[-1]
            name = next(imports, None)
            if name is None:
                stack.pop()
                path.discard(current_key)
                self._resolve_chunk(resources, current_key, current)
                continue

            imported = self._chunks.get(name)
            if imported is None:
                logger.debug("Skipping import %s of %s: not in the manifest", name, current_key)
                continue
            if name in path:
                logger.warning("Skipping circular import %s of %s", name, current_key)
                continue

            path.add(name)
            resources.extend(Resource.stylesheet(css) for css in imported.css)
            stack.append((name, imported, iter(imported.imports)))

    @staticmethod
    def _resolve_chunk(resources: list[Resource], key: str, chunk: Chunk) -> None:
        # Imported chunks that are not entries are only hinted for preloading.
        if not chunk.is_entry:
            resources.append(Resource.preload_module(chunk.file))
            return

        if key.endswith(".css"):
            resources.append(Resource.stylesheet(chunk.file))
        elif key.endswith(_MODULE_SUFFIXES):
            resources.append(Resource.module(chunk.file))
