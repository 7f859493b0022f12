from __future__ import annotations

from pathlib import Path

import pytest

from in_vite.config import MODE_VARIABLES, ViteMode
from in_vite.core import Vite
from in_vite.manifest import Manifest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for variable in (*MODE_VARIABLES, "VITE_HOST", "VITE_MANIFEST_PATH", "VITE_MANIFEST_SOURCE", "VITE_MODE"):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def sample_manifest_path():
    return Path(__file__).parent / "fixtures" / "sample_manifest.json"


@pytest.fixture
def sample_manifest_source(sample_manifest_path):
    return sample_manifest_path.read_text(encoding="utf-8")


@pytest.fixture
def manifest(sample_manifest_source):
    return Manifest.from_json(sample_manifest_source)


@pytest.fixture
def production_vite(sample_manifest_source):
    return Vite(mode=ViteMode.PRODUCTION, manifest_source=sample_manifest_source)


@pytest.fixture
def development_vite(sample_manifest_source):
    return Vite(mode=ViteMode.DEVELOPMENT, manifest_source=sample_manifest_source)
