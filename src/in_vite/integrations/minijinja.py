"""Registers a :class:`~in_vite.core.Vite` instance in a minijinja environment.

Example::

    env = Environment()
    register(env, Vite.from_settings())
    env.render_str('{{ vite(resources=["views/foo.js"]) }}')
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minijinja import Environment

    from in_vite.core import Vite


def register(
    env: Environment,
    vite: Vite,
    *,
    name: str = "vite",
    react_refresh_name: str = "vite_react_refresh",
) -> Environment:
    env.add_global(name, vite)
    env.add_global(react_refresh_name, vite.react_refresh)
    return env
