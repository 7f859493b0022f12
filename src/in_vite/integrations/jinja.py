"""Registers a :class:`~in_vite.core.Vite` instance in a Jinja2 environment.

Example::

    env = Environment(autoescape=True)
    register(env, Vite.from_settings())
    env.from_string('{{ vite("views/foo.js") }}').render()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jinja2 import Environment

    from in_vite.core import Vite


def register(
    env: Environment,
    vite: Vite,
    *,
    name: str = "vite",
    react_refresh_name: str = "vite_react_refresh",
) -> Environment:
    env.globals[name] = vite
    env.globals[react_refresh_name] = vite.react_refresh
    return env
