"""Bindings that expose :class:`in_vite.Vite` inside template engines."""
