"""Rendering of universe snapshots."""

from universe_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer2D"]
