"""2D snapshot renderer using matplotlib."""

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from pathlib import Path
from typing import Optional, Tuple


class Renderer2D:
    """Draws the x-y projection of a universe, one frame at a time."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        color_by_velocity: bool = True,
        size_by_mass: bool = True,
        title: str = "Universe (x-y)"
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            color_by_velocity: Color bodies by speed
            size_by_mass: Size bodies by log mass
            title: Axes title
        """
        self.figsize = figsize
        self.dpi = dpi
        self.color_by_velocity = color_by_velocity
        self.size_by_mass = size_by_mass
        self.title = title

        self.fig: Optional[Figure] = None
        self.ax = None

    def _initialize(self):
        if self.fig is None:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)

    def render(
        self,
        positions: np.ndarray,
        velocities: Optional[np.ndarray] = None,
        masses: Optional[np.ndarray] = None
    ):
        """Render a frame.

        Args:
            positions: Body positions (n, 3)
            velocities: Optional velocities for coloring
            masses: Optional masses for sizing
        """
        self._initialize()
        self.ax.clear()
        self.ax.set_aspect('equal')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_title(self.title)
        self.ax.grid(True, alpha=0.3)

        colors = None
        if self.color_by_velocity and velocities is not None and len(velocities):
            colors = np.linalg.norm(velocities, axis=1)

        sizes = 2.0
        if self.size_by_mass and masses is not None and len(masses):
            sizes = 1.0 + 2.0 * np.log10(np.maximum(masses, 1.0))

        self.ax.scatter(
            positions[:, 0], positions[:, 1], c=colors, s=sizes, cmap='plasma', linewidths=0
        )

    def save(self, output_path: str):
        """Write the current frame to an image file."""
        if self.fig is None:
            raise RuntimeError("Nothing rendered yet")
        self.fig.savefig(Path(output_path), bbox_inches='tight')

    def close(self):
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None


def use_headless_backend():
    """Switch matplotlib to the non-interactive Agg backend."""
    matplotlib.use('Agg')
