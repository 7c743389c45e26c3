"""
Sampling sinks: write-only consumers of the (x, y) samples produced by a plot sweep.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

import matplotlib
import numpy as np


class SamplingSink(ABC):

    @abstractmethod
    def render(self, title: str, x_label: str, y_label: str,
               xs: Sequence[float], ys: Sequence[float]) -> None:
        pass


@dataclass(frozen=True)
class RenderedPlot:
    title: str
    x_label: str
    y_label: str
    xs: np.ndarray
    ys: np.ndarray

    @property
    def points(self) -> List[tuple]:
        return list(zip(self.xs.tolist(), self.ys.tolist()))


class RecordingSink(SamplingSink):
    """Keeps every render call in memory"""

    def __init__(self):
        self.plots: List[RenderedPlot] = []

    def render(self, title, x_label, y_label, xs, ys):
        self.plots.append(RenderedPlot(title, x_label, y_label,
                                       np.array(xs, dtype=np.float64),
                                       np.array(ys, dtype=np.float64)))

    @property
    def last(self) -> Optional[RenderedPlot]:
        return self.plots[-1] if self.plots else None


class MatplotlibSink(SamplingSink):
    """Draws each sweep as a scatter plot; saves it when an output path is given.

    ``output_path`` may contain ``{index}``, replaced with the running plot number, so
    several sweeps on one sink do not overwrite each other.
    """

    def __init__(self, output_path: Optional[str] = None, figsize=(8, 6), dpi: int = 150,
                 show: bool = False):
        self.output_path = output_path
        self.figsize = figsize
        self.dpi = dpi
        self.show = show
        self.saved_paths: List[str] = []

        # Headless unless the caller already picked a backend by importing pyplot
        if not show and 'matplotlib.pyplot' not in sys.modules:
            matplotlib.use('Agg')

    def render(self, title, x_label, y_label, xs, ys):
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.scatter(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64),
                   s=12, color='blue', zorder=2)
        ax.set_xlabel(x_label, fontsize=12)
        ax.set_ylabel(y_label, fontsize=12)
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold')
        ax.grid(True, alpha=0.3)
        plt.tight_layout()

        if self.output_path is not None:
            filepath = self.output_path.format(index=len(self.saved_paths) + 1)
            plt.savefig(filepath, dpi=self.dpi, bbox_inches='tight')
            self.saved_paths.append(filepath)

        if self.show:
            plt.show()
        plt.close(fig)
