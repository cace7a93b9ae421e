#!/usr/bin/env python3
"""
Image to ASCII Converter - Region Sampler
=========================================
This module partitions an image into a grid of sampling regions and averages
the luminance of the pixels inside each one.

Two layouts are supported:

- area based: ``C x R`` regions of real-valued size ``W / C`` by ``H / R``
- fixed block: regions of ``bw x bh`` pixels walked from the top-left corner,
  ragged at the right and bottom edges

Both reduce to a list of integer column edges and row edges. Pixel ``x``
belongs to column ``i`` when ``x_edges[i] <= x < x_edges[i + 1]``, so every
pixel is counted in exactly one region.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _segment_sums(values: np.ndarray, edges: List[int], axis: int) -> np.ndarray:
    """
    Sum ``values`` between consecutive ``edges`` along ``axis``.

    A trailing zero slice is padded on so a start index equal to the extent
    stays valid. Empty segments come back as garbage and must be masked by
    the caller.
    """
    pad = [(0, 0)] * values.ndim
    pad[axis] = (0, 1)
    padded = np.pad(values, pad)
    starts = np.asarray(edges[:-1], dtype=np.intp)
    return np.add.reduceat(padded, starts, axis=axis)


def _safe_mean(sums: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """``sums / counts`` with 0.0 wherever a region holds no pixels."""
    result = np.zeros(counts.shape, dtype=np.float64)
    np.divide(sums, counts, out=result, where=counts > 0)
    return result


@dataclass(frozen=True)
class SamplingRegion:
    """A rectangle in pixel space with real-valued origin and extent."""
    column: int
    row: int
    x: float
    y: float
    width: float
    height: float
    x_start: int = 0        # Integer pixel bounds, clipped to the image
    x_end: int = 0
    y_start: int = 0
    y_end: int = 0

    def pixel_bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(x_start, x_end, y_start, y_end)`` as half-open ranges."""
        return self.x_start, self.x_end, self.y_start, self.y_end

    @property
    def pixel_count(self) -> int:
        return max(0, self.x_end - self.x_start) * max(0, self.y_end - self.y_start)


class RegionSampler:
    """Grid of sampling regions covering a ``width x height`` image."""

    def __init__(self, width: int, height: int,
                 x_edges: List[int], y_edges: List[int],
                 region_width: float, region_height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.x_edges = x_edges
        self.y_edges = y_edges
        self.region_width = region_width
        self.region_height = region_height

    @property
    def columns(self) -> int:
        return len(self.x_edges) - 1

    @property
    def rows(self) -> int:
        return len(self.y_edges) - 1

    @classmethod
    def from_grid(cls, width: int, height: int,
                  columns: int, rows: int) -> 'RegionSampler':
        """
        Area-based layout with ``columns x rows`` regions.

        Edge ``i`` is ``ceil(i * width / columns)``, computed in integers so
        that region boundaries never drift from floating point error.
        """
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Grid size must be positive, got {columns}x{rows}")
        x_edges = [min(width, _ceil_div(i * width, columns)) for i in range(columns + 1)]
        y_edges = [min(height, _ceil_div(j * height, rows)) for j in range(rows + 1)]
        return cls(width, height, x_edges, y_edges,
                   width / columns, height / rows)

    @classmethod
    def from_blocks(cls, width: int, height: int,
                    block_width: int = 1, block_height: int = 2) -> 'RegionSampler':
        """Fixed-block layout: one region per ``block_width x block_height`` pixels."""
        if block_width <= 0 or block_height <= 0:
            raise ValueError(f"Block size must be positive, got {block_width}x{block_height}")
        columns = _ceil_div(width, block_width)
        rows = _ceil_div(height, block_height)
        x_edges = [min(width, i * block_width) for i in range(columns + 1)]
        y_edges = [min(height, j * block_height) for j in range(rows + 1)]
        return cls(width, height, x_edges, y_edges,
                   float(block_width), float(block_height))

    def region(self, column: int, row: int) -> SamplingRegion:
        """Region for grid cell (``column``, ``row``)."""
        return SamplingRegion(
            column=column,
            row=row,
            x=column * self.region_width,
            y=row * self.region_height,
            width=self.region_width,
            height=self.region_height,
            x_start=self.x_edges[column],
            x_end=self.x_edges[column + 1],
            y_start=self.y_edges[row],
            y_end=self.y_edges[row + 1],
        )

    def regions(self) -> Iterator[SamplingRegion]:
        """Yield every region in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield self.region(column, row)

    @staticmethod
    def region_luminance(luma_map: np.ndarray, region: SamplingRegion) -> float:
        """Mean luminance inside ``region``, or 0.0 if it holds no pixels."""
        x0, x1, y0, y1 = region.pixel_bounds()
        block = luma_map[y0:y1, x0:x1]
        if block.size == 0:
            return 0.0
        return float(np.mean(block))

    def average_row(self, luma_map: np.ndarray, row: int) -> np.ndarray:
        """Mean luminance of every region in one grid row."""
        y0, y1 = self.y_edges[row], self.y_edges[row + 1]
        counts = np.diff(self.x_edges) * (y1 - y0)
        if y1 <= y0:
            return np.zeros(self.columns, dtype=np.float64)
        sums = _segment_sums(luma_map[y0:y1].sum(axis=0), self.x_edges, axis=0)
        return _safe_mean(sums, counts)

    def average(self, luma_map: np.ndarray) -> np.ndarray:
        """
        Average a per-pixel luminance map over every region.

        Args:
            luma_map: Array of shape (height, width)

        Returns:
            Array of shape (rows, columns)
        """
        if luma_map.shape != (self.height, self.width):
            raise ValueError(
                f"Luminance map shape {luma_map.shape} does not match image "
                f"size {self.width}x{self.height}")
        row_sums = _segment_sums(luma_map, self.y_edges, axis=0)
        sums = _segment_sums(row_sums, self.x_edges, axis=1)
        counts = np.outer(np.diff(self.y_edges), np.diff(self.x_edges))
        return _safe_mean(sums, counts)
