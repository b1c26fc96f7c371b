# -*- coding: utf-8 -*-
"""
Window Geometry - Border-clamped neighbourhood bounds shared by the estimators.

For an output pixel ``(x, y)`` and radius ``r`` the window spans columns
``max(x - r, 0) .. min(x + r, W - 1)`` and the matching rows. Near a border
the window shrinks instead of wrapping or padding, so it always lies inside
the image and always holds at least the centre pixel.

``window`` is the scalar form. ``axis_bounds`` and ``window_grid`` compute
the same bounds for every pixel at once, and ``window_offsets`` walks the
``(2r + 1)^2`` shifts of a plane with a mask of the taps that fall inside
the image. For any pixel, the valid taps are exactly its clamped window.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Iterator, Tuple

# Third-party
import numpy as np


def window(
    x: int, y: int, radius: int, width: int, height: int,
) -> Tuple[int, int, int, int]:
    """Clamped window around pixel ``(x, y)``.

    Parameters
    ----------
    x, y : int
        Column and row of the output pixel.
    radius : int
        Requested window radius, >= 0.
    width, height : int
        Image size.

    Returns
    -------
    tuple of int
        ``(x_start, y_start, kw, kh)`` with ``kw, kh >= 1``.

    Examples
    --------
    >>> window(0, 0, 3, 10, 10)
    (0, 0, 4, 4)
    >>> window(5, 5, 3, 10, 10)
    (2, 2, 7, 7)
    """
    x_start = max(x - radius, 0)
    y_start = max(y - radius, 0)
    kw = min(x + radius, width - 1) - x_start + 1
    kh = min(y + radius, height - 1) - y_start + 1
    return x_start, y_start, kw, kh


def axis_bounds(length: int, radius: int) -> Tuple[np.ndarray, np.ndarray]:
    """Window start and extent for every position along one axis.

    Returns
    -------
    tuple of np.ndarray
        ``(start, extent)``, both int64 arrays of size *length*.
    """
    pos = np.arange(length, dtype=np.int64)
    start = np.maximum(pos - radius, 0)
    extent = np.minimum(pos + radius, length - 1) - start + 1
    return start, extent


def effective_radii(
    radius: int, height: int, width: int,
) -> Tuple[int, int]:
    """Per-axis radii beyond which a clamped window cannot grow.

    A radius of ``length - 1`` already spans the whole axis from any
    position, so ``(min(radius, height - 1), min(radius, width - 1))``
    yields the same clamped windows as *radius* with a smaller footprint.
    """
    return min(radius, height - 1), min(radius, width - 1)


def window_grid(
    height: int, width: int, radius: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Clamped windows for every pixel of a ``height x width`` image.

    Returns
    -------
    tuple of np.ndarray
        ``(x_start, y_start, kw, kh)``. Column quantities have shape
        ``(1, width)`` and row quantities ``(height, 1)`` so they
        broadcast to the full image.
    """
    x_start, kw = axis_bounds(width, radius)
    y_start, kh = axis_bounds(height, radius)
    return (x_start[np.newaxis, :], y_start[:, np.newaxis],
            kw[np.newaxis, :], kh[:, np.newaxis])


def window_offsets(
    plane: np.ndarray, radius: int,
) -> Iterator[Tuple[int, int, np.ndarray, np.ndarray]]:
    """Iterate over every tap of a ``(2r + 1) x (2r + 1)`` window.

    For each offset ``(dy, dx)`` yields the plane shifted so that element
    ``[y, x]`` holds ``plane[y + dy, x + dx]``, together with a boolean mask
    that is ``True`` where that source pixel lies inside the image. Samples
    under a ``False`` mask are zero.

    Parameters
    ----------
    plane : np.ndarray
        2D array, shape ``(rows, cols)``.
    radius : int
        Window radius, >= 0.

    Yields
    ------
    tuple
        ``(dy, dx, samples, valid)``; *samples* and *valid* are views with
        the shape of *plane* and must not be modified.
    """
    rows, cols = plane.shape
    padded = np.pad(plane, radius, mode='constant')
    inside = np.pad(np.ones(plane.shape, dtype=bool), radius, mode='constant')
    for dy in range(-radius, radius + 1):
        r0 = radius + dy
        for dx in range(-radius, radius + 1):
            c0 = radius + dx
            yield (dy, dx,
                   padded[r0:r0 + rows, c0:c0 + cols],
                   inside[r0:r0 + rows, c0:c0 + cols])
