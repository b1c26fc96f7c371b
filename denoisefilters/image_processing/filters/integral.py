# -*- coding: utf-8 -*-
"""
Integral Image - Summed-area tables for O(1) window sums.

``IntegralImage`` builds two summed-area tables from uint8 samples in one
pass: ``integral`` over the values and ``integral2`` over their squares.
Tables carry one extra leading row and column of zeros, so for an image of
``rows x cols`` they have shape ``(rows + 1, cols + 1)`` and
``integral[y, x]`` is the sum over all pixels with row ``< y`` and column
``< x``. Any rectangle sum then follows from four corner reads::

    S(x1, y1) - S(x0, y1) - S(x1, y0) + S(x0, y0)

The tables are built with the usual recurrence: a running sum along each
row, added to the table entry directly above. Row-wise ``cumsum`` followed
by column-wise ``cumsum`` evaluates exactly that. Accumulation is int64,
which holds squared sums for any realistic image size without overflow.

A raw copy of the samples (``planes``) is kept alongside the tables for
random access by second-pass estimators.

Leading axes are carried through, so a ``(3, rows, cols)`` channel stack
yields ``(3, rows + 1, cols + 1)`` tables.

Dependencies
------------
numpy

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
from typing import Tuple, Union

# Third-party
import numpy as np

# denoisefilters internal
from denoisefilters.buffer import PixelBuffer, as_channel_stack

IntOrArray = Union[int, np.ndarray]


def summed_area_table(values: np.ndarray) -> np.ndarray:
    """Zero-bordered summed-area table over the last two axes of *values*."""
    values = np.asarray(values, dtype=np.int64)
    table = np.zeros(
        values.shape[:-2] + (values.shape[-2] + 1, values.shape[-1] + 1),
        dtype=np.int64,
    )
    # Running row sums, then accumulate each row onto the one above.
    table[..., 1:, 1:] = values.cumsum(axis=-1).cumsum(axis=-2)
    return table


class IntegralImage:
    """Sum and sum-of-squares tables for a plane or a channel stack.

    Parameters
    ----------
    planes : np.ndarray
        2D ``(rows, cols)`` plane or 3D ``(bands, rows, cols)`` stack of
        samples in ``[0, 255]``.

    Raises
    ------
    InvalidDimensionError
        If rows or cols is zero.

    Examples
    --------
    >>> ii = IntegralImage(plane)
    >>> ii.window_sum(2, 3, 5, 5)             # sum of plane[3:8, 2:7]
    >>> ii.window_sum(2, 3, 5, 5, squared=True)
    """

    def __init__(self, planes: np.ndarray) -> None:
        samples = as_channel_stack(planes)
        self.planes = np.array(samples, copy=True)
        self.planes.flags.writeable = False
        wide = samples.astype(np.int64)
        self.integral = summed_area_table(wide)
        self.integral2 = summed_area_table(wide * wide)

    @classmethod
    def from_buffer(cls, buffer: PixelBuffer) -> 'IntegralImage':
        """Tables for all three channels of *buffer*, shape ``(3, H+1, W+1)``."""
        return cls(buffer.planes)

    @property
    def shape(self) -> Tuple[int, int]:
        """``(rows, cols)`` of the source samples."""
        return self.planes.shape[-2], self.planes.shape[-1]

    def window_sum(
        self,
        x0: IntOrArray,
        y0: IntOrArray,
        kw: IntOrArray,
        kh: IntOrArray,
        squared: bool = False,
    ) -> Union[np.int64, np.ndarray]:
        """Sum over the rectangle ``[x0, x0 + kw) x [y0, y0 + kh)``.

        All four arguments may be scalars or broadcastable integer arrays,
        in which case one sum per broadcast element is returned (with any
        leading channel axis in front).

        Parameters
        ----------
        x0, y0 : int or np.ndarray
            Top-left column and row.
        kw, kh : int or np.ndarray
            Rectangle width and height.
        squared : bool
            Query ``integral2`` instead of ``integral``.
        """
        t = self.integral2 if squared else self.integral
        x1 = x0 + kw
        y1 = y0 + kh
        return t[..., y1, x1] - t[..., y1, x0] - t[..., y0, x1] + t[..., y0, x0]
