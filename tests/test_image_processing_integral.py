# -*- coding: utf-8 -*-
"""
Integral Image Tests - Summed-area table correctness against brute force.

Every rectangle of small random, all-zero and all-255 images is summed both
from the tables (four corner reads) and directly, for values and for
squared values.

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

import numpy as np
import pytest

from denoisefilters.exceptions import InvalidDimensionError
from denoisefilters.image_processing.filters import IntegralImage
from denoisefilters.image_processing.filters._window import window_grid
from denoisefilters.image_processing.filters.integral import summed_area_table


def _planes():
    rng = np.random.default_rng(7)
    return {
        'random': rng.integers(0, 256, size=(6, 7), dtype=np.uint8),
        'zeros': np.zeros((5, 4), dtype=np.uint8),
        'max': np.full((4, 6), 255, dtype=np.uint8),
    }


@pytest.fixture(params=['random', 'zeros', 'max'])
def plane(request):
    return _planes()[request.param]


class TestSummedAreaTable:
    """Test table layout invariants."""

    def test_shape_has_border(self, plane):
        """Tables are one row and one column larger than the image."""
        ii = IntegralImage(plane)
        rows, cols = plane.shape
        assert ii.integral.shape == (rows + 1, cols + 1)
        assert ii.integral2.shape == (rows + 1, cols + 1)

    def test_zero_first_row_and_column(self, plane):
        """Row 0 and column 0 are all zero."""
        ii = IntegralImage(plane)
        for table in (ii.integral, ii.integral2):
            assert not table[0, :].any()
            assert not table[:, 0].any()

    def test_entry_is_prefix_sum(self, plane):
        """integral[y, x] sums rows < y and columns < x."""
        ii = IntegralImage(plane)
        values = plane.astype(np.int64)
        rows, cols = plane.shape
        for y in range(rows + 1):
            for x in range(cols + 1):
                assert ii.integral[y, x] == values[:y, :x].sum()
                assert ii.integral2[y, x] == (values[:y, :x] ** 2).sum()

    def test_recurrence(self):
        """S[y, x] = S[y - 1, x] + running row sum up to x."""
        values = np.arange(12, dtype=np.int64).reshape(3, 4)
        table = summed_area_table(values)
        for y in range(1, 4):
            for x in range(1, 5):
                assert table[y, x] == table[y - 1, x] + values[y - 1, :x].sum()

    def test_keeps_raw_planes(self, plane):
        """Raw samples are retained for second-pass reads."""
        ii = IntegralImage(plane)
        np.testing.assert_array_equal(ii.planes, plane)

    def test_empty_raises(self):
        """A plane with no columns has no table."""
        with pytest.raises(InvalidDimensionError):
            IntegralImage(np.zeros((3, 0), dtype=np.uint8))


class TestWindowSum:
    """Test O(1) rectangle sums against brute force."""

    def test_every_rectangle(self, plane):
        """Four-corner sums match direct sums for all rectangles."""
        ii = IntegralImage(plane)
        values = plane.astype(np.int64)
        rows, cols = plane.shape
        for y0 in range(rows):
            for x0 in range(cols):
                for kh in range(1, rows - y0 + 1):
                    for kw in range(1, cols - x0 + 1):
                        block = values[y0:y0 + kh, x0:x0 + kw]
                        assert ii.window_sum(x0, y0, kw, kh) == block.sum()
                        assert ii.window_sum(x0, y0, kw, kh, squared=True) \
                            == (block ** 2).sum()

    def test_max_image_window(self):
        """All-255 window sum is 255 * area, squared 65025 * area."""
        ii = IntegralImage(np.full((8, 8), 255, dtype=np.uint8))
        assert ii.window_sum(1, 2, 5, 4) == 255 * 20
        assert ii.window_sum(1, 2, 5, 4, squared=True) == 65025 * 20

    def test_vectorised_matches_scalar(self, plane):
        """Array arguments give one sum per clamped window."""
        ii = IntegralImage(plane)
        rows, cols = plane.shape
        x0, y0, kw, kh = window_grid(rows, cols, 2)
        sums = ii.window_sum(x0, y0, kw, kh)
        assert sums.shape == plane.shape
        for y in range(rows):
            for x in range(cols):
                assert sums[y, x] == ii.window_sum(
                    int(x0[0, x]), int(y0[y, 0]), int(kw[0, x]), int(kh[y, 0])
                )


class TestChannelStack:
    """Test tables built from a PixelBuffer."""

    def test_from_buffer_shape(self, random_buffer):
        """Three channels give (3, H + 1, W + 1) tables."""
        ii = IntegralImage.from_buffer(random_buffer)
        h, w = random_buffer.shape
        assert ii.integral.shape == (3, h + 1, w + 1)
        assert ii.shape == (h, w)

    def test_per_channel_sums(self, random_buffer):
        """Window sums are returned per channel."""
        ii = IntegralImage.from_buffer(random_buffer)
        sums = ii.window_sum(2, 3, 4, 5)
        expected = random_buffer.planes[:, 3:8, 2:6].astype(np.int64).sum(
            axis=(1, 2))
        np.testing.assert_array_equal(sums, expected)
