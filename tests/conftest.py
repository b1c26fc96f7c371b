# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic RGB(A) rasters and pixel buffers.

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

from denoisefilters.buffer import PixelBuffer


@pytest.fixture
def flat_buffer():
    """20x24 buffer, every pixel (37, 120, 201)."""
    planes = np.empty((3, 20, 24), dtype=np.uint8)
    planes[0], planes[1], planes[2] = 37, 120, 201
    return PixelBuffer(planes)


@pytest.fixture
def random_buffer():
    """16x18 buffer of uniformly random samples, fixed seed."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(3, 16, 18), dtype=np.uint8))


@pytest.fixture
def rgba_image():
    """(12, 15, 4) interleaved raster with a non-trivial alpha plane."""
    rng = np.random.default_rng(99)
    image = rng.integers(0, 256, size=(12, 15, 4), dtype=np.uint8)
    image[..., 3] = np.arange(12 * 15, dtype=np.uint8).reshape(12, 15)
    return image


@pytest.fixture
def salt_pepper_buffer():
    """40x40 flat grey (100) buffer with ~5% salt and pepper per channel."""
    rng = np.random.default_rng(42)
    planes = np.full((3, 40, 40), 100, dtype=np.uint8)
    mask = rng.random((3, 40, 40))
    planes[mask < 0.025] = 0
    planes[mask > 0.975] = 255
    return PixelBuffer(planes)


@pytest.fixture
def outlier_window_plane():
    """3x3 plane holding {0,0,0,0,100,0,0,0,200}."""
    return np.array([[0, 0, 0],
                     [0, 100, 0],
                     [0, 0, 200]], dtype=np.uint8)
