# -*- coding: utf-8 -*-
"""
Denoise Entry Point Tests - Algorithm selection and RGBA round trips.

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

import logging

import numpy as np
import pytest

import denoisefilters
from denoisefilters import (
    DenoiseAlgorithm,
    InvalidDimensionError,
    InvalidRadiusError,
    PixelBuffer,
    ValidationError,
    available_algorithms,
    denoise,
    get_filter,
)
from denoisefilters.image_processing.filters import (
    AdaptiveMeanFilter,
    GaussianFilter,
    MedianFilter,
    PseudoMedianFilter,
)

ALGORITHMS = ['gauss', 'mean', 'median', 'pseudo_median']


class TestSelection:
    """Test algorithm lookup and filter construction."""

    def test_available(self):
        assert available_algorithms() == ALGORITHMS

    @pytest.mark.parametrize("name,cls", [
        ('gauss', GaussianFilter),
        ('mean', AdaptiveMeanFilter),
        ('median', MedianFilter),
        ('pseudo_median', PseudoMedianFilter),
    ])
    def test_get_filter_by_name(self, name, cls):
        assert isinstance(get_filter(name, radius=1), cls)

    def test_get_filter_by_enum(self):
        f = get_filter(DenoiseAlgorithm.MEAN, radius=2, mu=1.0, sigma=2.0)
        assert f.params == {'radius': 2, 'mu': 1.0, 'sigma': 2.0}

    def test_name_case_insensitive(self):
        assert isinstance(get_filter('Median'), MedianFilter)

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValidationError, match="Unknown denoise algorithm"):
            get_filter('bilateral')

    def test_unknown_parameter_raises(self):
        """Median has no sigma."""
        with pytest.raises(TypeError):
            get_filter('median', sigma=2.0)

    def test_version_exposed(self):
        assert denoisefilters.__version__ == "0.1.0"


class TestDenoise:
    """Test the one-call entry point."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_alpha_passed_through(self, name, rgba_image):
        out = denoise(rgba_image, name, radius=1)
        assert out.shape == rgba_image.shape
        assert out.dtype == np.uint8
        np.testing.assert_array_equal(out[..., 3], rgba_image[..., 3])

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_rgb_stays_rgb(self, name, rgba_image):
        out = denoise(rgba_image[..., :3], name, radius=1)
        assert out.shape == rgba_image[..., :3].shape

    @pytest.mark.parametrize("name", ALGORITHMS)
    def test_matches_filter_apply(self, name, random_buffer):
        """denoise() is get_filter().apply() plus raster conversion."""
        image = random_buffer.to_image()
        out = denoise(image, name, radius=2)
        expected = get_filter(name, radius=2).apply(random_buffer)
        np.testing.assert_array_equal(out, expected.to_image())

    def test_buffer_in_buffer_out(self, random_buffer):
        out = denoise(random_buffer, DenoiseAlgorithm.MEDIAN, radius=1)
        assert isinstance(out, PixelBuffer)

    def test_input_unchanged(self, rgba_image):
        before = rgba_image.copy()
        denoise(rgba_image, 'mean', radius=2)
        np.testing.assert_array_equal(rgba_image, before)

    def test_defaults_from_filter(self, rgba_image):
        """No parameters means the filter's own defaults."""
        out = denoise(rgba_image, 'pseudo_median')
        expected = PseudoMedianFilter(radius=3).apply(
            PixelBuffer.from_image(rgba_image))
        np.testing.assert_array_equal(out[..., :3], expected.to_image())

    def test_zero_size_raises(self):
        with pytest.raises(InvalidDimensionError):
            denoise(np.zeros((0, 5, 4), dtype=np.uint8), 'median')

    def test_gauss_radius_too_large_raises(self, rgba_image):
        with pytest.raises(InvalidRadiusError):
            denoise(rgba_image, 'gauss', radius=12)

    def test_alpha_out_of_range_raises(self, rgba_image):
        """A wide-integer raster with alpha 300 is rejected, not wrapped."""
        image = rgba_image.astype(np.int32)
        image[0, 0, 3] = 300
        with pytest.raises(ValidationError, match=r"\[0, 255\]"):
            denoise(image, 'median', radius=1)

    def test_wide_integer_alpha_preserved(self, rgba_image):
        out = denoise(rgba_image.astype(np.int32), 'median', radius=1)
        assert out.dtype == np.uint8
        np.testing.assert_array_equal(out[..., 3], rgba_image[..., 3])

    def test_failed_call_leaves_earlier_output_intact(self, rgba_image):
        first = denoise(rgba_image, 'median', radius=1)
        kept = first.copy()
        with pytest.raises(InvalidRadiusError):
            denoise(rgba_image, 'median', radius=-1)
        np.testing.assert_array_equal(first, kept)

    def test_progress_callback(self, rgba_image):
        seen = []
        denoise(rgba_image, 'gauss', progress_callback=seen.append, radius=1)
        assert seen[-1] == pytest.approx(1.0)

    def test_logs_timing(self, rgba_image, caplog):
        with caplog.at_level(logging.DEBUG, logger='denoisefilters.denoise'):
            denoise(rgba_image, 'median', radius=1)
        assert any('MedianFilter' in r.getMessage() for r in caplog.records)
