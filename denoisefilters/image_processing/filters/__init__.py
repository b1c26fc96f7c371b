# -*- coding: utf-8 -*-
"""
Spatial Denoising Filters - Windowed statistical estimators for RGB imagery.

Four independent per-pixel estimators, each a ``ChannelwiseTransformMixin``
+ ``ImageTransform`` that filters the red, green and blue channels
separately and returns a freshly allocated image of the same size.

Linear Filter
    ``GaussianFilter`` — fixed Gaussian kernel, skip-and-renormalise borders

Adaptive Filter
    ``AdaptiveMeanFilter`` — integral-image statistics with bilateral
    reweighting

Rank Filters
    ``MedianFilter`` — per-channel windowed median
    ``PseudoMedianFilter`` — midpoint of window minimum and maximum

Building Blocks
    ``IntegralImage`` — sum and sum-of-squares summed-area tables
    ``window`` — clamped window bounds shared by the non-Gaussian filters
    ``gaussian_kernel`` — normalised square Gaussian kernel

Dependencies
------------
scipy

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

from denoisefilters.image_processing.filters._window import window
from denoisefilters.image_processing.filters.integral import IntegralImage
from denoisefilters.image_processing.filters.linear import (
    GaussianFilter,
    gaussian_kernel,
)
from denoisefilters.image_processing.filters.adaptive import AdaptiveMeanFilter
from denoisefilters.image_processing.filters.rank import (
    MedianFilter,
    PseudoMedianFilter,
)

__all__ = [
    'GaussianFilter',
    'AdaptiveMeanFilter',
    'MedianFilter',
    'PseudoMedianFilter',
    'IntegralImage',
    'gaussian_kernel',
    'window',
]
