# -*- coding: utf-8 -*-
"""
denoisefilters - Windowed statistical denoising for RGB imagery.

Removes impulsive and Gaussian noise with four independent per-pixel spatial
estimators: a fixed Gaussian-weighted convolution, an integral-image
accelerated adaptive bilateral mean, a windowed median, and a min/max
pseudo-median. Colour channels are filtered separately; alpha is passed
through unchanged.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from denoisefilters.exceptions import (
    DenoiseError,
    ValidationError,
    InvalidDimensionError,
    InvalidRadiusError,
    ProcessorError,
)
from denoisefilters.vocabulary import (
    DenoiseAlgorithm,
    ImageModality,
    ProcessorCategory,
)
from denoisefilters.buffer import PixelBuffer
from denoisefilters.denoise import (
    available_algorithms,
    denoise,
    get_filter,
)

__all__ = [
    'DenoiseError',
    'ValidationError',
    'InvalidDimensionError',
    'InvalidRadiusError',
    'ProcessorError',
    'DenoiseAlgorithm',
    'ImageModality',
    'ProcessorCategory',
    'PixelBuffer',
    'available_algorithms',
    'denoise',
    'get_filter',
]
