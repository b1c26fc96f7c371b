# -*- coding: utf-8 -*-
"""
Image Processing Module - Processor infrastructure, denoising filters, noise models.

All processors inherit from ``ImageProcessor``, which provides version
checking and ``typing.Annotated`` tunable parameters validated at
construction and on every per-call override.

Sub-modules
-----------
filters/
    The four windowed denoising estimators (Gaussian, adaptive mean,
    median, pseudo-median) plus window geometry and integral images.
noise.py
    Seeded impulse and Gaussian noise models.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
params.py
    ``Range``, ``Options``, ``Desc`` constraint markers.

Usage
-----
    >>> from denoisefilters.image_processing import MedianFilter, ImpulseNoise
    >>> noisy = ImpulseNoise(count=2000, seed=1).apply(buffer)
    >>> clean = MedianFilter(radius=1).apply(noisy)

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

from denoisefilters.image_processing.base import (
    ChannelwiseTransformMixin,
    ImageProcessor,
    ImageTransform,
)
from denoisefilters.image_processing.params import Desc, Options, ParamSpec, Range
from denoisefilters.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from denoisefilters.image_processing.filters import (
    AdaptiveMeanFilter,
    GaussianFilter,
    IntegralImage,
    MedianFilter,
    PseudoMedianFilter,
)
from denoisefilters.image_processing.noise import (
    GaussianNoise,
    ImpulseNoise,
    NoiseModel,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ChannelwiseTransformMixin',
    'processor_version',
    'processor_tags',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'GaussianFilter',
    'AdaptiveMeanFilter',
    'MedianFilter',
    'PseudoMedianFilter',
    'IntegralImage',
    'NoiseModel',
    'ImpulseNoise',
    'GaussianNoise',
]
