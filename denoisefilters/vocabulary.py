# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the denoisefilters package.

Single source of truth for the controlled vocabularies used when tagging
processors and selecting an estimator: image modalities, processor
categories, and the denoising algorithm variants.

Author
------
Steven Siebert

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

from enum import Enum


class ImageModality(Enum):
    """Image modalities a processor is designed for."""

    RGB = "RGB"
    PAN = "PAN"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a functional grouping of image processing
    operations.
    """

    FILTERS = "filters"
    NOISE = "noise"


class DenoiseAlgorithm(Enum):
    """Denoising estimator variants exposed by ``denoise()``.

    The value is the string accepted in place of the member.
    """

    GAUSS = "gauss"
    MEAN = "mean"
    MEDIAN = "median"
    PSEUDO_MEDIAN = "pseudo_median"
