# -*- coding: utf-8 -*-
"""
Linear Spatial Filter - Fixed-support Gaussian convolution with border renormalisation.

``GaussianFilter`` convolves each channel with a ``(2r + 1) x (2r + 1)``
Gaussian kernel. Taps that fall outside the image are skipped, and every
output pixel is divided by the sum of the weights it actually used, so
border pixels are a properly normalised average of the neighbours that
exist. This differs from the clamp-and-shrink window used by the rank and
adaptive filters; the two border policies give different edge values and
are intentionally kept apart.

Skip-and-renormalise is evaluated as two zero-padded correlations: one of
the samples and one of an all-ones plane (the included weight per pixel).

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

# Standard library
from typing import Annotated, Any, Dict, Tuple

# Third-party
import numpy as np
from scipy.ndimage import correlate

# denoisefilters internal
from denoisefilters.buffer import truncate_to_uint8
from denoisefilters.image_processing.base import (
    ChannelwiseTransformMixin,
    ImageTransform,
)
from denoisefilters.image_processing.params import Desc, Range
from denoisefilters.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from denoisefilters.image_processing.filters._validation import (
    validate_radius,
    validate_sigma,
)
from denoisefilters.vocabulary import ImageModality, ProcessorCategory


def gaussian_kernel(radius: int, sigma: float) -> np.ndarray:
    """Normalised square Gaussian kernel.

    Weight at offset ``(i, j)`` from the centre is
    ``exp(-(i^2 + j^2) / (2 * sigma^2))``; the ``1 / (2 pi sigma^2)``
    factor cancels in the normalisation and is omitted.

    Parameters
    ----------
    radius : int
        Kernel radius; the kernel is ``2 * radius + 1`` on a side.
    sigma : float
        Gaussian spread, > 0.

    Returns
    -------
    np.ndarray
        float64 kernel summing to 1, symmetric about its centre.
    """
    validate_radius(radius)
    validate_sigma(sigma)
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    d2 = offsets[np.newaxis, :] ** 2 + offsets[:, np.newaxis] ** 2
    with np.errstate(divide='ignore', invalid='ignore', under='ignore'):
        kernel = np.exp(-d2 / (2.0 * sigma * sigma))
    # 2 * sigma^2 can underflow to zero; the centre weight is exp(0) regardless.
    kernel[radius, radius] = 1.0
    return kernel / kernel.sum()


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Gaussian smoothing with renormalised borders')
class GaussianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Gaussian-weighted convolution with skip-and-renormalise borders.

    Suited to additive Gaussian noise. Large ``sigma`` relative to
    ``radius`` approaches a plain box average over the kernel support.

    Parameters
    ----------
    radius : int
        Kernel radius in pixels, >= 0. Must be smaller than
        ``min(width, height)`` of the filtered image. ``0`` is the
        identity. Default is 3.
    sigma : float
        Gaussian spread in pixels, > 0. Default is 1000.0.

    Examples
    --------
    >>> from denoisefilters.image_processing.filters import GaussianFilter
    >>> f = GaussianFilter(radius=2, sigma=1.5)
    >>> smoothed = f.apply(buffer)
    """

    radius: Annotated[int, Range(min=0),
                      Desc('Kernel radius in pixels')] = 3
    sigma: Annotated[float, Range(min=0.0),
                     Desc('Gaussian spread in pixels')] = 1000.0

    def __init__(self, radius: int = 3, sigma: float = 1000.0) -> None:
        validate_radius(radius)
        validate_sigma(sigma)
        self.radius = radius
        self.sigma = sigma

    def _prepare(
        self, shape: Tuple[int, int], params: Dict[str, Any]
    ) -> Dict[str, Any]:
        validate_radius(params['radius'], shape)
        validate_sigma(params['sigma'])
        return dict(params,
                    kernel=gaussian_kernel(params['radius'], params['sigma']))

    def _apply_2d(
        self,
        source: np.ndarray,
        params: Dict[str, Any],
        **kwargs: Any,
    ) -> np.ndarray:
        """Convolve a single uint8 channel.

        Parameters
        ----------
        source : np.ndarray
            2D uint8 plane, shape ``(rows, cols)``.
        params : dict
            Resolved ``radius`` and ``sigma`` plus the prepared ``kernel``.

        Returns
        -------
        np.ndarray
            Smoothed uint8 plane, same shape.
        """
        kernel = params['kernel']
        weighted = correlate(source.astype(np.float64), kernel,
                             mode='constant', cval=0.0)
        included = correlate(np.ones(source.shape, dtype=np.float64), kernel,
                             mode='constant', cval=0.0)
        self._report_progress(kwargs, 1.0)
        return truncate_to_uint8(weighted / included)
