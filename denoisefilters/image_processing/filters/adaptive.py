# -*- coding: utf-8 -*-
"""
Adaptive Mean Filter - Integral-image statistics with bilateral reweighting.

Each output pixel is a weighted average of its clamped window in which
samples close to the local mean count more than outliers. Two stages:

1. **Local statistics in O(1).** Sum ``S1`` and sum of squares ``S2`` of
   the window come from summed-area tables, giving the window count
   ``n = kw * kh``, mean ``m = S1 / n`` and deviation
   ``d = sqrt(max(0, n * S2 - S1^2)) / n``. The mean is shifted by the
   bias ``mu`` and clamped to ``[0, 255]``; the deviation is scaled by the
   gain ``sigma`` and clamped to ``[0, 127]``.
2. **Bilateral reweighting.** The window's raw samples are revisited with
   weight ``exp(-(mean - s)^2 / (2 * dev^2))`` and the output is
   ``sum(w * s) / sum(w)``.

Stage 1 replaces an O(k^2) variance computation with four table reads, so
only the single-read second pass scales with the window area.

Where the adjusted deviation is zero, or every weight underflows to zero,
the weighted average is undefined. Those pixels fall back to the
unweighted local mean ``S1 / n``. A uniform image therefore maps to itself.

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
import logging
from typing import Annotated, Any, Dict, Tuple

# Third-party
import numpy as np

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
from denoisefilters.image_processing.filters._validation import validate_radius
from denoisefilters.image_processing.filters._window import (
    window_grid,
    window_offsets,
)
from denoisefilters.image_processing.filters.integral import IntegralImage
from denoisefilters.vocabulary import ImageModality, ProcessorCategory

logger = logging.getLogger(__name__)

MAX_MEAN = 255.0
MAX_DEVIATION = 127.0


def local_statistics(
    integral: IntegralImage,
    radius: int,
    mu: float = 0.0,
    sigma: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Per-pixel window statistics of a single plane from its tables.

    Parameters
    ----------
    integral : IntegralImage
        Tables built from a 2D plane.
    radius : int
        Window radius, >= 0.
    mu : float
        Bias added to the mean before clamping.
    sigma : float
        Gain applied to the deviation before clamping.

    Returns
    -------
    tuple of np.ndarray
        ``(local_mean, mean, deviation)``, float64 arrays of the plane's
        shape. ``local_mean`` is the raw ``S1 / n``; ``mean`` and
        ``deviation`` are the biased, scaled and clamped values used for
        weighting.
    """
    rows, cols = integral.shape
    x0, y0, kw, kh = window_grid(rows, cols, radius)
    n = (kw * kh).astype(np.float64)
    s1 = integral.window_sum(x0, y0, kw, kh).astype(np.float64)
    s2 = integral.window_sum(x0, y0, kw, kh, squared=True).astype(np.float64)

    local_mean = s1 / n
    # Cancellation can push the radicand slightly below zero.
    radicand = np.maximum(n * s2 - s1 * s1, 0.0)
    deviation = np.sqrt(radicand) / n

    mean = np.clip(local_mean + mu, 0.0, MAX_MEAN)
    deviation = np.clip(sigma * deviation, 0.0, MAX_DEVIATION)
    return local_mean, mean, deviation


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Edge-preserving adaptive mean')
class AdaptiveMeanFilter(ChannelwiseTransformMixin, ImageTransform):
    """Bilateral-style adaptive mean accelerated by summed-area tables.

    Suppresses impulse and Gaussian noise while keeping edges: samples far
    from the local mean, measured in units of the local deviation, barely
    contribute.

    Parameters
    ----------
    radius : int
        Window radius in pixels, >= 0. The window is clamped at image
        borders. Default is 3.
    mu : float
        Bias added to the local mean before weighting. Default is 0.0.
    sigma : float
        Gain applied to the local deviation, >= 0. Larger values widen the
        weighting and smooth more. Default is 1.0.

    Examples
    --------
    >>> from denoisefilters.image_processing.filters import AdaptiveMeanFilter
    >>> f = AdaptiveMeanFilter(radius=3, sigma=1.0)
    >>> denoised = f.apply(noisy_buffer)

    Widen the weighting for a single call:

    >>> smoother = f.apply(noisy_buffer, sigma=2.5)
    """

    radius: Annotated[int, Range(min=0),
                      Desc('Window radius in pixels')] = 3
    mu: Annotated[float, Desc('Bias added to the local mean')] = 0.0
    sigma: Annotated[float, Range(min=0.0),
                     Desc('Gain applied to the local deviation')] = 1.0

    def __init__(
        self,
        radius: int = 3,
        mu: float = 0.0,
        sigma: float = 1.0,
    ) -> None:
        validate_radius(radius)
        self.radius = radius
        self.mu = mu
        self.sigma = sigma

    def _prepare(
        self, shape: Tuple[int, int], params: Dict[str, Any]
    ) -> Dict[str, Any]:
        validate_radius(params['radius'])
        return params

    def _apply_2d(
        self,
        source: np.ndarray,
        params: Dict[str, Any],
        **kwargs: Any,
    ) -> np.ndarray:
        """Apply the adaptive mean to a single uint8 channel.

        Parameters
        ----------
        source : np.ndarray
            2D uint8 plane, shape ``(rows, cols)``.
        params : dict
            Resolved ``radius``, ``mu`` and ``sigma``.

        Returns
        -------
        np.ndarray
            Filtered uint8 plane, same shape.
        """
        radius = params['radius']
        integral = IntegralImage(source)
        local_mean, mean, deviation = local_statistics(
            integral, radius, params['mu'], params['sigma'],
        )

        spread = 2.0 * deviation * deviation
        live = spread > 0.0
        spread = np.where(live, spread, 1.0)

        sum_p = np.zeros(source.shape, dtype=np.float64)
        sum_w = np.zeros(source.shape, dtype=np.float64)
        span = 2 * radius + 1
        with np.errstate(under='ignore'):
            for dy, dx, samples, valid in window_offsets(integral.planes, radius):
                s = samples.astype(np.float64)
                d = mean - s
                w = np.exp(-(d * d) / spread)
                w[~(valid & live)] = 0.0
                sum_p += w * s
                sum_w += w
                if dx == radius:
                    self._report_progress(kwargs, (dy + radius + 1) / span)

        degenerate = sum_w <= 0.0
        if degenerate.any():
            logger.debug(
                "AdaptiveMeanFilter: %d of %d pixels fell back to the "
                "unweighted local mean", int(degenerate.sum()), degenerate.size,
            )
        result = np.where(
            degenerate,
            local_mean,
            sum_p / np.where(degenerate, 1.0, sum_w),
        )
        return truncate_to_uint8(result)
