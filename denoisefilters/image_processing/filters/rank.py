# -*- coding: utf-8 -*-
"""
Rank Filters - Windowed median and min/max pseudo-median.

Both filters use the clamp-and-shrink window: near a border the window
holds only the pixels that exist, so a corner pixel with radius ``r`` sees
``(r + 1)^2`` samples.

- ``MedianFilter``: sorts each channel's window samples independently and
  takes the element at index ``count // 2``. Because channels are ranked
  separately the output colour may not occur anywhere in the window. That
  is the filter's definition, not a defect.
- ``PseudoMedianFilter``: ``(min + max) // 2`` of each channel's window,
  a single-scan approximation of the median.

The median is evaluated over strided sliding windows of a padded plane.
Padding uses a sentinel above every valid sample so that after sorting the
window's real samples come first and index ``count // 2`` is the median of
the clamped window. Rows are processed in strips to bound memory at large
radii.

For the pseudo-median, min and max over a clamped window equal min and max
under edge replication, so scipy's C-optimized ``minimum_filter`` and
``maximum_filter`` with ``mode='nearest'`` compute it exactly.

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
import logging
from typing import Annotated, Any, Dict, Tuple

# Third-party
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from scipy.ndimage import maximum_filter, minimum_filter

# denoisefilters internal
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
    effective_radii,
    window_grid,
)
from denoisefilters.vocabulary import ImageModality, ProcessorCategory

logger = logging.getLogger(__name__)

# Sorts after every uint8 sample.
_PAD_SENTINEL = 256

# Upper bound on window samples gathered per strip.
_STRIP_ELEMENTS = 1 << 24


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Windowed median for salt-and-pepper noise')
class MedianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Windowed median with per-channel independent ranking.

    Replaces each channel sample with the middle-ranked sample of its
    clamped window. Excellent for salt-and-pepper noise while preserving
    edges. O(k log k) per pixel per channel for ``k`` window samples.

    Parameters
    ----------
    radius : int
        Window radius in pixels, >= 0. Default is 3.

    Examples
    --------
    >>> from denoisefilters.image_processing.filters import MedianFilter
    >>> f = MedianFilter(radius=1)
    >>> denoised = f.apply(noisy_buffer)
    """

    radius: Annotated[int, Range(min=0),
                      Desc('Window radius in pixels')] = 3

    def __init__(self, radius: int = 3) -> None:
        validate_radius(radius)
        self.radius = radius

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
        """Apply the median to a single uint8 channel.

        Parameters
        ----------
        source : np.ndarray
            2D uint8 plane, shape ``(rows, cols)``.
        params : dict
            Resolved ``radius``.

        Returns
        -------
        np.ndarray
            Filtered uint8 plane, same shape.
        """
        rows, cols = source.shape
        ry, rx = effective_radii(params['radius'], rows, cols)
        span_y, span_x = 2 * ry + 1, 2 * rx + 1
        taps = span_y * span_x

        padded = np.pad(source.astype(np.uint16), ((ry, ry), (rx, rx)),
                        mode='constant', constant_values=_PAD_SENTINEL)
        windows = sliding_window_view(padded, (span_y, span_x))
        _, _, kw, kh = window_grid(rows, cols, params['radius'])
        middle = (kw * kh) // 2

        strip = max(1, _STRIP_ELEMENTS // (cols * taps))
        logger.debug("MedianFilter: %d-row strips over %dx%d plane",
                     strip, cols, rows)

        out = np.empty(source.shape, dtype=np.uint8)
        for r0 in range(0, rows, strip):
            r1 = min(r0 + strip, rows)
            samples = np.sort(
                windows[r0:r1].reshape(r1 - r0, cols, taps), axis=-1,
            )
            index = np.broadcast_to(middle[r0:r1], (r1 - r0, cols))
            out[r0:r1] = np.take_along_axis(
                samples, index[..., np.newaxis], axis=-1,
            )[..., 0]
            self._report_progress(kwargs, r1 / rows)
        return out


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Midpoint of window minimum and maximum')
class PseudoMedianFilter(ChannelwiseTransformMixin, ImageTransform):
    """Midpoint of the window minimum and maximum.

    An inexpensive smoothing approximation to the median: one O(k) scan,
    no sorting. Output is ``floor((min + max) / 2)`` per channel.

    Parameters
    ----------
    radius : int
        Window radius in pixels, >= 0. Default is 3.

    Examples
    --------
    >>> from denoisefilters.image_processing.filters import PseudoMedianFilter
    >>> f = PseudoMedianFilter(radius=2)
    >>> smoothed = f.apply(buffer)
    """

    radius: Annotated[int, Range(min=0),
                      Desc('Window radius in pixels')] = 3

    def __init__(self, radius: int = 3) -> None:
        validate_radius(radius)
        self.radius = radius

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
        """Apply the pseudo-median to a single uint8 channel.

        Parameters
        ----------
        source : np.ndarray
            2D uint8 plane, shape ``(rows, cols)``.
        params : dict
            Resolved ``radius``.

        Returns
        -------
        np.ndarray
            Filtered uint8 plane, same shape.
        """
        ry, rx = effective_radii(params['radius'], *source.shape)
        size = (2 * ry + 1, 2 * rx + 1)
        low = minimum_filter(source, size=size, mode='nearest')
        high = maximum_filter(source, size=size, mode='nearest')
        self._report_progress(kwargs, 1.0)
        return ((low.astype(np.uint16) + high) // 2).astype(np.uint8)
