# -*- coding: utf-8 -*-
"""
Denoise Entry Point - One call per algorithm variant on an in-memory raster.

``denoise(image, algorithm, **params)`` builds the requested estimator,
filters the red, green and blue channels, and copies alpha through
unchanged. It is a pure function of its arguments: the input is never
modified and every call returns a freshly allocated image.

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
import time
from typing import Any, Callable, Dict, List, Optional, Type, Union

# Third-party
import numpy as np

# denoisefilters internal
from denoisefilters.buffer import PixelBuffer, as_channel_stack
from denoisefilters.exceptions import ValidationError
from denoisefilters.image_processing.base import ImageTransform
from denoisefilters.image_processing.filters import (
    AdaptiveMeanFilter,
    GaussianFilter,
    MedianFilter,
    PseudoMedianFilter,
)
from denoisefilters.vocabulary import DenoiseAlgorithm

logger = logging.getLogger(__name__)

_FILTERS: Dict[DenoiseAlgorithm, Type[ImageTransform]] = {
    DenoiseAlgorithm.GAUSS: GaussianFilter,
    DenoiseAlgorithm.MEAN: AdaptiveMeanFilter,
    DenoiseAlgorithm.MEDIAN: MedianFilter,
    DenoiseAlgorithm.PSEUDO_MEDIAN: PseudoMedianFilter,
}


def resolve_algorithm(algorithm: Union[DenoiseAlgorithm, str]) -> DenoiseAlgorithm:
    """Map a ``DenoiseAlgorithm`` member or its string value to the member.

    Raises
    ------
    ValidationError
        If *algorithm* names no known estimator.
    """
    if isinstance(algorithm, DenoiseAlgorithm):
        return algorithm
    try:
        return DenoiseAlgorithm(str(algorithm).lower())
    except ValueError:
        raise ValidationError(
            f"Unknown denoise algorithm {algorithm!r}; expected one of "
            f"{available_algorithms()}"
        ) from None


def available_algorithms() -> List[str]:
    """String names accepted by ``denoise`` and ``get_filter``."""
    return [a.value for a in _FILTERS]


def get_filter(
    algorithm: Union[DenoiseAlgorithm, str], **params: Any,
) -> ImageTransform:
    """Construct the estimator for *algorithm* with *params*.

    Parameters
    ----------
    algorithm : DenoiseAlgorithm or str
        ``'gauss'``, ``'mean'``, ``'median'`` or ``'pseudo_median'``.
    **params
        Filter parameters (``radius``, and ``sigma``/``mu`` where the
        filter declares them).

    Returns
    -------
    ImageTransform
        Configured filter.

    Raises
    ------
    ValidationError
        Unknown algorithm, or invalid radius/sigma.
    TypeError
        Parameter not accepted by the chosen filter.
    """
    return _FILTERS[resolve_algorithm(algorithm)](**params)


def denoise(
    image: Union[PixelBuffer, np.ndarray],
    algorithm: Union[DenoiseAlgorithm, str],
    progress_callback: Optional[Callable[[float], None]] = None,
    **params: Any,
) -> Union[PixelBuffer, np.ndarray]:
    """Denoise an RGB(A) raster with one of the four estimators.

    Parameters
    ----------
    image : PixelBuffer or np.ndarray
        ``PixelBuffer``, or interleaved uint8 raster of shape
        ``(rows, cols, 3)`` or ``(rows, cols, 4)``.
    algorithm : DenoiseAlgorithm or str
        Estimator to run.
    progress_callback : callable, optional
        Called with the completed fraction in ``[0, 1]``.
    **params
        Filter parameters, see ``get_filter``.

    Returns
    -------
    PixelBuffer or np.ndarray
        Denoised image of the same kind and shape. Alpha, when present,
        is copied unchanged.

    Raises
    ------
    InvalidDimensionError
        Width or height is zero.
    InvalidRadiusError
        Radius negative, or too large for the Gaussian filter.
    ValidationError
        Unknown algorithm, or malformed raster or alpha plane.

    Examples
    --------
    >>> from denoisefilters import denoise
    >>> clean = denoise(rgba, 'median', radius=1)
    >>> clean = denoise(rgba, 'mean', radius=3, mu=0.0, sigma=1.0)
    """
    processor = get_filter(algorithm, **params)

    if isinstance(image, PixelBuffer):
        buffer, alpha = image, None
    else:
        image = np.asarray(image)
        buffer = PixelBuffer.from_image(image)
        alpha = None
        if image.shape[2] == 4:
            alpha = np.array(as_channel_stack(image[..., 3]), copy=True)

    kwargs = {}
    if progress_callback is not None:
        kwargs['progress_callback'] = progress_callback

    t0 = time.perf_counter()
    result = processor.apply(buffer, **kwargs)
    elapsed = time.perf_counter() - t0
    logger.debug(
        "%s v%s on %dx%d image finished in %.3f s",
        type(processor).__name__, processor.__processor_version__,
        buffer.width, buffer.height, elapsed,
    )

    if isinstance(image, PixelBuffer):
        return result
    return result.to_image(alpha)
