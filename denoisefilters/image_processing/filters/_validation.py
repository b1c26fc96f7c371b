# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared radius and spread validation.

Every estimator in this subpackage calls these helpers so that window radii
and Gaussian spreads are rejected with the same exceptions and messages.

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
from typing import Optional, Tuple

# denoisefilters internal
from denoisefilters.exceptions import InvalidRadiusError, ValidationError


def validate_radius(
    radius: int,
    shape: Optional[Tuple[int, int]] = None,
    name: str = 'radius',
) -> None:
    """Validate that a window radius is a non-negative integer.

    Parameters
    ----------
    radius : int
        Window radius in pixels; the full window is ``2 * radius + 1`` wide.
    shape : tuple of int, optional
        ``(rows, cols)`` of the image. When given, the radius must also be
        strictly smaller than ``min(rows, cols)``.
    name : str
        Parameter name for error messages. Default ``'radius'``.

    Raises
    ------
    InvalidRadiusError
        If ``radius`` is not an integer, is negative, or does not fit the
        image.
    """
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise InvalidRadiusError(
            f"{name} must be an integer, got {type(radius).__name__}"
        )
    if radius < 0:
        raise InvalidRadiusError(f"{name} must be >= 0, got {radius}")
    if shape is not None and radius >= min(shape):
        raise InvalidRadiusError(
            f"{name} must be < min(width, height) = {min(shape)}, got {radius}"
        )


def validate_sigma(sigma: float, name: str = 'sigma') -> None:
    """Validate that a Gaussian spread is a positive number.

    Raises
    ------
    ValidationError
        If ``sigma`` is not a real number or is not strictly positive.
    """
    if isinstance(sigma, bool) or not isinstance(sigma, (int, float)):
        raise ValidationError(
            f"{name} must be a number, got {type(sigma).__name__}"
        )
    if not sigma > 0:
        raise ValidationError(f"{name} must be > 0, got {sigma}")
