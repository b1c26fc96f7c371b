# -*- coding: utf-8 -*-
"""
Denoise Exception Hierarchy - Domain-specific exceptions for filter runs.

Lets callers catch denoising failures distinctly from Python built-in
exceptions. Every exception subclasses both ``DenoiseError`` and the
appropriate built-in so existing ``except ValueError`` handlers keep working.

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


class DenoiseError(Exception):
    """Base exception for all denoisefilters errors."""


class ValidationError(DenoiseError, ValueError):
    """Invalid input raster, parameter, or configuration.

    Raised for wrong channel counts, out-of-range sample values, unknown
    algorithm names, and other input validation failures.
    """


class InvalidDimensionError(ValidationError):
    """Image width or height is zero or negative.

    Raised before any output is allocated.
    """


class InvalidRadiusError(ValidationError):
    """Window radius is negative, not an integer, or too large.

    The Gaussian filter additionally rejects ``radius >= min(width, height)``.
    """


class ProcessorError(DenoiseError, RuntimeError):
    """Non-recoverable failure inside a filter's ``apply()``.

    Raised when a filter produces output that violates its contract
    (not an input validation issue).
    """
