# -*- coding: utf-8 -*-
"""
Pixel Buffer - Planar RGB storage independent of any file format.

``PixelBuffer`` holds the red, green and blue channels of an image as one
``(3, rows, cols)`` uint8 stack. Each channel is also reachable as a flat
array indexed by ``i = x + y * width``. Alpha is not modelled: callers that
hold an RGBA raster keep its alpha plane and hand it back to
``PixelBuffer.to_image`` after filtering.

Input buffers are read-only once constructed; output buffers are allocated
fresh by every filter run, so an input and an output never share memory.

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

# Third-party
import numpy as np

# denoisefilters internal
from denoisefilters.exceptions import InvalidDimensionError, ValidationError

CHANNELS = ('red', 'green', 'blue')

# Absorbs float error so that e.g. 99.9999999 truncates to 100.
_TRUNCATE_EPS = 1e-9


def as_channel_stack(planes: np.ndarray) -> np.ndarray:
    """Validate *planes* and return them as a uint8 array.

    Accepts a single 2D plane ``(rows, cols)`` or a 3D stack
    ``(bands, rows, cols)``. Integer arrays are converted to uint8 after a
    range check; floating-point arrays must already hold whole numbers.

    Raises
    ------
    InvalidDimensionError
        If rows or cols is zero.
    ValidationError
        If the rank is not 2 or 3, the dtype is not numeric, or any sample
        lies outside ``[0, 255]``.
    """
    planes = np.asarray(planes)
    if planes.ndim not in (2, 3):
        raise ValidationError(
            f"Expected a 2D plane or 3D (bands, rows, cols) stack, "
            f"got {planes.ndim}D array"
        )
    rows, cols = planes.shape[-2:]
    if rows <= 0 or cols <= 0:
        raise InvalidDimensionError(
            f"Image width and height must be positive, got {cols}x{rows}"
        )
    if planes.dtype == np.uint8:
        return planes
    if not (np.issubdtype(planes.dtype, np.integer)
            or np.issubdtype(planes.dtype, np.floating)):
        raise ValidationError(
            f"Pixel samples must be numeric, got dtype {planes.dtype}"
        )
    if planes.min() < 0 or planes.max() > 255:
        raise ValidationError(
            f"Pixel samples must lie in [0, 255], got range "
            f"[{planes.min()}, {planes.max()}]"
        )
    if np.issubdtype(planes.dtype, np.floating) and not np.all(
        planes == np.floor(planes)
    ):
        raise ValidationError("Floating-point pixel samples must be whole numbers")
    return planes.astype(np.uint8)


def truncate_to_uint8(values: np.ndarray) -> np.ndarray:
    """Clip real-valued samples to ``[0, 255]`` and truncate toward zero."""
    clipped = np.clip(values, 0.0, 255.0)
    return np.floor(clipped + _TRUNCATE_EPS).astype(np.uint8)


class PixelBuffer:
    """Planar storage of an image's three colour channels.

    Parameters
    ----------
    planes : np.ndarray
        ``(3, rows, cols)`` channel stack in red, green, blue order. The
        data is copied; the buffer owns its storage and marks it
        read-only.

    Raises
    ------
    InvalidDimensionError
        If width or height is zero.
    ValidationError
        If the stack does not have exactly three channels or holds
        samples outside ``[0, 255]``.

    Examples
    --------
    >>> buf = PixelBuffer.from_image(rgba[..., :3])
    >>> buf.width, buf.height
    (512, 512)
    >>> buf.red[3 + 2 * buf.width]   # pixel (x=3, y=2)
    """

    def __init__(self, planes: np.ndarray) -> None:
        planes = as_channel_stack(planes)
        if planes.ndim != 3 or planes.shape[0] != len(CHANNELS):
            raise ValidationError(
                f"PixelBuffer requires a (3, rows, cols) stack, "
                f"got shape {planes.shape}"
            )
        self._planes = np.array(planes, dtype=np.uint8, copy=True)
        self._planes.flags.writeable = False

    @classmethod
    def from_image(cls, image: np.ndarray) -> 'PixelBuffer':
        """Build a buffer from an interleaved ``(rows, cols, 3|4)`` raster.

        A fourth (alpha) channel is ignored.
        """
        image = np.asarray(image)
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValidationError(
                f"Expected an (rows, cols, 3) or (rows, cols, 4) raster, "
                f"got shape {image.shape}"
            )
        return cls(np.moveaxis(image[..., :3], -1, 0))

    @classmethod
    def empty(cls, width: int, height: int) -> 'PixelBuffer':
        """Zero-initialised buffer of the given size."""
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(
                f"Image width and height must be positive, got {width}x{height}"
            )
        return cls(np.zeros((len(CHANNELS), height, width), dtype=np.uint8))

    # -----------------------------------------------------------------
    # Geometry
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._planes.shape[2]

    @property
    def height(self) -> int:
        return self._planes.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)`` in numpy order."""
        return self._planes.shape[1], self._planes.shape[2]

    # -----------------------------------------------------------------
    # Channel access
    # -----------------------------------------------------------------
    @property
    def planes(self) -> np.ndarray:
        """Read-only ``(3, rows, cols)`` view of the channel stack."""
        return self._planes

    def channel(self, index: int) -> np.ndarray:
        """Flat read-only view of channel *index*, length ``width * height``."""
        return self._planes[index].reshape(-1)

    @property
    def red(self) -> np.ndarray:
        return self.channel(0)

    @property
    def green(self) -> np.ndarray:
        return self.channel(1)

    @property
    def blue(self) -> np.ndarray:
        return self.channel(2)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """``(r, g, b)`` at column *x*, row *y*."""
        i = x + y * self.width
        return int(self.red[i]), int(self.green[i]), int(self.blue[i])

    def to_image(self, alpha: Optional[np.ndarray] = None) -> np.ndarray:
        """Interleave back to ``(rows, cols, 3)``, or ``(rows, cols, 4)``.

        Parameters
        ----------
        alpha : np.ndarray, optional
            ``(rows, cols)`` alpha plane to append unchanged.

        Raises
        ------
        ValidationError
            If *alpha* does not match the image size or holds samples
            outside ``[0, 255]``.
        """
        rgb = np.moveaxis(self._planes, 0, -1)
        if alpha is None:
            return np.ascontiguousarray(rgb)
        alpha = as_channel_stack(alpha)
        if alpha.shape != self.shape:
            raise ValidationError(
                f"Alpha plane shape {alpha.shape} does not match "
                f"image shape {self.shape}"
            )
        return np.concatenate(
            [rgb, alpha[..., np.newaxis]], axis=-1
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._planes, other._planes)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
