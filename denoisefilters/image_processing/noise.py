# -*- coding: utf-8 -*-
"""
Noise Models - Reproducible synthetic corruption for exercising the filters.

- ``ImpulseNoise``: overwrites randomly chosen pixels with random colours
  (salt-and-pepper in colour).
- ``GaussianNoise``: additive white Gaussian noise, clipped to ``[0, 255]``.

Each instance draws from its own ``numpy.random.Generator`` seeded from the
``seed`` parameter at every ``apply()``, so a fixed seed gives identical
output on every call and no process-wide random state is touched. Inputs
are never modified.

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
"""

# Standard library
from abc import abstractmethod
from typing import Annotated, Any, Dict, Union

# Third-party
import numpy as np

# denoisefilters internal
from denoisefilters.buffer import PixelBuffer, as_channel_stack
from denoisefilters.image_processing.base import ImageTransform
from denoisefilters.image_processing.params import Desc, Range
from denoisefilters.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from denoisefilters.vocabulary import ImageModality, ProcessorCategory


class NoiseModel(ImageTransform):
    """Base class for noise models on buffers, planes and channel stacks.

    Subclasses implement ``_corrupt`` on a writable uint8
    ``(bands, rows, cols)`` copy.
    """

    seed: Annotated[object, Desc('Random seed (None for fresh entropy)')] = None

    def apply(
        self,
        source: Union[PixelBuffer, np.ndarray],
        **kwargs: Any,
    ) -> Union[PixelBuffer, np.ndarray]:
        """Return a noisy copy of *source*.

        Parameters
        ----------
        source : PixelBuffer or np.ndarray
            ``PixelBuffer``, 2D plane, or 3D ``(bands, rows, cols)`` stack.

        Returns
        -------
        PixelBuffer or np.ndarray
            Corrupted copy of the same kind and shape.
        """
        params = self._resolve_params(kwargs)
        rng = np.random.default_rng(params['seed'])
        if isinstance(source, PixelBuffer):
            stack = np.array(source.planes, copy=True)
            self._corrupt(stack, rng, params)
            return PixelBuffer(stack)
        stack = np.array(as_channel_stack(source), copy=True)
        flat = stack.ndim == 2
        if flat:
            stack = stack[np.newaxis]
        self._corrupt(stack, rng, params)
        return stack[0] if flat else stack

    @abstractmethod
    def _corrupt(
        self,
        stack: np.ndarray,
        rng: np.random.Generator,
        params: Dict[str, Any],
    ) -> None:
        """Corrupt *stack* in place."""
        ...


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Random-colour impulse noise')
class ImpulseNoise(NoiseModel):
    """Replace ``count`` random pixels with uniformly random colours.

    Pixel positions are drawn with replacement, so fewer than ``count``
    distinct pixels may change.

    Parameters
    ----------
    count : int
        Number of pixel draws. Default is 1000.
    seed : int, optional
        Random seed.

    Examples
    --------
    >>> noisy = ImpulseNoise(count=5000, seed=7).apply(buffer)
    """

    count: Annotated[int, Range(min=0),
                     Desc('Number of pixels overwritten')] = 1000

    def _corrupt(self, stack, rng, params):
        bands, rows, cols = stack.shape
        n = params['count']
        xs = rng.integers(0, cols, size=n)
        ys = rng.integers(0, rows, size=n)
        colours = rng.integers(0, 256, size=(bands, n), dtype=np.uint8)
        stack[:, ys, xs] = colours


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.NOISE,
                modalities=[ImageModality.RGB, ImageModality.PAN],
                description='Additive Gaussian noise')
class GaussianNoise(NoiseModel):
    """Additive zero-mean Gaussian noise, rounded and clipped to uint8.

    Parameters
    ----------
    stddev : float
        Noise standard deviation in grey levels. Default is 10.0.
    seed : int, optional
        Random seed.
    """

    stddev: Annotated[float, Range(min=0.0),
                      Desc('Noise standard deviation')] = 10.0

    def _corrupt(self, stack, rng, params):
        noisy = stack + rng.normal(0.0, params['stddev'], size=stack.shape)
        stack[...] = np.clip(np.rint(noisy), 0, 255).astype(np.uint8)
