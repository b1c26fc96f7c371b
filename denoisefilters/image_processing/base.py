# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for filters and noise models.

Defines ``ImageProcessor``, the common base of every processor in the
package, ``ImageTransform`` for dense raster-to-raster transforms, and
``ChannelwiseTransformMixin`` which runs a single-plane implementation on
each colour channel of a ``PixelBuffer`` or a ``(bands, rows, cols)`` stack.

``ImageProcessor`` provides version checking at first instantiation and
``typing.Annotated``-based tunable parameters with automatic ``__init__``
generation and per-call overrides through ``**kwargs``.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, Union

# Third-party
import numpy as np

# denoisefilters internal
from denoisefilters.buffer import PixelBuffer, as_channel_stack
from denoisefilters.exceptions import ProcessorError
from denoisefilters.image_processing.params import (
    ParamSpec,
    collect_param_specs,
    _make_init,
)

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: concrete subclasses that do not declare a version
    via ``@processor_version('x.y.z')`` trigger a ``UserWarning`` the first
    time they are instantiated. The check lives in ``__new__`` so that class
    decorators have already run.

    **Tunable parameters**: subclasses declare parameters as ``Annotated``
    class-body fields using the markers in
    :mod:`denoisefilters.image_processing.params`. ``__init_subclass__``
    collects them into ``__param_specs__`` and generates an ``__init__``
    unless the subclass writes its own. ``_resolve_params(kwargs)`` merges
    instance values with per-call overrides and validates them.
    """

    # Classes already checked for a version, so each warns only once.
    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @property
    def params(self) -> Dict[str, Any]:
        """Current instance value of every declared parameter."""
        return {spec.name: getattr(self, spec.name)
                for spec in type(self).__param_specs__}

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance parameters with per-call *kwargs* overrides.

        Keys in *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates its range or choices.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs \
                else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Call the optional ``progress_callback`` with *fraction* in [0, 1]."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"


class ImageTransform(ImageProcessor):
    """
    Abstract base class for raster-to-raster transforms.

    Subclasses implement ``apply``, which never modifies its input and
    returns a freshly allocated result of the same dimensions.
    """

    @abstractmethod
    def apply(
        self,
        source: Union[PixelBuffer, np.ndarray],
        **kwargs: Any,
    ) -> Union[PixelBuffer, np.ndarray]:
        """
        Apply the transform to *source*.

        Parameters
        ----------
        source : PixelBuffer or np.ndarray
            Input image.

        Returns
        -------
        PixelBuffer or np.ndarray
            Transformed image, same kind and dimensions as *source*.
        """
        ...


class ChannelwiseTransformMixin:
    """Runs a single-plane transform on every colour channel independently.

    Mix into an ``ImageTransform`` subclass and implement ``_apply_2d``.
    ``apply()`` then accepts:

    - a ``PixelBuffer``, returning a new ``PixelBuffer``;
    - a 3D ``(bands, rows, cols)`` array, returning a stacked array;
    - a 2D ``(rows, cols)`` plane, returning a plane.

    Samples are validated to uint8 before filtering. Parameters are
    resolved and checked once per call in ``_prepare``, which subclasses
    override to reject radii that do not fit the image or to build data
    shared by all channels.
    """

    def apply(
        self,
        source: Union[PixelBuffer, np.ndarray],
        **kwargs: Any,
    ) -> Union[PixelBuffer, np.ndarray]:
        """Filter each channel of *source*.

        Parameters
        ----------
        source : PixelBuffer or np.ndarray
            ``PixelBuffer``, 2D plane, or 3D ``(bands, rows, cols)`` stack.

        Returns
        -------
        PixelBuffer or np.ndarray
            Filtered image with the same kind and shape as *source*.

        Raises
        ------
        ProcessorError
            If a channel comes back with a different shape.
        """
        if isinstance(source, PixelBuffer):
            return PixelBuffer(self._apply_stack(source.planes, kwargs))
        stack = as_channel_stack(source)
        if stack.ndim == 2:
            return self._apply_stack(stack[np.newaxis], kwargs)[0]
        return self._apply_stack(stack, kwargs)

    def _apply_stack(
        self, stack: np.ndarray, kwargs: Dict[str, Any]
    ) -> np.ndarray:
        params = self._prepare(stack.shape[-2:], self._resolve_params(kwargs))

        n = stack.shape[0]
        out = np.empty_like(stack, dtype=np.uint8)
        for b in range(n):
            band_kwargs = dict(kwargs)
            outer_cb = kwargs.get('progress_callback')
            if outer_cb is not None:
                band_kwargs['progress_callback'] = (
                    lambda f, _b=b: outer_cb((_b + f) / n)
                )
            result = self._apply_2d(stack[b], params, **band_kwargs)
            if result.shape != stack[b].shape:
                raise ProcessorError(
                    f"{type(self).__name__} produced shape {result.shape} "
                    f"for a {stack[b].shape} channel"
                )
            out[b] = result
        return out

    def _prepare(
        self, shape: Tuple[int, int], params: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Check resolved *params* against ``(rows, cols)`` *shape*.

        Returns the parameters handed to every ``_apply_2d`` call of this
        run. Overrides may add derived read-only data (a kernel, say) that
        is built once and shared by all channels.
        """
        return params

    @abstractmethod
    def _apply_2d(
        self,
        source: np.ndarray,
        params: Dict[str, Any],
        **kwargs: Any,
    ) -> np.ndarray:
        """Filter one uint8 channel.

        Parameters
        ----------
        source : np.ndarray
            2D uint8 plane, shape ``(rows, cols)``.
        params : dict
            Resolved tunable parameters for this call.

        Returns
        -------
        np.ndarray
            Filtered uint8 plane, same shape.
        """
        ...
