# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability tags for filters and noise models.

Provides the ``@processor_version`` class decorator that stamps a semantic
version on a processor class, and ``@processor_tags`` that records which
image modalities and processing category a processor belongs to. The
``denoise`` entry point reads the version when it logs a run.

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

# Standard library
from typing import Optional, Sequence, Type, TypeVar
import importlib.metadata

# denoisefilters internal
from denoisefilters.vocabulary import ImageModality, ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps ``__processor_version__`` on a processor.

    The version identifies the algorithm revision: two runs of the same
    processor version on the same input produce identical output.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``). When omitted, the
        installed ``denoisefilters`` distribution version is used, or
        ``'unknown'`` if the package is not installed.

    Returns
    -------
    Callable
        Class decorator.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version(
                    'denoisefilters'
                )
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` with modality, category, and description.

    Parameters
    ----------
    modalities : Sequence[ImageModality], optional
        Imagery the processor is designed for.
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable purpose.

    Raises
    ------
    TypeError
        If a modality is not an ``ImageModality`` or *category* is not a
        ``ProcessorCategory``. Checked eagerly so typos fail at import.
    """
    if modalities is not None:
        for m in modalities:
            if not isinstance(m, ImageModality):
                raise TypeError(
                    f"modalities must be ImageModality members, got {m!r}"
                )
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'modalities': tuple(modalities) if modalities else (),
            'category': category,
            'description': description,
        }
        return cls
    return decorator
