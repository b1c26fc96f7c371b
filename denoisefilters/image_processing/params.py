# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative filter settings via typing.Annotated.

Filters declare their configuration (window radius, Gaussian spread, mean
bias, deviation gain) as class-body ``typing.Annotated`` fields carrying
``Range``, ``Options`` and ``Desc`` markers. This module turns those
declarations into ``ParamSpec`` objects that validate values at construction
time and again when a caller overrides a setting for a single ``apply()``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from denoisefilters.image_processing.params import Range, Desc

    class MyFilter(ImageTransform):
        radius: Annotated[int, Range(min=0, max=64), Desc('Window radius')] = 3
        sigma: Annotated[float, Range(min=0.0), Desc('Deviation gain')] = 1.0

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
import inspect
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)


# =====================================================================
# Constraint markers  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata.

    A class-body field is tunable when its ``Annotated`` metadata holds at
    least one ``ParamMeta`` instance.
    """


class Range(ParamMeta):
    """Inclusive numeric bounds.

    Parameters
    ----------
    min : int or float, optional
        Smallest allowed value.
    max : int or float, optional
        Largest allowed value.
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        bounds = []
        if self.min is not None:
            bounds.append(f"min={self.min!r}")
        if self.max is not None:
            bounds.append(f"max={self.max!r}")
        return f"Range({', '.join(bounds)})"


class Options(ParamMeta):
    """Discrete set of allowed values."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable description of a parameter."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_SENTINEL = object()


class ParamSpec:
    """Resolved specification of one tunable filter parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected Python type. ``int`` values satisfy ``float``.
    default : Any
        Class-level default, or ``None`` when the parameter is required.
    description : str
        Text from the ``Desc`` marker.
    min_value, max_value : int, float, or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
        choices: Optional[Tuple],
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether the parameter has no default."""
        return not self._has_default

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type, bounds and choices.

        Booleans are rejected for numeric parameters so that ``radius=True``
        does not silently become a radius of one.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValueError
            If *value* lies outside the range or the allowed choices.
        """
        if self.param_type in (int, float) and isinstance(value, bool):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got bool"
            )
        accepted = (int, float) if self.param_type is float else self.param_type
        if self.param_type is not object and not isinstance(value, accepted):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            text += f", default={self.default!r}"
        if self.min_value is not None:
            text += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            text += f", max_value={self.max_value!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build ``ParamSpec`` objects from the ``Annotated`` fields of *cls*.

    Fields are returned parent-first, in declaration order within each
    class of the MRO.

    Raises
    ------
    TypeError
        If one field carries both ``Range`` and ``Options``.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    ordered: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name not in ordered and name in hints:
                ordered.append(name)

    specs: list = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue

        bounds = next((m for m in metas if isinstance(m, Range)), None)
        options = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if bounds and options:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc.text if desc else '',
            min_value=bounds.min if bounds else None,
            max_value=bounds.max if bounds else None,
            choices=options.choices if options else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Generate a keyword-only ``__init__`` for *param_specs*.

    The generated initializer validates each value, stores it on the
    instance, rejects unknown keywords, and finally calls
    ``self.__post_init__()`` when the class defines one.
    """
    specs = param_specs

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            object.__setattr__(self, spec.name, value)

        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=(inspect.Parameter.empty if spec.required
                     else spec.default),
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'
    return __init__
