"""Configuration for shortest-path runs.

Named parameters are declared with `ParameterSpec` and validated eagerly by
`process_parameters`. The result is packed into a frozen `WeightConfig`, which
is the only configuration object the engine consumes.

Example:
    >>> cfg = WeightConfig.from_params(attribute="latency", element="edge")
    >>> cfg
    WeightConfig(attribute='latency', element_kind=<ElementKind.EDGE: 1>)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

from spforest.errors import InvalidParameterError, MissingParameterError
from spforest.types.base import ElementKind

_MISSING = object()


@dataclass(frozen=True)
class ParameterSpec:
    """Declaration of one named parameter.

    Attributes:
        name: Parameter name as supplied by the caller.
        type: Accepted type or tuple of types; None accepts anything.
        optional: If False, the parameter must be supplied.
        default: Value used when an optional parameter is omitted.
        choices: If set, the value must be one of these.
        min_value: Inclusive lower bound for numeric values.
        max_value: Inclusive upper bound for numeric values.
        validator: Called with the value after the built-in checks. Should
            raise ``ValueError`` or ``TypeError`` to reject it.
        transform: Called last; its return value replaces the value.
    """

    name: str
    type: Optional[Union[type, Tuple[type, ...]]] = None
    optional: bool = True
    default: Any = None
    choices: Optional[Sequence[Any]] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    validator: Optional[Callable[[Any], None]] = field(default=None, compare=False)
    transform: Optional[Callable[[Any], Any]] = field(default=None, compare=False)

    def check(self, value: Any) -> Any:
        """Validate a supplied value and return it, transformed if configured.

        Raises:
            InvalidParameterError: If any check or the validator rejects it.
        """
        if self.type is not None and not isinstance(value, self.type):
            raise InvalidParameterError(
                f"invalid type for '{self.name}': {type(value).__name__} "
                f"(expected {_type_names(self.type)})"
            )

        if self.min_value is not None or self.max_value is not None:
            if not isinstance(value, Real) or isinstance(value, bool):
                raise InvalidParameterError(
                    f"min or max defined but value is not a number for '{self.name}'"
                )
            if self.min_value is not None and value < self.min_value:
                raise InvalidParameterError(
                    f"bad value for '{self.name}': {value} < {self.min_value}"
                )
            if self.max_value is not None and value > self.max_value:
                raise InvalidParameterError(
                    f"bad value for '{self.name}': {value} > {self.max_value}"
                )

        if self.choices is not None and value not in self.choices:
            raise InvalidParameterError(
                f"'{value}' is not in the allowed values for '{self.name}': "
                f"{list(self.choices)}"
            )

        if self.validator is not None:
            try:
                self.validator(value)
            except (TypeError, ValueError) as exc:
                raise InvalidParameterError(
                    f"validation failed for '{self.name}': {exc}"
                ) from exc

        if self.transform is not None:
            try:
                value = self.transform(value)
            except (TypeError, ValueError) as exc:
                raise InvalidParameterError(
                    f"could not convert '{self.name}': {exc}"
                ) from exc
        return value


def _type_names(tp: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(tp, tuple):
        return " or ".join(t.__name__ for t in tp)
    return tp.__name__


def process_parameters(
    specs: Iterable[ParameterSpec], params: Dict[str, Any]
) -> Dict[str, Any]:
    """Validate named parameters against their declarations.

    Required parameters are checked first, then unknown names, then each
    supplied value in declaration order. Omitted optional parameters take
    their declared default without running checks or transforms.

    Args:
        specs: Parameter declarations.
        params: Caller-supplied values by name.

    Returns:
        Dict of every declared parameter name to its final value.

    Raises:
        MissingParameterError: If a non-optional parameter is absent.
        InvalidParameterError: If unknown names are supplied or a value fails
            validation.
    """
    specs = list(specs)
    for spec in specs:
        if not spec.optional and spec.name not in params:
            raise MissingParameterError(f"parameter '{spec.name}' is missing")

    known = {spec.name for spec in specs}
    unknown = [name for name in params if name not in known]
    if unknown:
        listed = ", ".join(f"'{name}'" for name in unknown)
        raise InvalidParameterError(f"some parameters do not exist: {listed}")

    values: Dict[str, Any] = {}
    for spec in specs:
        value = params.get(spec.name, _MISSING)
        values[spec.name] = spec.default if value is _MISSING else spec.check(value)
    return values


def _to_element_kind(value: Union[str, ElementKind]) -> ElementKind:
    if isinstance(value, ElementKind):
        return value
    return ElementKind.from_string(value)


def _check_attribute_name(value: Optional[str]) -> None:
    if value is not None and not value:
        raise ValueError("attribute name must not be empty")


WEIGHT_PARAMETERS: Tuple[ParameterSpec, ...] = (
    ParameterSpec(
        name="attribute",
        type=(str, type(None)),
        validator=_check_attribute_name,
    ),
    ParameterSpec(
        name="element",
        type=(str, ElementKind),
        default=ElementKind.EDGE,
        transform=_to_element_kind,
    ),
)


@dataclass(frozen=True)
class WeightConfig:
    """How a traversal step is weighted.

    Attributes:
        attribute: Name of the numeric attribute holding the weight. None
            means every step costs 1.
        element_kind: Whether the attribute lives on the traversed edge or on
            the node the step arrives at.
    """

    attribute: Optional[str] = None
    element_kind: ElementKind = ElementKind.EDGE

    def __post_init__(self) -> None:
        # Same checks as the "attribute" parameter of from_params.
        WEIGHT_PARAMETERS[0].check(self.attribute)
        if not isinstance(self.element_kind, ElementKind):
            raise InvalidParameterError(
                f"element_kind must be an ElementKind, got {self.element_kind!r}"
            )

    @property
    def unweighted(self) -> bool:
        """True when every traversal step costs 1."""
        return self.attribute is None

    @classmethod
    def from_params(cls, **params: Any) -> "WeightConfig":
        """Build a WeightConfig from named parameters.

        Accepted parameters are ``attribute`` (str or None) and ``element``
        (``"edge"``, ``"node"``, ``"opposite_node"`` or an ElementKind).

        Raises:
            InvalidParameterError: For unknown parameters or bad values.
        """
        values = process_parameters(WEIGHT_PARAMETERS, params)
        return cls(attribute=values["attribute"], element_kind=values["element"])


#: Configuration for breadth-first (hop count) runs.
UNWEIGHTED = WeightConfig()

