"""
Parameter Interchange
=====================

Distributions exchange their parameters with callers as an ordered sequence
of named values:

- :class:`Parameter` – a single ``(name, value)`` pair.
- :class:`ParameterMarshaler` – protocol for objects that can write their
  parameters into such a sequence and read them back.

Notes
-----
- The order and the names of the pairs are fixed per distribution.
- Values are not range-checked by the interchange itself.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence


@dataclass(frozen=True, slots=True)
class Parameter:
    """
    Named parameter value.

    Parameters
    ----------
    name : str
        Public name of the parameter (e.g. ``"K"``).
    value : float
        Parameter value.
    """

    name: str
    value: float


@runtime_checkable
class ParameterMarshaler(Protocol):
    """Objects that can export and import their parameter vector."""

    @property
    def num_parameters(self) -> int: ...

    def marshal_parameters(
        self, out: MutableSequence[Parameter] | None = None
    ) -> MutableSequence[Parameter]: ...

    def unmarshal_parameters(self, params: Sequence[Parameter]) -> None: ...


def check_length(kind: str, container: Sequence[object], expected: int, message: str) -> None:
    """
    Raise ``ValueError`` unless ``container`` holds exactly ``expected`` items.

    Parameters
    ----------
    kind : str
        Distribution name used as the message prefix.
    container : Sequence
        Caller-supplied container.
    expected : int
        Required length.
    message : str
        Description of the violated precondition.
    """
    if len(container) != expected:
        raise ValueError(f"{kind}: {message} (expected {expected}, got {len(container)})")


__all__ = [
    "Parameter",
    "ParameterMarshaler",
    "check_length",
]
