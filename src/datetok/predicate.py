"""Adjacency predicates deciding where one format token ends and the next begins."""

from typing import Final, Literal, overload
from abc import ABC, abstractmethod
import logging

from typing_extensions import deprecated, override

from .types import Byte, PredicateFunc
from .errors import PredicateError
from ._settings import default_predicate_name

log = logging.getLogger(__name__)

# value passed as ``next`` once the input has no more bytes to peek
END_OF_INPUT: Final[Byte] = 0

# =========================================================================================

# adjacency predicates


class AdjacencyPredicate(ABC):
    """Base predicate deciding whether ``next`` continues the token holding ``current``."""

    @abstractmethod
    def continues(self, current: Byte, next: Byte) -> bool:
        """Return True if ``next`` belongs to the same token as ``current``."""

    def __call__(self, current: Byte, next: Byte) -> bool:
        return self.continues(current, next)


class DefaultPredicate(AdjacencyPredicate):
    """
    Predicate that joins identical bytes plus a fixed set of mixed-case pairs.

    The exception pairs let an uppercase letter lead into its lowercase
    form so that ``Yyyy``, ``Mmm``, ``Dd``, ``Hh``, ``Ss``, ``Ff`` and ``Zz``
    scan as single tokens. ``(D, a)`` and ``(a, y)`` chain so that the
    literal ``Day`` is one token as well.
    """

    EXCEPTIONS: Final[frozenset[tuple[Byte, Byte]]] = frozenset(
        (ord(cur), ord(nxt))
        for cur, nxt in (
            ("Y", "y"),
            ("M", "m"),
            ("D", "d"),
            ("H", "h"),
            ("S", "s"),
            ("F", "f"),
            ("Z", "z"),
            ("D", "a"),
            ("a", "y"),
        )
    )

    @override
    def continues(self, current: Byte, next: Byte) -> bool:
        """Return True for identical bytes or one of the documented exception pairs."""
        return current == next or (current, next) in self.EXCEPTIONS


class StrictPredicate(AdjacencyPredicate):
    """Predicate that only joins identical bytes, so ``D`` and ``d`` never merge."""

    @override
    def continues(self, current: Byte, next: Byte) -> bool:
        return current == next


class CallablePredicate(AdjacencyPredicate):
    """Predicate wrapping a plain ``(current, next) -> bool`` function."""

    def __init__(self, func: PredicateFunc) -> None:
        """Store the user supplied continuation function."""
        super().__init__()
        if not callable(func):
            raise PredicateError(f"predicate function must be callable, got {func!r}")
        self.func = func

    @override
    def continues(self, current: Byte, next: Byte) -> bool:
        return bool(self.func(current, next))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.func!r})"


PredicateName = Literal["default", "strict", "custom"]

_PREDICATES: Final[dict[str, type[AdjacencyPredicate]]] = {
    "default": DefaultPredicate,
    "strict": StrictPredicate,
    "custom": CallablePredicate,
}


def list_predicates() -> list[str]:
    """Return available adjacency predicate names."""
    return list(_PREDICATES.keys())


@overload
def get_predicate(name: Literal["default", "strict"]) -> AdjacencyPredicate:
    """Return a built-in predicate that does not need extra arguments."""
    ...


@overload
def get_predicate(name: Literal["custom"], func: PredicateFunc) -> CallablePredicate:
    """Return a predicate backed by ``func``."""
    ...


def get_predicate(
    name: PredicateName = "default", func: PredicateFunc | None = None
) -> AdjacencyPredicate:
    """
    Create an adjacency predicate by name.

    :param name: Predicate identifier: "default", "strict", or "custom".
    :param func: Required for "custom"; called as ``func(current, next)``.
    :raises PredicateError: If name is unknown or func is missing for custom.
    """
    if name not in _PREDICATES:
        raise PredicateError(
            "unknown predicate name",
            invalid_name=name,
            available=list(_PREDICATES.keys()),
        )

    if name == "custom":
        if func is None:
            raise PredicateError("func is required for custom predicate")
        return CallablePredicate(func)

    return _PREDICATES[name]()


def resolve_predicate(
    predicate: "AdjacencyPredicate | PredicateFunc | str | None",
) -> AdjacencyPredicate:
    """Coerce a predicate instance, plain function or registered name into a predicate."""
    if predicate is None:
        return get_predicate(default_predicate_name())
    if isinstance(predicate, AdjacencyPredicate):
        return predicate
    if isinstance(predicate, str):
        return get_predicate(predicate)
    log.debug(f"wrapping {predicate!r} as a callable predicate")
    return CallablePredicate(predicate)


# shared instances; both predicates are stateless
DEFAULT: Final[AdjacencyPredicate] = DefaultPredicate()
STRICT: Final[AdjacencyPredicate] = StrictPredicate()


@deprecated("Use `DefaultPredicate().continues()` or the `DEFAULT` predicate instead.")
def check_next_part_of_token(current: Byte, next: Byte) -> bool:
    """Default continuation check under its historical name."""
    return DEFAULT.continues(current, next)


@deprecated("Use `StrictPredicate().continues()` or the `STRICT` predicate instead.")
def check_next_part_of_token_strict(current: Byte, next: Byte) -> bool:
    """Strict continuation check under its historical name."""
    return STRICT.continues(current, next)


__all__ = [
    "END_OF_INPUT",
    "PredicateName",
    "AdjacencyPredicate",
    "DefaultPredicate",
    "StrictPredicate",
    "CallablePredicate",
    "DEFAULT",
    "STRICT",
    "list_predicates",
    "get_predicate",
    "resolve_predicate",
    "check_next_part_of_token",
    "check_next_part_of_token_strict",
]
