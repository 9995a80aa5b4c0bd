"""Action registry and decorator.

Usage:
    @action
    @dataclass(frozen=True, slots=True)
    class IncA(Action):
        pass

    @action("appendToB")
    @dataclass(frozen=True, slots=True)
    class AppendToB(Action):
        text: str

    action_from_dict({"kind": "appendToB", "text": "+"})  # AppendToB(text="+")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from actionstore.core.action.models import Action, UnknownActionError

T = TypeVar("T", bound=type[Action])


class ActionRegistry:
    """Process-local registry mapping action kinds to action classes."""

    def __init__(self) -> None:
        self._by_kind: dict[str, type[Action]] = {}

    def register(self, cls: type[Action], kind: str | None = None) -> str:
        """Register an action class and return its kind.

        Args:
            cls: Action subclass to register.
            kind: Discriminator string. Defaults to the class name.

        Returns:
            The kind the class is registered under.

        Raises:
            TypeError: If cls is not an Action subclass.
            RuntimeError: If kind is already taken by a different class.
        """
        if not (isinstance(cls, type) and issubclass(cls, Action)):
            raise TypeError(f"{cls!r} is not an Action subclass")

        kind = kind or cls.__name__
        existing = self._by_kind.get(kind)
        if existing is not None and existing is not cls:
            # Re-executed module (reload, test collection) defines an equal class
            if existing.__qualname__ != cls.__qualname__ or existing.__module__ != cls.__module__:
                raise RuntimeError(f"Action kind collision: {cls} and {existing} both use {kind!r}")

        cls.kind = kind
        self._by_kind[kind] = cls
        return kind

    def get_type(self, kind: str) -> type[Action] | None:
        """Get the action class registered under kind, if any."""
        return self._by_kind.get(kind)

    def is_registered(self, cls: type) -> bool:
        """Check if a class is registered as an action."""
        kind = getattr(cls, "kind", None)
        return kind is not None and self._by_kind.get(kind) is cls

    def kinds(self) -> frozenset[str]:
        """All registered kinds."""
        return frozenset(self._by_kind)


# Module-level registry instance
_registry = ActionRegistry()


def get_registry() -> ActionRegistry:
    """Access the global action registry."""
    return _registry


@overload
def action(cls_or_kind: T) -> T: ...


@overload
def action(cls_or_kind: str | None = None) -> Callable[[T], T]: ...


def action(cls_or_kind: Any = None) -> Any:
    """Register an action class. Usable bare or with an explicit kind."""
    if isinstance(cls_or_kind, type):
        _registry.register(cls_or_kind)
        return cls_or_kind

    def decorator(cls: T) -> T:
        _registry.register(cls, cls_or_kind)
        return cls

    return decorator


def action_from_dict(data: dict[str, Any]) -> Action:
    """Decode an action produced by Action.to_dict().

    Raises:
        UnknownActionError: If data["kind"] is missing or not registered.
    """
    kind = data.get("kind")
    cls = _registry.get_type(kind) if isinstance(kind, str) else None
    if cls is None:
        raise UnknownActionError(kind)
    return cls.from_dict(data)


@action("@@init")
@dataclass(frozen=True, slots=True)
class Init(Action):
    """Builds the initial state tree. Every reducer answers with its default."""
