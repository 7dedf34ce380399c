"""Event registry - named event bindings that templates reference with `@name`."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from htmlbuilder.exceptions import MissingFieldError

log = logging.getLogger(__name__)

_ON_PREFIX = re.compile(r"^on(?:[-_:]|(?=[A-Z]))")


def normalize_name(name: str) -> str:
    """Strip a conventional `on` prefix: `onSayHello` -> `sayHello`.

    Only `on` followed by an uppercase letter or one of `-_:` counts as a
    prefix, so names such as `online` are left alone.
    """
    m = _ON_PREFIX.match(name)
    if m is None:
        return name
    rest = name[m.end() :]
    return rest[:1].lower() + rest[1:]


@dataclass
class EventBinding:
    """A callback bound to a trigger type (e.g. "click") under a name."""

    name: str
    trigger_type: str
    callback: Callable[..., Any]
    options: Dict[str, Any] = field(default_factory=dict)


class EventRegistry:
    """Holds EventBindings for every template compiled against it.

    Registrations with a name already in use are kept; lookup always
    returns the first one registered.
    """

    def __init__(self) -> None:
        self._bindings: List[EventBinding] = []

    def register(
        self,
        name: Optional[str],
        trigger_type: Optional[str],
        callback: Optional[Callable[..., Any]],
        options: Optional[Dict[str, Any]] = None,
    ) -> EventBinding:
        """Register a binding.

        Raises:
            MissingFieldError: name, trigger_type or callback is missing.
        """
        if not name:
            raise MissingFieldError("name")
        if not trigger_type:
            raise MissingFieldError("trigger_type")
        if callback is None:
            raise MissingFieldError("callback")

        binding = EventBinding(
            name=normalize_name(name),
            trigger_type=trigger_type,
            callback=callback,
            options=dict(options or {}),
        )
        if binding.name in self:
            log.debug("event %r already registered, first one wins", binding.name)
        self._bindings.append(binding)
        return binding

    def lookup(self, name: str) -> Optional[EventBinding]:
        """First binding registered under `name`, or None."""
        key = normalize_name(name)
        for binding in self._bindings:
            if binding.name == key:
                return binding
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[EventBinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
