from typing import Any

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base log entry. Subclasses add their own fields and pin ``level``, and
    every field is available to the rendering template by name.
    """

    level: LogLevel
    message: str | None = None
    tags: frozenset[str] = frozenset()

    def render(self, template: str, **context: Any) -> str:
        fields: dict[str, Any] = msgspec.to_builtins(self)
        fields.update(context)

        return template.format(**fields)
