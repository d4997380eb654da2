"""Human-readable execution trace and numeric formatting."""

from typing import Any

_FORMAT_SPECS = {
    "hex": "X",
    "dec": "d",
    "bin": "b",
    "oct": "o",
}


def format_value(value: Any, parse_to: str = "hexadecimal") -> str:
    """Render a register value in the configured base.

    The base is picked from the first three letters of ``parse_to``;
    anything unrecognized falls back to uppercase hexadecimal.
    """
    spec = _FORMAT_SPECS.get(parse_to.lower()[:3], "X")
    if not isinstance(value, int):
        return str(value)
    return format(value, spec)


class TraceLog:
    """Append-only list of trace lines.

    When disabled, ``record`` does nothing and the list stays empty.
    """

    def __init__(self, enabled: bool = True, parse_to: str = "hexadecimal"):
        self.enabled = enabled
        self.parse_to = parse_to
        self.entries: list[str] = []

    def record(self, message: str) -> None:
        if self.enabled:
            self.entries.append(message)

    def format(self, value: Any) -> str:
        return format_value(value, self.parse_to)

    def clear(self) -> None:
        self.entries.clear()
