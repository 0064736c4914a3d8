"""Exceptions raised by the process doubles.

Configuration and verification failures subclass AssertionError so that a
misconfigured test is reported by pytest as a failed assertion rather than an
unexpected error.
"""


class ProcfakeError(Exception):
    """Base class for all procfake errors."""


class ConfigurationError(ProcfakeError, AssertionError):
    """A call was made for a command with no canned result left."""

    def __init__(self, key: str, *, registered: list[str], exhausted: bool) -> None:
        self.key = key
        self.registered = registered
        self.exhausted = exhausted
        if exhausted:
            reason = f"No results left for command '{key}'"
        else:
            reason = f"No results registered for command '{key}'"
        known = ", ".join(repr(k) for k in registered) if registered else "(none)"
        super().__init__(f"{reason}\nRegistered commands: {known}")


class VerificationError(ProcfakeError, AssertionError):
    """Recorded calls do not match the expected command lines."""

    def __init__(self, *, expected: list[str], actual: list[str]) -> None:
        self.expected = expected
        self.actual = actual
        lines = ["Recorded calls do not match expected calls"]
        lines.append(f"Expected ({len(expected)}):")
        lines.extend(f"  {call}" for call in expected)
        lines.append(f"Actual ({len(actual)}):")
        lines.extend(f"  {call}" for call in actual)
        super().__init__("\n".join(lines))


class DecodeError(ProcfakeError, ValueError):
    """A chunk written to a capture could not be decoded as text."""

    def __init__(self, data: bytes, *, encoding: str) -> None:
        self.data = data
        self.encoding = encoding
        super().__init__(f"Cannot decode {len(data)} byte chunk as {encoding}: {data[:40]!r}")
