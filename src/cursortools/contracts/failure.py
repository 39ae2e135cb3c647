"""Exception records raised by the contract layer.

Contracts fail fast, loud, and once. Every signal carries the source
location where it was raised so a violation is understandable without
reading the code that raised it.
"""

from enum import Enum


class ConditionKind(str, Enum):
    """Severity of a design-by-contract check.

    PRECONDITION: caller supplied invalid arguments
    INTERMEDIATE: an internal consistency assumption failed
    POSTCONDITION: a result did not satisfy its guarantee
    """
    PRECONDITION = "precondition"
    INTERMEDIATE = "intermediate"
    POSTCONDITION = "postcondition"


class CursorToolsError(RuntimeError):
    """Base class for every signal raised by ``cursortools``.

    Carries the file and line where the error was detected.
    """

    def __init__(self, message: str, filename: str, line_number: int):
        super().__init__(message)
        self._message = message
        self._filename = filename
        self._line_number = line_number

    @property
    def filename(self) -> str:
        """File where the error occurred."""
        return self._filename

    @property
    def line_number(self) -> int:
        """Line number where the error occurred."""
        return self._line_number

    def __str__(self) -> str:
        return self._message


class ContractViolation(CursorToolsError):
    """Raised when a precondition, intermediate check or postcondition fails.

    This indicates a bug in the calling code, not bad data that the
    library could recover from.

    Key distinction:
    - ValidationError: configuration error (handled by Pydantic)
    - ContractViolation: cursor misuse (programmer error)
    """

    def __init__(self, condition: str, kind, filename: str, line_number: int):
        kind = ConditionKind(kind)
        super().__init__(
            self.build_message(condition, kind, filename, line_number),
            filename,
            line_number,
        )
        self._condition = condition
        self._kind = kind

    @property
    def condition(self) -> str:
        """Text of the condition that evaluated false."""
        return self._condition

    @property
    def kind(self) -> ConditionKind:
        """Which kind of check failed."""
        return self._kind

    @staticmethod
    def build_message(condition, kind, filename, line_number) -> str:
        return f"{condition} failed {ConditionKind(kind).value} DBC test in {filename}:{line_number}"


class NotImplementedViolation(CursorToolsError, NotImplementedError):
    """Raised when a documented stub is reached at runtime."""

    def __init__(self, message: str, filename: str, line_number: int):
        super().__init__(
            f"{message} not implemented at {filename}:{line_number}",
            filename,
            line_number,
        )
        self._stub_message = message

    @property
    def message(self) -> str:
        return self._stub_message


class NotReachableViolation(CursorToolsError):
    """Raised when a logically unreachable code path executes."""

    def __init__(self, filename: str, line_number: int):
        super().__init__(
            f"Logically unreachable code block reached at {filename}:{line_number}",
            filename,
            line_number,
        )
