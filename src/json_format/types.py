"""Core type definitions for the JSON format codec."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, List, Optional


class _Undefined:
    """Marker for an absent result, distinct from JSON null (``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

Transform = Callable[[str, Any], Any]


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    TRANSFORM = "transform"
    UNSUPPORTED = "unsupported"
    SERIALIZATION = "serialization"


@dataclass
class FormattingOptions:
    """Whitespace units used by pretty output."""
    indent: str = "    "
    space: str = " "
    newline: str = "\n"


@dataclass(frozen=True)
class FormattingState:
    """
    Formatting context for one recursive encode.

    The state is immutable: nested structures are written with the state
    returned by ``descend()``, so the caller's level is unchanged whatever
    happens while a child is being written.
    """
    pretty: bool = False
    level: int = 0
    options: FormattingOptions = field(default_factory=FormattingOptions)

    def __post_init__(self):
        if self.level < 0:
            raise ValueError(f"Indent level must be non-negative, got {self.level}")

    def descend(self) -> "FormattingState":
        """Return the state for the body of an object or array."""
        return replace(self, level=self.level + 1)

    def indent(self) -> str:
        return self.options.indent * self.level if self.pretty else ""

    def write_newline(self) -> str:
        return self.options.newline if self.pretty else ""

    def write_space(self) -> str:
        return self.options.space if self.pretty else ""


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ParseFailure:
    """Details of the last failed read."""
    type: ErrorType
    message: str
    line: Optional[int] = None
    column: Optional[int] = None


class SerializationError(Exception):
    """Raised inside the encoder when a value cannot be represented."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.SERIALIZATION,
                 context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class FormatInterface(ABC):
    """Abstract interface for a text format that reads and writes values."""

    @abstractmethod
    def read(self, text: str, transform: Optional[Transform] = None) -> Any:
        """Parse text into a value, or return UNDEFINED."""
        pass

    @abstractmethod
    def write(self, value: Any, pretty: bool = False) -> Optional[str]:
        """Serialize a value to text, or return None."""
        pass
