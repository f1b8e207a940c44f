"""
JSON Format - safe JSON reading and writing.

Reads never raise on malformed input and writes skip values that cannot be
represented, so one bad member never aborts a whole document.
"""

from typing import Any, Optional
from .json_format import JSONFormat
from .decoder import JSONDecoder
from .encoder import JSONEncoder
from .types import UNDEFINED, FormattingOptions, FormattingState, Transform

__version__ = "1.0.0"
__all__ = [
    "JSONFormat",
    "JSONDecoder",
    "JSONEncoder",
    "FormattingOptions",
    "FormattingState",
    "UNDEFINED",
    "read",
    "write",
]

_default_format = JSONFormat()


def read(text: str, transform: Optional[Transform] = None) -> Any:
    """Parse JSON text with a shared default ``JSONFormat``."""
    return _default_format.read(text, transform)


def write(value: Any, pretty: bool = False) -> Optional[str]:
    """Serialize a value with a shared default ``JSONFormat``."""
    return _default_format.write(value, pretty)
