"""Safe JSON reading and writing with optional pretty output."""

import logging
from typing import Any, Optional
from .types import FormatInterface, FormattingOptions, Transform
from .decoder import JSONDecoder
from .encoder import JSONEncoder
from .error_handler import ErrorHandler


class JSONFormat(FormatInterface):
    """
    JSON format combining a fail-soft decoder and a recursive encoder.
    
    Both sides share one set of formatting options and one error handler.
    An instance can be shared between threads: every ``write`` call keeps its
    own formatting state.
    """
    
    def __init__(self, indent: str = "    ", space: str = " ", newline: str = "\n",
                 keep_data: bool = False, native_json: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON format.
        
        Args:
            indent: String repeated once per nesting level in pretty output
            space: String written after ``:`` in pretty output
            newline: String written before every member in pretty output
            keep_data: Retain the last read result on ``data``
            native_json: Let compact writes go through ``json.dumps``
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self._options = FormattingOptions(indent=indent, space=space, newline=newline)
        self.decoder = JSONDecoder(
            keep_data=keep_data,
            error_handler=self.error_handler,
            logger=self.logger
        )
        self.encoder = JSONEncoder(
            options=self._options,
            native_json=native_json,
            error_handler=self.error_handler,
            logger=self.logger
        )
    
    @property
    def options(self) -> FormattingOptions:
        """Whitespace units shared by every pretty write."""
        return self._options
    
    @property
    def data(self) -> Any:
        """Result of the last read when ``keep_data`` is enabled."""
        return self.decoder.data
    
    @property
    def last_error(self):
        """Reason the last read failed, or None after a successful read."""
        return self.decoder.last_error
    
    def read(self, text: str, transform: Optional[Transform] = None) -> Any:
        """
        Parse JSON text.
        
        Args:
            text: JSON text
            transform: Optional ``transform(key, value)`` reviver
            
        Returns:
            Parsed value, or UNDEFINED if the text is not valid JSON
        """
        return self.decoder.read(text, transform)
    
    def write(self, value: Any, pretty: bool = False) -> Optional[str]:
        """
        Serialize a value to JSON text.
        
        Args:
            value: Value to serialize
            pretty: Use indentation, spacing and newlines
            
        Returns:
            JSON text, or None if the value cannot be serialized
        """
        return self.encoder.write(value, pretty)
