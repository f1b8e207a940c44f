"""JSON decoder with a fail-soft read contract."""

import json
import logging
from typing import Any, Optional
from .types import UNDEFINED, ErrorType, ParseFailure, Transform
from .error_handler import ErrorHandler
from .utils.validation import reject_constant


class _TransformFailed(Exception):
    """Wraps an exception raised by a user transform."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause


class JSONDecoder:
    """
    Parses JSON text into Python values.
    
    ``read`` never raises for bad input: it returns ``UNDEFINED`` and keeps
    the reason on ``last_error``.
    """
    
    def __init__(self, keep_data: bool = False,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the decoder.
        
        Args:
            keep_data: Retain the last read result on ``self.data``
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.keep_data = keep_data
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self.data: Any = UNDEFINED
        self.last_error: Optional[ParseFailure] = None
    
    def read(self, text: str, transform: Optional[Transform] = None) -> Any:
        """
        Parse a JSON text.
        
        Args:
            text: JSON text (str, bytes or bytearray)
            transform: Optional ``transform(key, value)`` called bottom-up for
                every member and element, and finally for the root with key
                ``""``. Returning ``UNDEFINED`` drops the member.
            
        Returns:
            The parsed value, or UNDEFINED if the text could not be read
        """
        result = UNDEFINED
        self.last_error = None
        
        try:
            result = json.loads(text, parse_constant=reject_constant)
            if transform is not None:
                result = self._revive({"": result}, "", transform)
        except _TransformFailed as e:
            result = UNDEFINED
            self.last_error = self.error_handler.handle_parse_error(e.cause, ErrorType.TRANSFORM)
        except (ValueError, TypeError, RecursionError) as e:
            # JSONDecodeError, UnicodeDecodeError and rejected constants are ValueErrors
            result = UNDEFINED
            self.last_error = self.error_handler.handle_parse_error(e)
        
        if self.keep_data:
            self.data = result
        
        return result
    
    def _revive(self, holder: Any, key: Any, transform: Transform) -> Any:
        value = holder[key]
        
        if isinstance(value, dict):
            for member in list(value):
                revived = self._revive(value, member, transform)
                if revived is UNDEFINED:
                    del value[member]
                else:
                    value[member] = revived
        elif isinstance(value, list):
            kept = []
            for index in range(len(value)):
                revived = self._revive(value, index, transform)
                if revived is not UNDEFINED:
                    kept.append(revived)
            value[:] = kept
        
        try:
            return transform(str(key), value)
        except Exception as e:
            raise _TransformFailed(e) from e
