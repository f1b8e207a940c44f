"""Recursive JSON encoder with pretty and compact output."""

import json
import logging
import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional
from .types import (
    ErrorType,
    FormattingOptions,
    FormattingState,
    SerializationError
)
from .error_handler import ErrorHandler


ESCAPES = {
    '\b': '\\b',
    '\t': '\\t',
    '\n': '\\n',
    '\f': '\\f',
    '\r': '\\r',
    '"': '\\"',
    '\\': '\\\\',
}

HEX_DIGITS = "0123456789abcdef"


def _needs_escape(string: str) -> bool:
    for char in string:
        if char < ' ' or char == '"' or char == '\\':
            return True
    return False


def _escape_char(char: str) -> str:
    escaped = ESCAPES.get(char)
    if escaped is not None:
        return escaped
    code = ord(char)
    if code < 0x20:
        return '\\u00' + HEX_DIGITS[code // 16] + HEX_DIGITS[code % 16]
    return char


class JSONEncoder:
    """
    Serializes Python values to JSON text.
    
    Supported values are None, bool, int, float, str, list/tuple, mappings,
    and ``date``/``datetime``. Anything else is unserializable: at the top
    level ``write`` returns None, inside a container the member is dropped.
    """
    
    def __init__(self, options: Optional[FormattingOptions] = None,
                 native_json: bool = True,
                 error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the encoder.
        
        Args:
            options: Indent, space and newline units for pretty output
            native_json: Use ``json.dumps`` for compact output when it can
                represent the value
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.options = options or FormattingOptions()
        self.native_json = native_json
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
    
    def write(self, value: Any, pretty: bool = False) -> Optional[str]:
        """
        Serialize a value.
        
        Args:
            value: Value to serialize
            pretty: Indent nested structures and add spacing
            
        Returns:
            JSON text, or None if the value cannot be serialized
        """
        pretty = bool(pretty)
        if not pretty and self.native_json:
            native = self._write_native(value)
            if native is not None:
                return native
        
        try:
            return self.serialize(value, FormattingState(pretty=pretty, options=self.options))
        except RecursionError as e:
            self.error_handler.handle_serialization_error(e, value)
            return None
    
    def serialize(self, value: Any, state: FormattingState) -> Optional[str]:
        """
        Serialize a value at the nesting level given by ``state``.
        
        Returns:
            JSON text, or None if the value (or an error inside it) prevents
            serialization
            
        Raises:
            RecursionError: If the value is nested too deeply to write
        """
        try:
            return self._dispatch(value, state)
        except RecursionError:
            # Depth overflow fails the whole write, not just the innermost member
            raise
        except Exception as e:
            self.error_handler.handle_serialization_error(e, value)
            return None
    
    def _write_native(self, value: Any) -> Optional[str]:
        try:
            return json.dumps(
                value,
                separators=(',', ':'),
                ensure_ascii=False,
                allow_nan=False,
                skipkeys=True
            )
        except (TypeError, ValueError, RecursionError) as e:
            self.logger.debug(f"Native encoding unavailable, using recursive encoder: {e}")
            return None
    
    def _dispatch(self, value: Any, state: FormattingState) -> str:
        # bool is an int subclass, so it is tested before numbers
        if value is None:
            return "null"
        if isinstance(value, bool):
            return self.serialize_boolean(value)
        if isinstance(value, date):
            return self.serialize_date(value)
        if isinstance(value, str):
            return self.serialize_string(value)
        if isinstance(value, (int, float)):
            return self.serialize_number(value)
        if isinstance(value, (list, tuple)):
            return self.serialize_array(value, state)
        if isinstance(value, Mapping):
            return self.serialize_object(value, state)
        raise SerializationError(
            f"Unsupported type: {type(value).__name__}",
            ErrorType.UNSUPPORTED,
            context=value
        )
    
    def serialize_object(self, obj: Mapping, state: FormattingState) -> str:
        """Serialize a mapping, dropping members that cannot be written."""
        body = state.descend()
        pieces = ['{']
        add_comma = False
        
        for key, value in obj.items():
            key_json = self._serialize_key(key)
            value_json = self.serialize(value, body)
            if key_json is None or value_json is None:
                continue
            if add_comma:
                pieces.append(',')
            pieces.extend([
                body.write_newline(), body.indent(),
                key_json, ':', body.write_space(), value_json
            ])
            add_comma = True
        
        pieces.extend([state.write_newline(), state.indent(), '}'])
        return ''.join(pieces)
    
    def serialize_array(self, array, state: FormattingState) -> str:
        """Serialize a list or tuple, dropping elements that cannot be written."""
        body = state.descend()
        pieces = ['[']
        add_comma = False
        
        for item in array:
            item_json = self.serialize(item, body)
            if item_json is None:
                continue
            if add_comma:
                pieces.append(',')
            pieces.extend([body.write_newline(), body.indent(), item_json])
            add_comma = True
        
        pieces.extend([state.write_newline(), state.indent(), ']'])
        return ''.join(pieces)
    
    def serialize_string(self, string: str) -> str:
        """Quote a string, escaping quotes, backslashes and control characters."""
        if not _needs_escape(string):
            return '"' + string + '"'
        return '"' + ''.join(_escape_char(char) for char in string) + '"'
    
    def serialize_number(self, number) -> str:
        if isinstance(number, float):
            return float.__repr__(number) if math.isfinite(number) else "null"
        return int.__repr__(number)
    
    def serialize_boolean(self, value: bool) -> str:
        return "true" if value else "false"
    
    def serialize_date(self, value: date) -> str:
        """Render a date as a quoted local-time ``YYYY-MM-DDTHH:MM:SS`` string."""
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone()
            hour, minute, second = value.hour, value.minute, value.second
        else:
            hour = minute = second = 0
        
        def pad(number: int) -> str:
            # At least two digits
            return f"0{number}" if number < 10 else str(number)
        
        return (
            f'"{value.year}-{pad(value.month)}-{pad(value.day)}'
            f'T{pad(hour)}:{pad(minute)}:{pad(second)}"'
        )
    
    def _serialize_key(self, key: Any) -> Optional[str]:
        # Same key coercion as the json module; other key types are skipped
        if isinstance(key, str):
            return self.serialize_string(key)
        if isinstance(key, float) and not math.isfinite(key):
            error = SerializationError("Non-finite float key", ErrorType.UNSUPPORTED)
        elif key is None or isinstance(key, (bool, int, float)):
            return self.serialize_string(self._dispatch(key, FormattingState()))
        else:
            error = SerializationError(
                f"Unsupported key type: {type(key).__name__}", ErrorType.UNSUPPORTED
            )
        self.error_handler.handle_serialization_error(error, key)
        return None
