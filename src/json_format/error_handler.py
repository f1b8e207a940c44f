"""Error handling for the JSON format codec."""

import json
import logging
from typing import Any, Optional
from .types import (
    ValidationResult,
    ValidationError,
    ParseFailure,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Central place where codec failures are classified and logged.
    
    Reads and writes are fail-soft, so the handler never re-raises. It turns
    exceptions into plain records and leaves the sentinel result to the
    caller.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.
        
        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)
    
    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.
        
        Args:
            input_data: JSON string to validate
            
        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )
    
    def handle_parse_error(self, error: Exception,
                           error_type: ErrorType = ErrorType.SYNTAX) -> ParseFailure:
        """
        Record a failed read.
        
        Args:
            error: Exception raised while parsing or reviving
            error_type: Classification of the failure
            
        Returns:
            ParseFailure describing the error
        """
        if isinstance(error, json.JSONDecodeError):
            failure = ParseFailure(
                type=error_type,
                message=error.msg,
                line=error.lineno,
                column=error.colno
            )
        else:
            failure = ParseFailure(type=error_type, message=str(error) or type(error).__name__)
        
        location = f" at line {failure.line}, column {failure.column}" if failure.line else ""
        self.logger.debug(f"Read failed ({failure.type.value}): {failure.message}{location}")
        return failure
    
    def handle_serialization_error(self, error: Exception, value: Any) -> None:
        """
        Log a value that could not be serialized.
        
        Args:
            error: Exception raised by a serializer
            value: Value that was being written
        """
        self.logger.debug(
            f"Skipping unserializable {type(value).__name__} value: {error}"
        )
