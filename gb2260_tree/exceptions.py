"""
Custom exception classes for the GB2260 tree application.

The code parser, level classifier, partitioner and tree assemblers never
raise: malformed codes degrade to absent fields and unmatched records are
dropped or synthesized. The exceptions below belong to the outer layers
(configuration, record loading and output conversion).
"""

from typing import Optional, Dict, Any, List


class GB2260Error(Exception):
    """Base exception class for all GB2260 tree errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        """
        Initialize the base error.
        
        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information about the error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'context': self.context
        }


class ConfigurationError(GB2260Error):
    """Exception raised for configuration errors."""
    
    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Any = None, valid_values: Optional[List[str]] = None):
        """
        Initialize configuration error.
        
        Args:
            message: Human-readable error message
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            valid_values: List of valid values for the configuration key
        """
        context = {
            'config_key': config_key,
            'config_value': str(config_value) if config_value is not None else None,
            'valid_values': valid_values or []
        }
        super().__init__(message, error_code='CONFIGURATION_ERROR', context=context)
        self.config_key = config_key
        self.config_value = config_value
        self.valid_values = valid_values or []


class DataLoadError(GB2260Error):
    """Exception raised when a record source cannot be turned into records."""
    
    def __init__(self, message: str, source_type: Optional[str] = None,
                 missing_columns: Optional[List[str]] = None,
                 original_error: Optional[Exception] = None):
        """
        Initialize data load error.
        
        Args:
            message: Human-readable error message
            source_type: Type name of the rejected record source
            missing_columns: Required columns absent from a DataFrame source
            original_error: Original exception that caused this error
        """
        context = {
            'source_type': source_type,
            'missing_columns': missing_columns or [],
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='DATA_LOAD_ERROR', context=context)
        self.source_type = source_type
        self.missing_columns = missing_columns or []
        self.original_error = original_error


class OutputGenerationError(GB2260Error):
    """Exception raised for errors while converting a tree for output."""
    
    def __init__(self, message: str, output_type: Optional[str] = None,
                 offending_value: Any = None):
        """
        Initialize output generation error.
        
        Args:
            message: Human-readable error message
            output_type: Kind of output being produced (json, dataframe, ...)
            offending_value: The value that could not be converted
        """
        context = {
            'output_type': output_type,
            'offending_value': repr(offending_value) if offending_value is not None else None
        }
        super().__init__(message, error_code='OUTPUT_GENERATION_ERROR', context=context)
        self.output_type = output_type
        self.offending_value = offending_value


def create_config_error(config_key: str, value: Any, valid_values: List[str]) -> ConfigurationError:
    """
    Create a configuration error for a value outside its allowed set.
    
    Args:
        config_key: Name of the configuration field
        value: The rejected value
        valid_values: Values the field accepts
        
    Returns:
        ConfigurationError instance
    """
    message = (f"Invalid value for '{config_key}': {value!r}. "
               f"Expected one of: {', '.join(valid_values)}")
    return ConfigurationError(message, config_key=config_key,
                              config_value=value, valid_values=valid_values)
