import json
import logging

INTERNAL_ERROR = "INTERNAL_ERROR"
INVALID_STATE = "INVALID_STATE"
INVALID_PARAMETER_VALUE = "INVALID_PARAMETER_VALUE"
BAD_REQUEST = "BAD_REQUEST"

ERROR_CODES = frozenset([INTERNAL_ERROR, INVALID_STATE, INVALID_PARAMETER_VALUE, BAD_REQUEST])

_logger = logging.getLogger(__name__)


class TsGenericLintException(Exception):
    """
    Generic exception thrown to surface failures of the linter itself (bad configuration,
    unparsable input, broken node contracts). Rule findings are never raised; they are
    returned as diagnostics.
    """

    def __init__(self, message, error_code=INTERNAL_ERROR, **kwargs):
        """
        Args:
            message: The message or exception describing the error that occurred. This will be
                included in the exception's serialized JSON representation.
            error_code: One of the codes in ``ERROR_CODES``. Unknown codes fall back to
                ``INTERNAL_ERROR``.
            kwargs: Additional key-value pairs to include in the serialized JSON representation
                of the exception.
        """
        if error_code not in ERROR_CODES:
            _logger.debug("Unknown error code %r, using %s", error_code, INTERNAL_ERROR)
            error_code = INTERNAL_ERROR
        self.error_code = error_code
        message = str(message)
        self.message = message
        self.json_kwargs = kwargs
        super().__init__(message)

    def serialize_as_json(self):
        exception_dict = {"error_code": self.error_code, "message": self.message}
        exception_dict.update(self.json_kwargs)
        return json.dumps(exception_dict)

    @classmethod
    def invalid_parameter_value(cls, message, **kwargs):
        """Constructs an exception with the `INVALID_PARAMETER_VALUE` error code.

        Args:
            message: The message describing the error that occurred.
            kwargs: Additional key-value pairs to include in the serialized JSON representation.
        """
        return cls(message, error_code=INVALID_PARAMETER_VALUE, **kwargs)


class MalformedNodeError(TsGenericLintException):
    """Raised when a node handed to a checker does not have the shape of a type reference."""

    def __init__(self, message, **kwargs):
        super().__init__(message, error_code=INVALID_STATE, **kwargs)


class SourceParseError(TsGenericLintException):
    """Raised when the TypeScript front end produces a tree with syntax errors."""

    def __init__(self, message, lineno, col_offset, **kwargs):
        self.lineno = lineno
        self.col_offset = col_offset
        super().__init__(
            message, error_code=BAD_REQUEST, lineno=lineno, col_offset=col_offset, **kwargs
        )

    def __reduce__(self):
        # Instances cross process boundaries when files are linted in a pool.
        return _rebuild_source_parse_error, (self.message, self.lineno, self.col_offset)


def _rebuild_source_parse_error(message, lineno, col_offset):
    return SourceParseError(message, lineno, col_offset)


class OverlappingEditsError(TsGenericLintException):
    """Raised when a set of text edits cannot be applied without ambiguity."""

    def __init__(self, message, **kwargs):
        super().__init__(message, error_code=INVALID_STATE, **kwargs)
