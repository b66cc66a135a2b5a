"""Custom exceptions for the filter DSL."""


class FilterDSLError(Exception):
    """Base exception for filter DSL errors."""

    pass


class InvalidOperatorError(FilterDSLError):
    """Raised when a condition names an unknown operator or has the wrong number of operands."""

    pass


class InvalidCompositeStructureError(FilterDSLError):
    """Raised when a composite condition is not a logical condition over component nodes."""

    pass


class WireFormatError(FilterDSLError):
    """Raised when a node or variable cannot be converted to or from the wire format."""

    pass


class InvalidScalarTypeError(WireFormatError):
    """Raised when a value references a scalar type that is not registered."""

    pass
