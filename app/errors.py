"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
DECODE_ERROR = "DECODE_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"

INVALID_POINT = "INVALID_POINT"
INVALID_CONTOURS = "INVALID_CONTOURS"
INVALID_GEOMETRY_TYPE = "INVALID_GEOMETRY_TYPE"
COORDINATES_OUT_OF_RANGE = "COORDINATES_OUT_OF_RANGE"
UNSUPPORTED_GEOMETRY = "UNSUPPORTED_GEOMETRY"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class GeometryDecodeError(DomainError):
    """Raised when a geometry document cannot be read (bad JSON, wrong shape)."""

    pass


class DomainValidationError(DomainError):
    """Raised when a value breaks a domain rule (e.g. coordinates out of range)."""

    code = VALIDATION_ERROR


class InvalidPointError(DomainValidationError):
    code = INVALID_POINT


class InvalidContoursError(DomainValidationError):
    """Raised for open rings, rings that are too short, or rejected contours."""

    code = INVALID_CONTOURS


class InvalidGeometryTypeError(DomainValidationError):
    code = INVALID_GEOMETRY_TYPE


class CoordinatesOutOfRangeError(DomainValidationError):
    code = COORDINATES_OUT_OF_RANGE


class UnsupportedGeometryError(DomainValidationError):
    """Raised when a geometry kind has no store representation."""

    code = UNSUPPORTED_GEOMETRY
