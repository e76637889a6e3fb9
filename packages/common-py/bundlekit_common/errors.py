"""
bundlekit Exception Classes

This module defines the exception hierarchy for all bundlekit packages.
All custom exceptions inherit from BundlekitError to enable consistent error handling.

Usage:
    from bundlekit_common.errors import ManifestError, ValidationError

    if not isinstance(data, dict):
        raise ManifestError("package.json must contain a JSON object")
"""


class BundlekitError(Exception):
    """
    Base exception for all bundlekit errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
    """

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """
        Serialize error to dictionary for machine-readable CLI output.

        Returns:
            dict with error details including class name, code, and message
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code='{self.code}', message='{self.message}')"


class ValidationError(BundlekitError):
    """
    Raised when input validation fails.

    Use this for:
    - Unknown package "type" values
    - Invalid bundle options (format, runtime)
    - Empty external ids

    Example:
        if value not in ("module", "commonjs"):
            raise ValidationError(f"Unsupported package type: '{value}'")
    """

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ManifestError(BundlekitError):
    """
    Raised when a package manifest cannot be read or parsed.

    Use this for:
    - package.json that is not valid JSON
    - package.json whose top level is not an object
    - Schema validation failures while loading a manifest
    """

    def __init__(self, message: str):
        super().__init__(message, code="MANIFEST_ERROR")


class NotFoundError(BundlekitError):
    """
    Raised when a requested resource is not found.

    Example:
        if not manifest_path.is_file():
            raise NotFoundError(f"package.json not found: {manifest_path}")
    """

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")
