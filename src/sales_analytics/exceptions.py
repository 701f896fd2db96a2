"""Domain-specific exceptions for sales analytics.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from SalesAnalyticsError for easy catching.
"""


class SalesAnalyticsError(Exception):
    """Base exception for all sales analytics errors.

    Users can catch this exception to handle any error raised by the package.
    """

    pass


class ConfigError(SalesAnalyticsError):
    """Raised when there is a configuration error.

    This exception is raised when invalid configuration values are provided,
    such as a non-positive top customers limit.
    """

    pass


class DataQualityError(SalesAnalyticsError):
    """Raised when input tables fail validation.

    This exception is raised before any aggregation begins when:
    - Required columns are missing from a fact or dimension table
    - Dates or measures cannot be coerced to the expected types
    - Dates arrive as numbers or quantities are not whole numbers
    - Dimension keys are null or not unique
    """

    pass
