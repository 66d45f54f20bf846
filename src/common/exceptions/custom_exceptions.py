"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class APIError(ApplicationError):
    """Exception raised for errors during external API calls."""

    def __init__(
        self,
        message: str = "API call failed",
        original_exception: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.status_code = status_code
        self.message = f"API Error: {message}"
        if status_code:
            self.message += f" (Status Code: {status_code})"


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"


class StorageError(ApplicationError):
    """Exception raised when the local key-value file cannot be read or written."""

    def __init__(self, message: str = "Storage operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Storage Error: {message}"


class CatalogError(ApplicationError):
    """Exception raised when the product catalog is missing or malformed."""

    def __init__(
        self, message: str = "Catalog could not be loaded", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message, original_exception)
        self.message = f"Catalog Error: {message}"


class MissingExportFieldsError(ApplicationError):
    """Raised when a quotation export is attempted without company name or email."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Missing required quotation fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields
