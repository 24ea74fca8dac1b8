class ExternalAPIError(Exception):
    """Custom exception for external API errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class CEPTimeoutError(ExternalAPIError):
    """Raised when no CEP provider succeeds before the shared deadline."""

    def __init__(self, message: str = "timeout exceeded", status_code: int = 504):
        super().__init__(message, status_code)
