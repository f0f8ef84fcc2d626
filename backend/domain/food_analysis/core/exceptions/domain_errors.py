"""Domain exceptions for food analysis."""


class FoodAnalysisError(Exception):
    """Raised when the analysis provider cannot produce an answer."""

    pass


class InvalidImageError(FoodAnalysisError):
    """Raised when the uploaded image is empty or too large."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class EmptyMessageError(FoodAnalysisError):
    """Raised when a chat message has no content."""

    def __init__(self) -> None:
        super().__init__("Message must not be empty")
