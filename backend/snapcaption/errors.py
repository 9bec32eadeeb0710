"""Domain errors. Each one carries the HTTP status and the message shown to the caller."""


class SnapCaptionError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingApiKeyError(SnapCaptionError):
    status_code = 401
    message = "Please provide a valid API key"


class InvalidApiKeyError(SnapCaptionError):
    status_code = 401
    message = "API key is invalid or expired"


class InvalidImageError(SnapCaptionError):
    status_code = 400
    message = "Please upload a photo"


class InvalidRequestError(SnapCaptionError):
    status_code = 400
    message = "Invalid request"


class CaptionFormatError(SnapCaptionError):
    """The model answered, but not with the JSON shape we asked for."""
    status_code = 502
    message = "AI response format error, please retry"


class ModelCallError(SnapCaptionError):
    status_code = 502
    message = "Generation failed, please try again later"
