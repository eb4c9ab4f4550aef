# backend/errors.py


class QuizGenError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self):
        body = {"success": False, "error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(QuizGenError):
    status_code = 400


class FileTooLarge(ValidationError):
    pass


class UnsupportedFileType(ValidationError):
    pass


class ExtractionError(QuizGenError):
    pass


class ExtractionEmpty(ExtractionError):
    status_code = 400


class ExtractionFailed(ExtractionError):
    status_code = 500


class UpstreamProviderError(QuizGenError):
    # Never shown to the caller directly; the cascade moves on to the next provider.
    status_code = 502


class ResponseUnparseable(UpstreamProviderError):
    pass


class AllProvidersFailed(QuizGenError):
    status_code = 500
