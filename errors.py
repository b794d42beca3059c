"""Domain errors raised by ingestion/scoring and mapped to HTTP codes in app.py."""


class TalentTraceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TalentTraceError):
    status_code = 400


class UploadTooLarge(ValidationError):
    status_code = 413


class NotFoundError(TalentTraceError):
    status_code = 404


class ExtractionFailure(TalentTraceError):
    # the document is the user's problem, not ours
    status_code = 400


class ScoringUnavailable(TalentTraceError):
    status_code = 502


class PersistenceFailure(TalentTraceError):
    status_code = 500
