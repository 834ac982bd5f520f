class CollaboratorError(Exception):
    """Raised when an external completion, speech or transcription service fails."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
