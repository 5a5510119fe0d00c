# nckuboard/errors.py


class BoardError(Exception):
    """Base class for errors recoverable at the request boundary."""


class InvalidCredentialsError(BoardError):
    """Login attempted with a non-institutional or malformed email."""


class InvalidInputError(BoardError):
    """A required field was empty or failed validation."""


class NotFoundError(BoardError):
    def __init__(self, task_id):
        super().__init__(f"Task #{task_id} not found")
        self.task_id = task_id


class AlreadyAcceptedError(BoardError):
    def __init__(self, task_id, helper: str | None = None):
        super().__init__(f"Task #{task_id} was already accepted")
        self.task_id = task_id
        self.helper = helper
