class ArtVerseException(Exception):
    message: str | None = None

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        if self.message is not None:
            super().__init__(self.message)


class NotFoundError(ArtVerseException):
    message = "Not found"


class SubmissionNotFoundError(NotFoundError):
    def __init__(self, submission_id: int):
        super().__init__(f"Submission with id {submission_id} not found")
        self.submission_id = submission_id


class NftSubmissionNotFoundError(NotFoundError):
    def __init__(self, submission_id: int):
        super().__init__(f"NFT submission with id {submission_id} not found")
        self.submission_id = submission_id


class UsernameTakenError(ArtVerseException):
    def __init__(self, username: str):
        super().__init__(f"Username {username!r} is already registered")
        self.username = username


class SampleDataAlreadySeededError(ArtVerseException):
    message = "Sample data has already been seeded into this store"
