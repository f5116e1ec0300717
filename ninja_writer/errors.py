class NinjaWriterError(Exception):
    pass


class StatementKindError(NinjaWriterError):
    def __init__(self, expected: str, actual: object, index: int):
        super().__init__(f"Expected {expected} statement at index {index}, found {type(actual).__name__}")
        self.expected = expected
        self.actual = actual
        self.index = index


class BorrowError(NinjaWriterError):
    def __init__(self, message: str, mode: str):
        super().__init__(f"Error: {message} ({mode} ownership)")
        self.mode = mode


class ManifestError(NinjaWriterError):
    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} at statement {position}"
        super().__init__(message)
        self.position = position
