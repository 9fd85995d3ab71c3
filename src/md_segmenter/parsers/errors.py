class DocumentReadError(OSError):
    """Raised when a document cannot be opened or read.

    Always carries the path of the document that failed, with the underlying
    error chained as ``__cause__``.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path
        self.cause = cause
