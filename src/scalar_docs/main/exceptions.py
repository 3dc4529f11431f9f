class ScalarDocsException(Exception):
    pass


class SpecReadException(ScalarDocsException):
    """A spec file exists (or may exist) but could not be read.

    Absence is never reported with this exception, only permission and I/O
    failures.
    """

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"error reading {path}: {cause}")


class SpecNotFoundException(ScalarDocsException):
    pass


class NotReadyException(ScalarDocsException):
    pass
