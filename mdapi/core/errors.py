# mdapi/core/errors.py


class MarkdownError(Exception):
    """
    Base error for the markdown accessors.

    `message` is the generic text that is safe to show to a client; the real
    cause is chained on the exception and logged, never exposed.
    """

    message = "Error handling markdown file"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DirectoryAccessError(MarkdownError):
    message = "Error reading markdown files"


class MarkdownFileNotFoundError(MarkdownError):
    message = "Error reading file"


class FileReadError(MarkdownError):
    message = "Error reading file"


class InvalidFileNameError(MarkdownError):
    message = "Invalid file name"


class MarkdownFileExistsError(MarkdownError):
    message = "File already exists"


class FileWriteError(MarkdownError):
    message = "Error writing file"
