class GenerationError(Exception):
    """Base class for anything that aborts a generation run."""


class SourceNotFoundError(GenerationError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"File '{file_name}' doesn't exist in data directory.")


class OutputWriteError(GenerationError):
    def __init__(self, path: str, reason=None):
        self.path = path
        message = f"Cannot write '{path}'"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class RemovalError(GenerationError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cannot remove file or directory. Path '{path}' doesn't exist.")
