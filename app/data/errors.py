# app/data/errors.py

"""
Failure kinds raised by the dinosaur data pipeline.

Every stage raises one of these and stops the pipeline; the route
handlers catch DinoError and fall back to an empty page.
"""


class DinoError(Exception):
    kind = "DinoError"


class FileReadError(DinoError):
    kind = "FileReadError"

    def __init__(self, cause: BaseException):
        super().__init__(f"Could not read dinosaur file: {cause}")
        self.cause = cause


class ParseError(DinoError):
    kind = "ParseError"

    def __init__(self, cause: BaseException):
        super().__init__(f"Could not parse dinosaur data: {cause}")
        self.cause = cause


class DataFormatError(DinoError):
    kind = "DataFormatError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DinoNotFoundError(DinoError):
    kind = "DinoNotFoundError"

    def __init__(self, name: str):
        super().__init__(f"No dinosaur named {name!r}")
        self.name = name
