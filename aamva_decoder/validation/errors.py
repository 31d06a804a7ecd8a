# ===============================
# File: aamva_decoder/validation/errors.py
# ===============================


class AAMVAError(Exception):
    kind = "aamva_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__ or self.kind)
        self.message = str(self)


class EmptyInputError(AAMVAError):
    """No barcode data provided"""

    kind = "empty_input"


class InvalidFormatError(AAMVAError):
    """Invalid AAMVA barcode format - missing ANSI header"""

    kind = "invalid_format"


class MissingNameError(InvalidFormatError):
    """No name could be derived from the barcode records"""


class InvalidDateError(InvalidFormatError):
    """Date of birth is not a valid calendar date"""

    def __init__(self, message: str = "", element: str = "DBB"):
        super().__init__(message)
        self.element = element
