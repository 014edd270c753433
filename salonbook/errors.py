"""
Domain error kinds

Every business-rule failure raised by the domain services is one of these.
main.py maps them to a JSON body {"error": kind, "detail": message} with the
status code carried by the class.
"""


class BookingError(Exception):
    kind = "Error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.message}


class ValidationError(BookingError):
    kind = "ValidationError"
    status_code = 400


class InvalidTimeFormat(ValidationError):
    kind = "InvalidTimeFormat"


class CrossesMidnight(ValidationError):
    kind = "CrossesMidnight"


class NotFound(BookingError):
    kind = "NotFound"
    status_code = 404


class Forbidden(BookingError):
    kind = "Forbidden"
    status_code = 403


class InvalidTransition(BookingError):
    kind = "InvalidTransition"
    status_code = 409


class Conflict(BookingError):
    kind = "Conflict"
    status_code = 409
