"""Domain error taxonomy mapped to HTTP status codes at the request boundary"""


class CasinoError(Exception):
    """Base error carrying the status code and the message shown to clients"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CasinoError):
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(CasinoError):
    status_code = 401
    default_message = "Not authenticated"


class InternalError(CasinoError):
    status_code = 500
