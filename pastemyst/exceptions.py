import typing


class PasteMystException(Exception):
    """Base exception for everything raised by this library"""


class ClientClosed(PasteMystException):
    """Raised when a request is made through a Client that has been closed"""


class PasteMystHTTPException(PasteMystException):
    """Raised when the PasteMyst API responds with a non-2xx status"""

    def __init__(self, status: int, message: typing.Optional[str] = None):
        self.status = status
        self.message = message or ""

        fmt = "%s (status code: %s)" % (self.message or "Request failed", status)
        super().__init__(fmt)


class BadRequest(PasteMystHTTPException):
    """400, e.g. an invalid expiresIn value"""


class NotFound(PasteMystHTTPException):
    """404, no paste with the requested id"""
