# errors.py - outcomes the HTTP layer turns into status codes


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, key: str = "error", plain: bool = False):
        super().__init__(message)
        self.message = message
        self.key = key
        self.plain = plain  # text/plain body instead of {"<key>": message}


class BadRequest(ServiceError):
    status_code = 400


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    status_code = 409


class InternalError(ServiceError):
    status_code = 500
