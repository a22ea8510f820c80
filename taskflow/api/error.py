from typing import NoReturn

from fastapi import status

from taskflow.libs.result import Error, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.unauthorized: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
    ErrorKind.unavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.internal: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Fails at import if an ErrorKind is added without a status
assert set(STATUS_BY_KIND) == set(ErrorKind), "every ErrorKind needs an HTTP status"


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Translate a use-case Error into the exception the HTTP layer renders"""
    status_code = STATUS_BY_KIND[error.kind]
    if error.kind == ErrorKind.internal:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
