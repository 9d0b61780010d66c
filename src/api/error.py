from typing import NoReturn

from fastapi import status

from libs.result import Error
from src.domain.errors import ErrorKind, kind_of


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


STATUS_BY_KIND = {
    ErrorKind.unauthorized: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.not_a_member: status.HTTP_403_FORBIDDEN,
    ErrorKind.insufficient_permission: status.HTTP_403_FORBIDDEN,
    ErrorKind.insufficient_rank: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.cyclic_dependency: status.HTTP_400_BAD_REQUEST,
    ErrorKind.expired: status.HTTP_410_GONE,
    ErrorKind.exhausted: status.HTTP_410_GONE,
}


def raise_for_error(error: Error) -> NoReturn:
    """
    Translate a use case Error into the matching HTTP exception.

    Codes without a kind are server faults and surface as 500.
    """
    kind = kind_of(error.code)
    if kind is None:
        raise ServerError(error)
    raise ClientError(error, status_code=STATUS_BY_KIND[kind])
