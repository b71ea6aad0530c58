"""
Application error types.

Each error carries its HTTP status so services can raise them directly and the
global handlers in app.main turn them into a {"message": ...} response.
"""

from fastapi import HTTPException, status


class AppError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail)
        self.headers = {"WWW-Authenticate": "Bearer"}


class LocationRequiredError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str = "Please set your location to find nearby peers"):
        super().__init__(detail)


class ValidationFailedError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
