"""Application errors, mapped to a JSON `{message}` envelope in main.py."""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None, error: str = None):
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class ValidationError(AppError):
    status_code = 400


class Conflict(AppError):
    status_code = 400


class InvalidCredentials(AppError):
    status_code = 400

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidToken(AppError):
    status_code = 401

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class Unauthorized(AppError):
    status_code = 401


# 401 et non 403 quand la tâche appartient à un autre user
class Forbidden(AppError):
    status_code = 401


class NotFound(AppError):
    status_code = 404


class StoreError(AppError):
    status_code = 500
