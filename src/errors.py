"""Domain error kinds and their HTTP status mapping."""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    """Closed set of failures raised by the service layer."""

    EMAIL_ALREADY_EXISTS = "email_already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_DISABLED = "account_disabled"
    USER_NOT_FOUND = "user_not_found"
    CURRENT_PASSWORD_REQUIRED = "current_password_required"
    CURRENT_PASSWORD_INCORRECT = "current_password_incorrect"
    UNAUTHENTICATED = "unauthenticated"
    MALFORMED_CREDENTIAL = "malformed_credential"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    CLIENTE_NOT_FOUND = "cliente_not_found"
    ORCAMENTO_NOT_FOUND = "orcamento_not_found"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ACCOUNT_DISABLED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CURRENT_PASSWORD_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CURRENT_PASSWORD_INCORRECT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.MALFORMED_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_OR_EXPIRED_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CLIENTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ORCAMENTO_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMAIL_ALREADY_EXISTS: "Email already registered",
    ErrorKind.INVALID_CREDENTIALS: "Invalid credentials",
    ErrorKind.ACCOUNT_DISABLED: "User account is disabled",
    ErrorKind.USER_NOT_FOUND: "User not found",
    ErrorKind.CURRENT_PASSWORD_REQUIRED: "Current password is required to change the password",
    ErrorKind.CURRENT_PASSWORD_INCORRECT: "Current password is incorrect",
    ErrorKind.UNAUTHENTICATED: "Authentication token not provided",
    ErrorKind.MALFORMED_CREDENTIAL: "Invalid token format. Use: Bearer <token>",
    ErrorKind.INVALID_OR_EXPIRED_TOKEN: "Invalid or expired token",
    ErrorKind.CLIENTE_NOT_FOUND: "Cliente not found",
    ErrorKind.ORCAMENTO_NOT_FOUND: "Orcamento not found",
}


class AppError(Exception):
    """Typed failure translated to an HTTP response at the API boundary."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]
