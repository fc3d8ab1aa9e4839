"""Authentication service for password handling and user accounts."""

import logging

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.errors import AppError, ErrorKind
from src.models.user import User
from src.schemas.auth import (
    AuthenticatedIdentity,
    LoginResponse,
    UserResponse,
    UserUpdate,
)
from src.services.tokens import TokenService

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Unrecognized hashes never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class AuthService:
    """Registration, login and profile management over the users table."""

    def __init__(self, db: Session, token_service: TokenService):
        self.db = db
        self.token_service = token_service

    def _get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def register(self, name: str, email: str, password: str) -> UserResponse:
        """Create a new account. Fails if the email is taken."""
        if self.get_user_by_email(email):
            raise AppError(ErrorKind.EMAIL_ALREADY_EXISTS)

        user = User(name=name, email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return UserResponse.model_validate(user)

    def login(self, email: str, password: str) -> LoginResponse:
        """Check credentials and issue an access token.

        Unknown email and wrong password raise the same error. A disabled
        account is reported before the password is checked.
        """
        user = self.get_user_by_email(email)
        if not user:
            logger.warning("Login failed: unknown email")
            raise AppError(ErrorKind.INVALID_CREDENTIALS)

        if not user.active:
            logger.warning(f"Login refused for disabled user {user.id}")
            raise AppError(ErrorKind.ACCOUNT_DISABLED)

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AppError(ErrorKind.INVALID_CREDENTIALS)

        token = self.token_service.issue(
            AuthenticatedIdentity(id=user.id, email=user.email, name=user.name)
        )
        logger.info(f"User {user.id} logged in")
        return LoginResponse(user=UserResponse.model_validate(user), token=token)

    def update_profile(self, user_id: int, data: UserUpdate) -> UserResponse:
        """Update name, email and/or password of an account.

        Changing the password requires the current one.
        """
        user = self._get_user(user_id)
        if not user:
            raise AppError(ErrorKind.USER_NOT_FOUND)

        if data.new_password:
            if not data.current_password:
                raise AppError(ErrorKind.CURRENT_PASSWORD_REQUIRED)
            if not verify_password(data.current_password, user.password_hash):
                raise AppError(ErrorKind.CURRENT_PASSWORD_INCORRECT)

        if data.email and data.email != user.email:
            owner = self.get_user_by_email(data.email)
            if owner and owner.id != user.id:
                raise AppError(ErrorKind.EMAIL_ALREADY_EXISTS)
            user.email = data.email
        if data.name:
            user.name = data.name
        if data.new_password:
            user.password_hash = get_password_hash(data.new_password)

        self.db.commit()
        self.db.refresh(user)
        return UserResponse.model_validate(user)

    def find_by_id(self, user_id: int) -> UserResponse | None:
        """Look up the public view of a user."""
        user = self._get_user(user_id)
        if not user:
            return None
        return UserResponse.model_validate(user)

    def list_all(self) -> list[UserResponse]:
        """All users, newest first."""
        users = self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
        return [UserResponse.model_validate(user) for user in users]

    def verify_token(self, token: str) -> AuthenticatedIdentity:
        """Decode a bearer token into the identity it was issued for."""
        return self.token_service.verify(token)
