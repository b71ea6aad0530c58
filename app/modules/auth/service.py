from app.database.json_store import RecordStore
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from app.modules.users.models import User
from app.modules.users.schemas import UserResponse
from app.core.exceptions import ConflictError, UnauthorizedError, ValidationFailedError
from app.core.security import create_access_token, hash_password, verify_password
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: RecordStore):
        self.store = store

    def _find_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return self.store.users.find(lambda u: u.email.lower() == email)

    def _token_for(self, user: User) -> TokenResponse:
        return TokenResponse(
            access_token=create_access_token(user.id),
            token_type="bearer",
            user=UserResponse.model_validate(user)
        )

    def register(self, register_data: RegisterRequest) -> TokenResponse:
        """Create a user and return a token for it"""
        name = register_data.name.strip()
        if not name:
            raise ValidationFailedError("Name is required")
        with self.store.transaction(self.store.users):
            if self._find_by_email(register_data.email):
                raise ConflictError("User already exists")
            user = self.store.users.add(User(
                name=name,
                email=str(register_data.email).lower(),
                password_hash=hash_password(register_data.password)
            ))
        logger.info(f"Registered user {user.id}")
        return self._token_for(user)

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Check credentials and issue a token"""
        user = self._find_by_email(login_data.email)
        if not user or not verify_password(user.password_hash, login_data.password):
            raise UnauthorizedError("Invalid email or password")
        return self._token_for(user)
