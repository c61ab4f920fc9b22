"""Signup and login.

Signup creates the account and, for stylers and partners, the profile that
shares its id, in one transaction. Both operations answer with a bearer token
carrying the account id and role.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UnauthorizedError, ValidationError
from app.core.logging import get_logger
from app.core.security import create_principal_token, get_password_hash, verify_password
from app.database.repositories.base import BaseRepository
from app.database.repositories.users import UserRepository
from app.models.database import PROFILE_MODELS, User
from app.models.domain.common import Role
from app.models.domain.user import LoginRequest, SignupRequest, TokenResponse, UserResponse
from app.utils.validators import validate_payload

from .base import guarded, record_to_dict

logger = get_logger(__name__)


class AuthService:
    """Account registration and credential exchange."""

    label = "Auth"

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    def _token_response(self, user: User) -> Dict[str, Any]:
        token = create_principal_token(user.id, Role(user.role))
        response = TokenResponse(
            access_token=token,
            user=UserResponse.model_validate(record_to_dict(user))
        )
        return response.model_dump(by_alias=True, mode="json")

    @guarded("signup")
    async def signup(self, body: Any) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        request = validate_payload(SignupRequest, body)

        if await self.users.email_taken(request.email):
            raise ValidationError("email is already registered")

        role = Role(request.role)
        user = await self.users.create(
            email=request.email,
            password_hash=get_password_hash(request.password),
            role=role.value,
            name=request.name
        )

        profile_model = PROFILE_MODELS.get(role.value)
        if profile_model is not None:
            await BaseRepository(profile_model, self.session).create(
                id=user.id,
                name=request.name,
                email=request.email
            )

        await self.session.commit()
        logger.info("User signed up", user_id=user.id, role=role.value)
        return self._token_response(user)

    @guarded("login")
    async def login(self, body: Any) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        request = validate_payload(LoginRequest, body)

        user = await self.users.get_by_email(request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.warning("Login failed", email=request.email)
            raise UnauthorizedError("Invalid email or password")

        logger.info("User logged in", user_id=user.id)
        return self._token_response(user)
