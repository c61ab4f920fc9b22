"""Admin user management service."""

from typing import Any, Dict

from app.core.access import Action, ResourcePolicy, rule
from app.core.exceptions import ValidationError
from app.core.filters import FilterSchema, equals, search
from app.core.security import Principal, get_password_hash
from app.database.repositories.base import BaseRepository
from app.database.repositories.users import UserRepository
from app.models.database import PROFILE_MODELS, User
from app.models.domain.common import Role
from app.models.domain.user import UserCreate, UserResponse, UserUpdate

from .base import ResourceService

ADMIN_ONLY = rule(Role.ADMIN)

USER_POLICY = ResourcePolicy(
    name="users",
    owner_field=None,
    rules={
        Action.LIST: ADMIN_ONLY,
        Action.READ: ADMIN_ONLY,
        Action.CREATE: ADMIN_ONLY,
        Action.UPDATE: ADMIN_ONLY,
        Action.DELETE: ADMIN_ONLY,
    },
)

USER_FILTERS = FilterSchema(
    fields=(
        equals("role", parser=lambda param, value: value.lower()),
        search("search", "email", "name"),
    ),
    sortable={"email": "email", "name": "name", "role": "role", "createdAt": "created_at"},
)


class UserService(ResourceService[User]):
    """Accounts are managed by admins only; roles never change after creation."""

    model = User
    policy = USER_POLICY
    filter_schema = USER_FILTERS
    create_schema = UserCreate
    update_schema = UserUpdate
    response_schema = UserResponse
    mutable_fields = ("name", "email", "password")
    create_keeps = ("role", "password")
    update_keeps = ("password",)
    resource_name = "user"
    label = "User"

    def __init__(self, session):
        super().__init__(session)
        self.repository = UserRepository(session)

    async def prepare_create(self, principal: Principal, values: Dict[str, Any]) -> Dict[str, Any]:
        if await self.repository.email_taken(values["email"]):
            raise ValidationError("email is already registered")
        values["password_hash"] = get_password_hash(values.pop("password"))
        values["role"] = Role(values["role"]).value
        return values

    async def after_create(self, record: User, values: Dict[str, Any]) -> None:
        """Stylers and partners get their profile in the same transaction."""
        profile_model = PROFILE_MODELS.get(record.role)
        if profile_model is not None:
            await BaseRepository(profile_model, self.session).create(
                id=record.id,
                name=record.name or record.email,
                email=record.email
            )

    async def prepare_update(self, record: User, values: Dict[str, Any]) -> Dict[str, Any]:
        if "email" in values and await self.repository.email_taken(values["email"], exclude_id=record.id):
            raise ValidationError("email is already registered")
        if "password" in values:
            values["password_hash"] = get_password_hash(values.pop("password"))
        return values
