"""Styler profile service.

Styler profiles are created at signup and share their id with the owning
account. Only the styler may change or remove their own profile; admins can
browse and read profiles but never edit them.
"""

from app.core.access import Action, ResourcePolicy, disabled, rule
from app.core.filters import FilterSchema, equals, search
from app.models.database import Styler
from app.models.domain.common import Role
from app.models.domain.user import StylerCreate, StylerResponse, StylerUpdate

from .base import ResourceService

STYLER_POLICY = ResourcePolicy(
    name="stylers",
    owner_field="id",
    rules={
        Action.LIST: rule(Role.ADMIN),
        Action.READ: rule(Role.STYLER, Role.ADMIN, owner=True),
        Action.CREATE: disabled("Styler profiles are created through signup."),
        Action.UPDATE: rule(Role.STYLER, owner=True, admin_bypass=False),
        Action.DELETE: rule(Role.STYLER, owner=True, admin_bypass=False),
    },
)

STYLER_FILTERS = FilterSchema(
    fields=(
        search("name"),
        search("search", "name", "email"),
        equals("country"),
        equals("gender"),
    ),
    sortable={"name": "name", "country": "country", "createdAt": "created_at"},
)


class StylerService(ResourceService[Styler]):
    model = Styler
    policy = STYLER_POLICY
    filter_schema = STYLER_FILTERS
    create_schema = StylerCreate
    update_schema = StylerUpdate
    response_schema = StylerResponse
    mutable_fields = ("name", "email", "phone", "country", "gender", "avatar", "profile_metadata")
    resource_name = "styler"
    label = "Styler"
    self_owned = True
