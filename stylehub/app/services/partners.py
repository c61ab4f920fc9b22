"""Partner profile services.

``PartnerService`` is the partner's own view of their profile: bulk listing
and bulk creation are disabled, and every id operation is self-only.
``PublicPartnerService`` is the anonymous directory of partners.
"""

from app.core.access import Action, ResourcePolicy, disabled, rule
from app.core.filters import FilterSchema, search
from app.models.database import Partner
from app.models.domain.common import Role
from app.models.domain.user import PartnerCreate, PartnerResponse, PartnerUpdate

from .base import ResourceService

PARTNER_POLICY = ResourcePolicy(
    name="partners",
    owner_field="id",
    rules={
        Action.LIST: disabled("GET /partners (all) is disabled."),
        Action.READ: rule(Role.PARTNER, owner=True, admin_bypass=False),
        Action.CREATE: disabled("POST /partners is disabled."),
        Action.UPDATE: rule(Role.PARTNER, owner=True, admin_bypass=False),
        Action.DELETE: rule(Role.PARTNER, owner=True, admin_bypass=False),
    },
)

PUBLIC_PARTNER_POLICY = ResourcePolicy(
    name="public partners",
    owner_field="id",
    rules={
        Action.LIST: rule(anonymous=True),
        Action.READ: rule(anonymous=True),
    },
)

PUBLIC_PARTNER_FILTERS = FilterSchema(
    fields=(
        search("name"),
        search("company"),
        search("search", "name", "company"),
    ),
    sortable={"name": "name", "createdAt": "created_at"},
)


class PartnerService(ResourceService[Partner]):
    model = Partner
    policy = PARTNER_POLICY
    create_schema = PartnerCreate
    update_schema = PartnerUpdate
    response_schema = PartnerResponse
    mutable_fields = ("name", "email", "phone", "address", "company", "avatar", "profile_metadata")
    resource_name = "partner"
    label = "Partner"
    self_owned = True


class PublicPartnerService(ResourceService[Partner]):
    model = Partner
    policy = PUBLIC_PARTNER_POLICY
    filter_schema = PUBLIC_PARTNER_FILTERS
    response_schema = PartnerResponse
    resource_name = "partner"
    label = "Partner"
    self_owned = True
