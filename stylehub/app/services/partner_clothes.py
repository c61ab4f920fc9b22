"""Partner catalogue service.

Public items are browsable by anyone; private items are visible only to the
owning partner and admins. Partners manage their own catalogue through the
``mine`` listing and the write operations.
"""

from typing import Any, Dict, Mapping, Optional

from app.core.access import AccessRule, Action, ResourcePolicy, gate, rule
from app.core.filters import FilterSchema, at_least, at_most, equals, search
from app.core.security import Principal
from app.models.database import PartnerCloth
from app.models.database.item import DEFAULT_CLOTH_IMAGE
from app.models.domain.common import Role, Visibility
from app.models.domain.item import PartnerClothCreate, PartnerClothResponse, PartnerClothUpdate
from app.utils.validators import parse_bool, parse_number

from .base import ResourceService, guarded

PARTNER_CLOTH_POLICY = ResourcePolicy(
    name="partner clothes",
    owner_field="owner_id",
    rules={
        Action.LIST: rule(Role.PARTNER),
        Action.READ: rule(owner=True, public_visibility=True),
        Action.CREATE: rule(Role.PARTNER),
        Action.UPDATE: rule(Role.PARTNER, owner=True),
        Action.DELETE: rule(Role.PARTNER, owner=True),
    },
)

PUBLIC_LIST_RULE: AccessRule = rule(anonymous=True)

CATALOGUE_FIELDS = (
    equals("category"),
    equals("color"),
    equals("brand"),
    equals("size"),
    at_least("minPrice", "price", parse_number),
    at_most("maxPrice", "price", parse_number),
    equals("wearable", parser=parse_bool),
    search("name"),
    search("search", "name", "brand", "color", "category"),
)

CATALOGUE_SORTS = {"price": "price", "name": "name", "createdAt": "created_at"}

MINE_FILTERS = FilterSchema(
    fields=CATALOGUE_FIELDS + (equals("visibility"),),
    owner_attribute="owner_id",
    sortable=CATALOGUE_SORTS,
)

PUBLIC_FILTERS = FilterSchema(
    fields=CATALOGUE_FIELDS,
    owner_attribute="owner_id",
    owner_params=("partner", "owner"),
    scope_to_principal=False,
    fixed={"visibility": Visibility.PUBLIC.value},
    sortable=CATALOGUE_SORTS,
)


class PartnerClothesService(ResourceService[PartnerCloth]):
    model = PartnerCloth
    policy = PARTNER_CLOTH_POLICY
    filter_schema = MINE_FILTERS
    create_schema = PartnerClothCreate
    update_schema = PartnerClothUpdate
    response_schema = PartnerClothResponse
    mutable_fields = (
        "name", "color", "category", "brand", "size", "price", "material",
        "season", "occasion_tags", "wearable", "image", "visibility",
    )
    resource_name = "cloth"
    label = "Cloth"
    collection_key = "clothes"

    def enrich(self, data: Dict[str, Any], record: PartnerCloth) -> Dict[str, Any]:
        data["imageUrl"] = record.image or DEFAULT_CLOTH_IMAGE
        data["displayDescription"] = f"{record.brand} {record.name}".strip()
        data["owner"] = str(record.owner_id)
        return data

    async def prepare_update(self, record: PartnerCloth, values: Dict[str, Any]) -> Dict[str, Any]:
        if "image" in values and values["image"] is None:
            values["image"] = DEFAULT_CLOTH_IMAGE
        return values

    @guarded("public list")
    async def list_public(self, principal: Optional[Principal], query: Mapping[str, Any]) -> Dict[str, Any]:
        """Anonymous catalogue of public items, optionally narrowed to one partner."""
        gate(principal, PUBLIC_LIST_RULE)
        return await self.paginate(query, PUBLIC_FILTERS, principal)
