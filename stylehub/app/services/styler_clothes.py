"""Styler wardrobe service.

Styler clothes are always private: stylers see their own items, admins see
everyone's and may narrow the listing to one owner.
"""

from typing import Any, Dict

from app.core.access import Action, ResourcePolicy, rule
from app.core.filters import FilterSchema, equals, search
from app.models.database import StylerCloth
from app.models.domain.common import Role
from app.models.domain.item import StylerClothCreate, StylerClothResponse, StylerClothUpdate

from .base import ResourceService


def as_lower(param: str, value: str) -> str:
    return value.lower()


STYLER_CLOTH_POLICY = ResourcePolicy(
    name="styler clothes",
    owner_field="owner_id",
    rules={
        Action.LIST: rule(Role.STYLER, Role.ADMIN),
        Action.READ: rule(owner=True),
        Action.CREATE: rule(Role.STYLER),
        Action.UPDATE: rule(owner=True),
        Action.DELETE: rule(owner=True),
    },
)

STYLER_CLOTH_FILTERS = FilterSchema(
    fields=(
        equals("category", parser=as_lower),
        equals("color", parser=as_lower),
        equals("skinTone", "skin_tone", parser=as_lower),
        equals("gender", parser=as_lower),
        search("name"),
        search("search", "name", "note"),
    ),
    owner_attribute="owner_id",
    owner_params=("owner", "user", "styler"),
    sortable={"name": "name", "category": "category", "createdAt": "created_at"},
)


class StylerClothesService(ResourceService[StylerCloth]):
    model = StylerCloth
    policy = STYLER_CLOTH_POLICY
    filter_schema = STYLER_CLOTH_FILTERS
    create_schema = StylerClothCreate
    update_schema = StylerClothUpdate
    response_schema = StylerClothResponse
    mutable_fields = ("name", "color", "category", "skin_tone", "gender", "age", "image", "note")
    resource_name = "cloth"
    label = "Cloth"
    collection_key = "clothes"

    def enrich(self, data: Dict[str, Any], record: StylerCloth) -> Dict[str, Any]:
        data["imageUrl"] = record.image
        data["displayDescription"] = record.note or f"{record.color} {record.category}"
        data["owner"] = str(record.owner_id)
        return data
