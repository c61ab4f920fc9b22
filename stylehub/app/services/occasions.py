"""Occasion planning service."""

from app.core.access import Action, ResourcePolicy, rule
from app.core.filters import FilterSchema, at_least, at_most, equals, search
from app.models.database import Occasion
from app.models.domain.common import Role, SortOrder
from app.models.domain.outfit import OccasionCreate, OccasionResponse, OccasionUpdate
from app.utils.validators import parse_end_date, parse_start_date

from .base import ResourceService

OCCASION_POLICY = ResourcePolicy(
    name="occasions",
    owner_field="user_id",
    rules={
        Action.LIST: rule(),
        Action.READ: rule(owner=True),
        Action.CREATE: rule(Role.STYLER),
        Action.UPDATE: rule(owner=True),
        Action.DELETE: rule(owner=True),
    },
)

OCCASION_FILTERS = FilterSchema(
    fields=(
        equals("type"),
        at_least("startDate", "date", parse_start_date),
        at_most("endDate", "date", parse_end_date),
        search("location"),
        search("dressCode", "dress_code"),
        search("search", "title", "location", "dress_code", "notes"),
    ),
    owner_attribute="user_id",
    sortable={
        "title": "title",
        "date": "date",
        "type": "type",
        "location": "location",
        "dressCode": "dress_code",
        "createdAt": "created_at",
    },
    default_sort=("date", SortOrder.DESC),
)


class OccasionService(ResourceService[Occasion]):
    """Occasions belong to the user who planned them."""

    model = Occasion
    policy = OCCASION_POLICY
    filter_schema = OCCASION_FILTERS
    create_schema = OccasionCreate
    update_schema = OccasionUpdate
    response_schema = OccasionResponse
    mutable_fields = ("title", "type", "date", "location", "dress_code", "notes", "clothes_list")
    resource_name = "occasion"
    label = "Occasion"
