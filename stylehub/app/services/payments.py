"""Payment record service."""

from app.core.access import Action, ResourcePolicy, rule
from app.core.filters import FilterSchema, at_least, at_most, equals
from app.models.database import Payment
from app.models.domain.outfit import PaymentCreate, PaymentResponse, PaymentUpdate
from app.utils.validators import parse_number

from .base import ResourceService

PAYMENT_POLICY = ResourcePolicy(
    name="payments",
    owner_field="user_id",
    rules={
        Action.LIST: rule(),
        Action.READ: rule(owner=True),
        Action.CREATE: rule(),
        Action.UPDATE: rule(owner=True),
        Action.DELETE: rule(owner=True),
    },
)

PAYMENT_FILTERS = FilterSchema(
    fields=(
        equals("status"),
        equals("currency", parser=lambda param, value: value.upper()),
        equals("method"),
        at_least("minAmount", "amount", parse_number),
        at_most("maxAmount", "amount", parse_number),
    ),
    owner_attribute="user_id",
    sortable={"amount": "amount", "status": "status", "createdAt": "created_at"},
)


class PaymentService(ResourceService[Payment]):
    model = Payment
    policy = PAYMENT_POLICY
    filter_schema = PAYMENT_FILTERS
    create_schema = PaymentCreate
    update_schema = PaymentUpdate
    response_schema = PaymentResponse
    mutable_fields = ("amount", "currency", "method", "status", "description")
    resource_name = "payment"
    label = "Payment"
