"""Generic ownership-aware resource service.

Every resource is a thin subclass of ``ResourceService`` that declares:
- the SQLAlchemy model and the ``ResourcePolicy`` guarding it
- the ``FilterSchema`` accepted by its list operation
- create/update/response schemas and the update allow-list
- an optional ``enrich`` hook adding computed fields to the response

The service runs the access engine, the filter builder and the pagination
engine in that order, talks to the store through ``BaseRepository`` and
commits after every write. Store failures surface as ``InternalError``.
"""

from datetime import datetime
from functools import wraps
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Tuple, Type

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.access import Action, Decision, ResourcePolicy, authorize, check_owner, gate
from app.core.exceptions import AppException, InternalError, NotFoundError, ValidationError
from app.core.filters import FilterSchema, build_filter, build_order
from app.core.logging import get_logger
from app.core.pagination import normalize_pagination, page_response
from app.core.security import Principal
from app.database.repositories.base import BaseRepository, ModelType
from app.models.domain.common import CamelModel, Visibility
from app.utils.validators import as_utc, null_required_fields, parse_id, required_fields, validate_payload

logger = get_logger(__name__)

# Never accepted from a request body
IDENTITY_FIELDS = frozenset({
    "id", "_id",
    "userId", "user_id",
    "ownerId", "owner_id", "ownerType", "owner_type",
    "role",
    "password", "passwordHash", "password_hash",
    "createdAt", "created_at", "updatedAt", "updated_at",
})


def record_to_dict(record: Any) -> Dict[str, Any]:
    """Column attributes of a loaded record keyed by attribute name.

    Timestamps come back naive from some backends; they are always UTC.
    """
    values = {}
    for attr in inspect(record).mapper.column_attrs:
        value = getattr(record, attr.key)
        values[attr.key] = as_utc(value) if isinstance(value, datetime) else value
    return values


def guarded(operation: str):
    """Turn unexpected failures into ``InternalError`` after rolling back."""
    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except AppException:
                raise
            except Exception as e:
                logger.error(f"{self.label} {operation} failed", error=e)
                await self.session.rollback()
                raise InternalError(str(e)) from e
        return wrapper
    return decorator


class ResourceService(Generic[ModelType]):
    """CRUD over one owned resource."""

    model: Type[ModelType]
    policy: ResourcePolicy
    filter_schema: FilterSchema = FilterSchema()
    create_schema: Optional[Type[CamelModel]] = None
    update_schema: Optional[Type[CamelModel]] = None
    response_schema: Type[CamelModel]
    mutable_fields: Tuple[str, ...] = ()
    # Identity fields a write may still carry (admins set roles and passwords)
    create_keeps: Tuple[str, ...] = ()
    update_keeps: Tuple[str, ...] = ()

    # Key used for the record in create/update responses, e.g. "occasion"
    resource_name: str = "record"
    label: str = "Record"
    collection_key: str = "data"
    # The record id is the owner id (Styler and Partner profiles)
    self_owned: bool = False

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = BaseRepository(self.model, session)

    # Presentation

    def present(self, record: ModelType) -> Dict[str, Any]:
        data = self.response_schema.model_validate(record_to_dict(record))
        return self.enrich(data.model_dump(by_alias=True, mode="json"), record)

    def enrich(self, data: Dict[str, Any], record: ModelType) -> Dict[str, Any]:
        return data

    # Ownership

    def owner_of(self, record: ModelType) -> Optional[str]:
        if self.self_owned:
            return record.id
        return getattr(record, self.policy.owner_field)

    def is_public(self, record: ModelType) -> bool:
        return getattr(record, "visibility", None) == Visibility.PUBLIC.value

    # Hooks

    async def prepare_create(self, principal: Principal, values: Dict[str, Any]) -> Dict[str, Any]:
        """Attach the owner to validated create values."""
        if self.policy.owner_field and not self.self_owned:
            values[self.policy.owner_field] = principal.id
        return values

    async def prepare_update(self, record: ModelType, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    async def after_create(self, record: ModelType, values: Dict[str, Any]) -> None:
        """Write rows that belong with a new record, before the commit."""

    # Helpers

    @staticmethod
    def strip_identity(body: Any, keep: Iterable[str] = ()) -> Dict[str, Any]:
        if not isinstance(body, Mapping):
            raise ValidationError("Request body must be a JSON object")
        kept = set(keep)
        return {
            key: value for key, value in body.items()
            if key not in IDENTITY_FIELDS or key in kept
        }

    def select_mutable(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only allow-listed fields, by wire alias or attribute name."""
        selected = {}
        for name in self.mutable_fields:
            info = self.update_schema.model_fields[name]
            alias = info.alias or name
            for key in (alias, name):
                if key in payload:
                    selected[alias] = payload[key]
                    break
        return selected

    def reset_nulled(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """An explicit null on an optional field restores its create-time default."""
        fields = self.create_schema.model_fields
        for name, value in values.items():
            if value is None and name in fields:
                values[name] = fields[name].get_default(call_default_factory=True)
        return values

    async def fetch(self, record_id: str) -> ModelType:
        record = await self.repository.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    async def load(self, principal: Optional[Principal], action: Action, raw_id: Any) -> ModelType:
        """Resolve a path id to a record the principal may act on.

        Order: auth, role gate, id syntax, (self-owned: path ownership),
        existence, record ownership.
        """
        access_rule = self.policy.rule_for(action)

        if access_rule.public_visibility and not access_rule.disabled:
            record_id = parse_id(raw_id)
            record = await self.fetch(record_id)
            authorize(principal, access_rule, self.owner_of(record), is_public=self.is_public(record))
            return record

        decision = gate(principal, access_rule)
        record_id = parse_id(raw_id)
        if decision is Decision.OWNER_ONLY and self.self_owned:
            check_owner(principal, record_id)
        record = await self.fetch(record_id)
        if decision is Decision.OWNER_ONLY:
            check_owner(principal, self.owner_of(record))
        return record

    async def paginate(
        self,
        query: Mapping[str, Any],
        schema: FilterSchema,
        principal: Optional[Principal],
    ) -> Dict[str, Any]:
        conditions = build_filter(self.model, schema, query, principal)
        order_by = build_order(self.model, schema, query)
        params = normalize_pagination(query.get("page"), query.get("limit"))

        total = await self.repository.count(conditions)
        records = await self.repository.get_multi(
            conditions=conditions,
            skip=params.skip,
            limit=params.limit,
            order_by=order_by
        )
        return page_response(
            [self.present(record) for record in records],
            total,
            params,
            key=self.collection_key
        )

    # Operations

    @guarded("list")
    async def list(self, principal: Optional[Principal], query: Mapping[str, Any]) -> Dict[str, Any]:
        gate(principal, self.policy.rule_for(Action.LIST))
        return await self.paginate(query, self.filter_schema, principal)

    @guarded("read")
    async def get(self, principal: Optional[Principal], record_id: Any) -> Dict[str, Any]:
        record = await self.load(principal, Action.READ, record_id)
        return self.present(record)

    @guarded("create")
    async def create(self, principal: Optional[Principal], body: Any) -> Dict[str, Any]:
        gate(principal, self.policy.rule_for(Action.CREATE))
        payload = self.strip_identity(body, keep=self.create_keeps)
        validated = validate_payload(self.create_schema, payload)
        values = await self.prepare_create(principal, validated.model_dump(exclude_none=True))

        record = await self.repository.create(**values)
        await self.after_create(record, values)
        await self.session.commit()
        logger.info(f"{self.label} created", record_id=record.id, principal_id=principal.id)
        return {"message": f"{self.label} created", self.resource_name: self.present(record)}

    @guarded("update")
    async def update(self, principal: Optional[Principal], record_id: Any, body: Any) -> Dict[str, Any]:
        record = await self.load(principal, Action.UPDATE, record_id)
        payload = self.select_mutable(self.strip_identity(body, keep=self.update_keeps))
        if not payload:
            raise ValidationError("No valid fields provided for update.")

        nulled = null_required_fields(
            self.create_schema,
            payload,
            required_fields(self.create_schema) & set(self.mutable_fields)
        )
        if nulled:
            raise ValidationError(nulled)

        validated = validate_payload(self.update_schema, payload)
        values = self.reset_nulled(validated.model_dump(exclude_unset=True))
        values = await self.prepare_update(record, values)

        record = await self.repository.update(record, values)
        await self.session.commit()
        logger.info(f"{self.label} updated", record_id=record.id, fields=sorted(values))
        return {"message": f"{self.label} updated", self.resource_name: self.present(record)}

    @guarded("delete")
    async def delete(self, principal: Optional[Principal], record_id: Any) -> Dict[str, str]:
        record = await self.load(principal, Action.DELETE, record_id)
        await self.repository.delete(record)
        await self.session.commit()
        logger.info(f"{self.label} deleted", record_id=record.id)
        return {"message": f"{self.label} deleted successfully"}
