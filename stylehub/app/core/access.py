"""Ownership-aware access decisions.

Each resource declares a ``ResourcePolicy`` mapping every action to an
``AccessRule``. The engine is a pure function of the principal, the rule and
(when known) the record owner; it is evaluated again for every action of
every request.

Evaluation order:

0. disabled rule                         -> MethodNotAllowedError
1. anonymous rule, or public record on a
   rule honouring visibility             -> ALLOW
2. no principal                          -> UnauthorizedError
3. role outside ``required_roles``       -> ForbiddenError
4. ownership required, no admin bypass,
   principal is not the owner            -> ForbiddenError
5. otherwise                             -> ALLOW
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Mapping, Optional

from app.core.exceptions import ForbiddenError, MethodNotAllowedError, UnauthorizedError
from app.core.security import Principal
from app.models.domain.common import Role


class Action(str, Enum):
    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Decision(str, Enum):
    ALLOW = "allow"
    # Role gate passed; the record owner still has to match the principal
    OWNER_ONLY = "owner_only"


@dataclass(frozen=True)
class AccessRule:
    required_roles: FrozenSet[Role] = frozenset()
    ownership_required: bool = False
    admin_bypasses_ownership: bool = True
    allow_anonymous: bool = False
    public_visibility: bool = False
    disabled: bool = False
    disabled_message: str = "This operation is disabled."


@dataclass(frozen=True)
class ResourcePolicy:
    """Per-resource policy descriptor."""
    name: str
    owner_field: Optional[str]
    rules: Mapping[Action, AccessRule] = field(default_factory=dict)

    def rule_for(self, action: Action) -> AccessRule:
        try:
            return self.rules[action]
        except KeyError:
            return AccessRule(disabled=True, disabled_message=f"{action.value} is not supported for {self.name}.")


def rule(
    *roles: Role,
    owner: bool = False,
    admin_bypass: bool = True,
    anonymous: bool = False,
    public_visibility: bool = False,
) -> AccessRule:
    """Shorthand for declaring an ``AccessRule`` in a policy table."""
    return AccessRule(
        required_roles=frozenset(roles),
        ownership_required=owner,
        admin_bypasses_ownership=admin_bypass,
        allow_anonymous=anonymous,
        public_visibility=public_visibility,
    )


def disabled(message: str) -> AccessRule:
    return AccessRule(disabled=True, disabled_message=message)


def gate(
    principal: Optional[Principal],
    access_rule: AccessRule,
    *,
    is_public: bool = False,
) -> Decision:
    """Coarse role gate, run before any record is loaded."""
    if access_rule.disabled:
        raise MethodNotAllowedError(access_rule.disabled_message)

    if access_rule.allow_anonymous or (access_rule.public_visibility and is_public):
        return Decision.ALLOW

    if principal is None:
        raise UnauthorizedError("Authentication required")

    if access_rule.required_roles and principal.role not in access_rule.required_roles:
        raise ForbiddenError(
            "Access denied. Required role: "
            + " or ".join(sorted(r.value for r in access_rule.required_roles))
        )

    if not access_rule.ownership_required:
        return Decision.ALLOW
    if principal.is_admin and access_rule.admin_bypasses_ownership:
        return Decision.ALLOW
    return Decision.OWNER_ONLY


def check_owner(principal: Principal, owner_id: Optional[str]) -> None:
    if owner_id is None or str(owner_id) != str(principal.id):
        raise ForbiddenError("Access denied: you do not own this resource.")


def authorize(
    principal: Optional[Principal],
    access_rule: AccessRule,
    owner_id: Optional[str] = None,
    *,
    is_public: bool = False,
) -> Decision:
    """Full decision for a record whose owner is already known."""
    decision = gate(principal, access_rule, is_public=is_public)
    if decision is Decision.OWNER_ONLY:
        check_owner(principal, owner_id)
    return Decision.ALLOW
