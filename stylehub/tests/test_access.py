"""Tests for the access decision engine."""

import uuid

import pytest

from app.core.access import Action, Decision, ResourcePolicy, authorize, check_owner, disabled, gate, rule
from app.core.exceptions import ForbiddenError, MethodNotAllowedError, UnauthorizedError
from app.core.security import Principal
from app.models.domain.common import Role


def principal(role: Role) -> Principal:
    return Principal(id=str(uuid.uuid4()), role=role)


def test_disabled_rule_rejects_everyone():
    closed = disabled("POST /partners is disabled.")
    for caller in (None, principal(Role.ADMIN), principal(Role.PARTNER)):
        with pytest.raises(MethodNotAllowedError) as exc:
            gate(caller, closed)
        assert exc.value.detail == "POST /partners is disabled."


def test_missing_action_is_disabled():
    policy = ResourcePolicy(name="things", owner_field="user_id", rules={Action.LIST: rule()})
    assert policy.rule_for(Action.CREATE).disabled
    assert not policy.rule_for(Action.LIST).disabled


def test_anonymous_rule_allows_without_principal():
    assert gate(None, rule(anonymous=True)) is Decision.ALLOW


def test_public_record_allows_anonymous_read():
    public_read = rule(owner=True, public_visibility=True)
    assert authorize(None, public_read, owner_id="someone", is_public=True) is Decision.ALLOW
    with pytest.raises(UnauthorizedError):
        authorize(None, public_read, owner_id="someone", is_public=False)


def test_missing_principal_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        gate(None, rule())


def test_role_gate():
    stylers_only = rule(Role.STYLER)
    assert gate(principal(Role.STYLER), stylers_only) is Decision.ALLOW
    with pytest.raises(ForbiddenError):
        gate(principal(Role.PARTNER), stylers_only)
    with pytest.raises(ForbiddenError):
        gate(principal(Role.ADMIN), stylers_only)


def test_ownership_required_returns_owner_only():
    assert gate(principal(Role.USER), rule(owner=True)) is Decision.OWNER_ONLY


def test_admin_bypasses_ownership_unless_disabled():
    admin = principal(Role.ADMIN)
    assert authorize(admin, rule(owner=True), owner_id="someone-else") is Decision.ALLOW
    with pytest.raises(ForbiddenError):
        authorize(admin, rule(Role.ADMIN, owner=True, admin_bypass=False), owner_id="someone-else")


def test_owner_match():
    caller = principal(Role.STYLER)
    assert authorize(caller, rule(owner=True), owner_id=caller.id) is Decision.ALLOW
    with pytest.raises(ForbiddenError):
        authorize(caller, rule(owner=True), owner_id=str(uuid.uuid4()))


def test_check_owner_rejects_missing_owner():
    with pytest.raises(ForbiddenError):
        check_owner(principal(Role.USER), None)
