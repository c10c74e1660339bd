"""Tests for the explicit request context and its capability checks."""

import pytest
from pydantic import ValidationError as SchemaError

from grind.core.context import RequestContext, Role
from grind.core.exceptions import AuthorizationError, ConflictError, GrindError, NotFoundError, ValidationError


class TestRequestContext:
    def test_admin_passes_everything(self):
        ctx = RequestContext(user_id=1, role=Role.ADMIN)
        ctx.require_admin("assign workouts")
        ctx.require_athlete_scope(42)

    def test_athlete_own_scope_only(self):
        ctx = RequestContext(user_id=5, role=Role.ATHLETE)
        ctx.require_athlete_scope(5)
        with pytest.raises(AuthorizationError):
            ctx.require_athlete_scope(6)

    def test_athlete_not_admin(self):
        ctx = RequestContext(user_id=5, role=Role.ATHLETE)
        with pytest.raises(AuthorizationError) as excinfo:
            ctx.require_admin("assign workouts")
        assert excinfo.value.detail == "Only admins may assign workouts"

    def test_member_has_no_portal_access(self):
        ctx = RequestContext(user_id=9, role=Role.MEMBER)
        with pytest.raises(AuthorizationError):
            ctx.require_athlete_scope(9)

    def test_frozen(self):
        ctx = RequestContext(user_id=5, role=Role.ATHLETE)
        with pytest.raises(SchemaError):
            ctx.role = Role.ADMIN


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error, status",
        [(ValidationError, 422), (NotFoundError, 404), (AuthorizationError, 403), (ConflictError, 409)],
    )
    def test_status_codes(self, error, status):
        exc = error("boom")
        assert isinstance(exc, GrindError)
        assert exc.status_code == status
        assert exc.detail == "boom"
