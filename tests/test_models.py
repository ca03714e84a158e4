import itertools

import pytest
from pydantic import ValidationError

from src.base.models.role import KnownRole, SuggestedRole, join_roles, parse_role, split_roles
from src.base.models.user import User
from src.domain.models.audit_log import AuditLog
from src.domain.models.support_schemas import FeedbackForm
from src.domain.models.user_schemas import ChangePasswordForm, UserForm
from tests.conftest import make_user


# ── User ────────────────────────────────────────────────────────────


class TestUserStatus:
    @pytest.mark.parametrize(
        "enabled, non_locked, non_expired",
        list(itertools.product([True, False], repeat=3)),
    )
    def test_active_iff_all_flags(self, enabled, non_locked, non_expired):
        user = User.model_validate(
            make_user(
                1,
                enabled=enabled,
                accountNonLocked=non_locked,
                accountNonExpired=non_expired,
            )
        )
        expected = "Active" if enabled and non_locked and non_expired else "Disabled"
        assert user.status == expected

    def test_credentials_expiry_does_not_disable(self):
        user = User.model_validate(make_user(1, credentialsNonExpired=False))
        assert user.status == "Active"


class TestUserRoles:
    def test_role_list_is_trimmed(self):
        user = User.model_validate(make_user(1, roles=" ROLE_ADMIN , ROLE_USER,"))
        assert user.role_list == ["ROLE_ADMIN", "ROLE_USER"]

    def test_well_formed_user_has_roles(self):
        user = User.model_validate(make_user(1, roles="ROLE_USER"))
        assert user.role_list

    def test_typed_roles(self):
        user = User.model_validate(make_user(1, roles="ROLE_ADMIN,ROLE_DEVELOPER"))
        assert user.typed_roles() == [KnownRole.ADMIN, SuggestedRole("ROLE_DEVELOPER")]


class TestUserWireFormat:
    def test_password_is_dropped(self):
        user = User.model_validate(make_user(1, password="secret"))
        dumped = user.model_dump(by_alias=True)
        assert "password" not in dumped

    def test_camel_case_output_includes_derived_fields(self):
        user = User.model_validate(make_user(7, jobTitle="CTO"))
        dumped = user.model_dump(mode="json", by_alias=True)
        assert dumped["jobTitle"] == "CTO"
        assert dumped["status"] == "Active"
        assert dumped["roleList"] == ["ROLE_USER"]
        assert dumped["fullName"] == "First7 Last7"

    def test_numeric_id_is_accepted(self):
        user = User.model_validate(make_user(1, id=42))
        assert user.id == "42"


# ── Roles ───────────────────────────────────────────────────────────


class TestRoles:
    def test_parse_known_role_case_insensitive(self):
        assert parse_role("role_admin") is KnownRole.ADMIN

    def test_parse_unknown_role(self):
        role = parse_role(" ROLE_DATA_SCIENTIST ")
        assert role == SuggestedRole("ROLE_DATA_SCIENTIST")
        assert role.trusted is False

    def test_known_roles_are_trusted(self):
        assert all(role.trusted for role in KnownRole)

    def test_split_and_join(self):
        assert split_roles("a, b,,c ") == ["a", "b", "c"]
        assert join_roles(["a ", "", " b"]) == "a,b"


# ── Audit logs ──────────────────────────────────────────────────────


class TestAuditLog:
    @pytest.mark.parametrize(
        "action, severity",
        [
            ("USER_CREATED", "default"),
            ("LOGIN_SUCCESS", "default"),
            ("USER_DELETED", "destructive"),
            ("LOGIN_FAILED", "destructive"),
            ("LOGOUT", "secondary"),
            ("PROFILE_VIEWED", "secondary"),
            ("EXPORT", "outline"),
        ],
    )
    def test_severity(self, action, severity):
        log = AuditLog(
            id="1", timestamp="2024-01-01T00:00:00Z", user="a", action=action
        )
        assert log.severity == severity

    def test_immutable(self):
        log = AuditLog(id="1", timestamp="2024-01-01T00:00:00Z", user="a", action="X")
        with pytest.raises(ValidationError):
            log.action = "Y"


# ── Forms ───────────────────────────────────────────────────────────


def _user_form(**overrides) -> dict:
    form = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "roles": ["ROLE_USER"],
    }
    form.update(overrides)
    return form


class TestUserForm:
    def test_to_backend_joins_roles(self):
        form = UserForm.model_validate(_user_form(roles=["ROLE_USER", "ROLE_ADMIN"]))
        data = form.to_backend()
        assert data["roles"] == "ROLE_USER,ROLE_ADMIN"
        assert data["enabled"] is True
        assert "password" not in data

    def test_requires_a_role(self):
        with pytest.raises(ValidationError):
            UserForm.model_validate(_user_form(roles=[" "]))

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError):
            UserForm.model_validate(_user_form(firstName="A"))

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            UserForm.model_validate(_user_form(email="not-an-email"))

    def test_redacted_hides_password(self):
        form = UserForm.model_validate(_user_form(password="hunter22"))
        assert "password" not in form.redacted()
        assert form.to_backend()["password"] == "hunter22"


class TestOtherForms:
    def test_change_password_must_match(self):
        with pytest.raises(ValidationError):
            ChangePasswordForm(
                current_password="old", new_password="newpass123", confirm_password="nope"
            )

    def test_feedback_blank_email_allowed(self):
        form = FeedbackForm.model_validate(
            {
                "feedbackType": "bug_report",
                "email": "",
                "subject": "Broken link",
                "message": "The help link is broken.",
            }
        )
        assert form.email is None
        assert form.to_backend()["feedbackType"] == "bug_report"
