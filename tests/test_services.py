import httpx
import pytest

from src.base.auth.token_store import MemoryTokenStorage, TokenStore
from src.base.client.api_client import ApiError
from src.base.client.backend_api import UserHubApi
from src.base.models.role import KnownRole, SuggestedRole
from src.domain.models.auth_schemas import LoginForm
from src.domain.models.settings_schemas import LanguageForm, NotificationPreferencesForm
from src.domain.models.support_schemas import MAX_ATTACHMENT_BYTES, ContactSupportForm
from src.domain.repositories.mock_backend import MOCK_DEMO_PASSWORD, MockUserHubBackend
from src.domain.services.audit_log_service import AuditLogService
from src.domain.services.auth_service import AuthService
from src.domain.services.dashboard_service import DashboardService
from src.domain.services.notification_service import NotificationService
from src.domain.services.role_service import RoleService
from src.domain.services.settings_service import SettingsService
from src.domain.services.support_service import SupportService
from src.domain.services.user_service import UserService
from tests.conftest import FailingBackend


@pytest.fixture
def backend():
    return MockUserHubBackend()


# ── Audit logs ──────────────────────────────────────────────────────


class TestAuditLogService:
    async def test_newest_first(self, backend):
        page = await AuditLogService().get_audit_logs(backend, page=1, limit=3)
        timestamps = [log.timestamp for log in page.items]
        assert timestamps == sorted(timestamps, reverse=True)
        assert page.total == len(backend.audit_logs)

    async def test_failure_yields_empty_page(self):
        page = await AuditLogService().get_audit_logs(FailingBackend())
        assert page.items == []
        assert (page.total, page.current_page, page.total_pages) == (0, 1, 1)

    async def test_invalid_log_entry_yields_empty_page(self, api_client, recorder):
        recorder.response = httpx.Response(
            200,
            json={"logs": [{"action": "X"}], "total": 1, "currentPage": 1, "totalPages": 1},
        )
        page = await AuditLogService().get_audit_logs(UserHubApi(api_client))
        assert page.items == []
        assert page.total == 0

    async def test_no_content_yields_empty_page(self, api_client, recorder):
        recorder.response = httpx.Response(204)
        page = await AuditLogService().get_audit_logs(UserHubApi(api_client))
        assert page.items == []


# ── Notifications ───────────────────────────────────────────────────


class TestNotificationService:
    async def test_unread_filter(self, backend):
        result = await NotificationService().get_notifications(backend, status="unread")
        assert result.notifications
        assert all(not n.read for n in result.notifications)
        assert result.unread_count == len(result.notifications)

    async def test_mark_as_read(self, backend):
        service = NotificationService()
        notification = await service.mark_as_read(backend, "1")
        assert notification.read is True

    async def test_mark_all_and_clear(self, backend):
        service = NotificationService()
        result = await service.mark_all_as_read(backend)
        assert result.unread_count_after == 0
        assert (await service.get_notifications(backend)).unread_count == 0

        await service.clear_all(backend)
        assert (await service.get_notifications(backend)).total == 0

    async def test_failures_degrade(self):
        service = NotificationService()
        failing = FailingBackend()
        listing = await service.get_notifications(failing)
        assert (listing.notifications, listing.total, listing.unread_count) == ([], 0, 0)
        assert await service.mark_as_read(failing, "1") is None
        assert await service.mark_all_as_read(failing) is None
        assert await service.clear_all(failing) is None

    async def test_malformed_responses_degrade(self, api_client, recorder):
        service = NotificationService()
        api = UserHubApi(api_client)
        recorder.response = httpx.Response(200, json={"notification": {"id": "1"}})
        assert await service.mark_as_read(api, "1") is None

        recorder.response = httpx.Response(200, json={"notifications": [{"id": "1"}]})
        assert (await service.get_notifications(api)).notifications == []

        recorder.response = httpx.Response(200, json={"message": "done"})
        assert await service.mark_all_as_read(api) is None


# ── Roles ───────────────────────────────────────────────────────────


class TestRoleService:
    async def test_counts_per_known_role(self, backend):
        summaries = await RoleService(UserService()).list_roles_with_counts(backend)
        by_name = {s.name: s for s in summaries}
        assert set(by_name) == set(KnownRole.get_all_roles())
        assert by_name["ROLE_ADMIN"].user_count == 1
        assert by_name["ROLE_MANAGER"].user_count == 3

    async def test_counts_are_zero_when_backend_down(self):
        summaries = await RoleService(UserService()).list_roles_with_counts(FailingBackend())
        assert all(s.user_count == 0 for s in summaries)

    async def test_suggestions_are_tagged(self, backend):
        roles = await RoleService(UserService()).suggest_roles(
            backend, "Lead Software Engineer"
        )
        assert KnownRole.USER in roles
        assert KnownRole.MANAGER in roles
        assert SuggestedRole("ROLE_DEVELOPER") in roles

    async def test_suggestion_failure_propagates(self):
        with pytest.raises(ApiError):
            await RoleService(UserService()).suggest_roles(FailingBackend(), "CTO")


# ── Auth ────────────────────────────────────────────────────────────


class TestAuthService:
    async def test_login_stores_token(self, backend):
        store = TokenStore(MemoryTokenStorage())
        result = await AuthService().login(
            backend,
            LoginForm(email="admin@example.com", password=MOCK_DEMO_PASSWORD),
            token_store=store,
        )
        assert result.token
        assert result.user.email == "admin@example.com"
        assert await store.get() == result.token

    async def test_login_failure_propagates(self, backend):
        with pytest.raises(ApiError) as exc_info:
            await AuthService().login(
                backend, LoginForm(email="admin@example.com", password="wrong")
            )
        assert exc_info.value.status_code == 401
        assert backend.audit_logs[0]["action"] == "LOGIN_FAILED"

    async def test_disabled_account_cannot_login(self, backend):
        with pytest.raises(ApiError) as exc_info:
            await AuthService().login(
                backend,
                LoginForm(email="grace.wilson@example.com", password=MOCK_DEMO_PASSWORD),
            )
        assert exc_info.value.status_code == 403

    async def test_logout_clears_store(self):
        store = TokenStore(MemoryTokenStorage())
        await store.set("tok")
        await AuthService().logout(store)
        assert await store.get() is None


# ── Settings & support ──────────────────────────────────────────────


class TestSettingsService:
    async def test_notification_preferences(self, backend):
        result = await SettingsService().update_notification_preferences(
            backend, NotificationPreferencesForm(new_logins=True)
        )
        assert result.success
        assert backend.preferences["newLogins"] is True

    async def test_unavailable_language_rejected(self, backend):
        with pytest.raises(ValueError, match="language_unavailable"):
            await SettingsService().update_language(backend, LanguageForm(language="fr"))

    async def test_language_saved(self, backend):
        await SettingsService().update_language(backend, LanguageForm(language="en"))
        assert backend.language == "en"


def _contact_form() -> ContactSupportForm:
    return ContactSupportForm(
        name="Ada",
        email="ada@example.com",
        subject="Cannot log in",
        inquiry_type="account_access",
        message="My account has been locked since this morning.",
    )


class TestSupportService:
    async def test_submit_contact_with_attachment(self, backend):
        result = await SupportService().submit_contact(
            backend, _contact_form(), ("screen.png", b"png", "image/png")
        )
        assert result.success
        assert backend.support_requests[0]["attachment"] == "screen.png"
        assert backend.support_requests[0]["inquiryType"] == "account_access"

    async def test_attachment_too_large(self, backend):
        big = ("dump.bin", b"0" * (MAX_ATTACHMENT_BYTES + 1), "application/octet-stream")
        with pytest.raises(ValueError, match="attachment_too_large"):
            await SupportService().submit_contact(backend, _contact_form(), big)
        assert backend.support_requests == []

    async def test_submit_failure_propagates(self):
        with pytest.raises(ApiError):
            await SupportService().submit_contact(FailingBackend(), _contact_form())


# ── Dashboard ───────────────────────────────────────────────────────


class TestDashboardService:
    @pytest.fixture
    def service(self):
        return DashboardService(UserService(), AuditLogService(), NotificationService())

    async def test_summary(self, service, backend):
        summary = await service.get_summary(backend)
        assert summary.total_users == 12
        assert summary.disabled_users == 1
        assert summary.active_users == 11
        assert summary.users_per_role["ROLE_USER"] == 7
        assert len(summary.recent_activity) == 5
        assert summary.unread_notifications == 3

    async def test_summary_degrades(self, service):
        summary = await service.get_summary(FailingBackend())
        assert summary.total_users == 0
        assert summary.recent_activity == []
        assert summary.unread_notifications == 0
