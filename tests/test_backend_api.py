import httpx
import pytest

from src.base.client.backend_api import UserHubApi


@pytest.fixture
def api(api_client):
    return UserHubApi(api_client)


class TestEndpoints:
    @pytest.mark.parametrize(
        "call, method, path",
        [
            (lambda api: api.login({"email": "a@b.c"}), "POST", "/api/auth/login"),
            (lambda api: api.register({}), "POST", "/api/auth/register"),
            (lambda api: api.forgot_password({}), "POST", "/api/auth/forgot-password"),
            (lambda api: api.reset_password({}), "POST", "/api/auth/reset-password"),
            (lambda api: api.get_current_user(), "GET", "/api/auth/me"),
            (lambda api: api.change_password({}), "POST", "/api/auth/change-password"),
            (lambda api: api.get_user_by_id("42"), "GET", "/api/users/42"),
            (lambda api: api.create_user({}), "POST", "/api/users"),
            (lambda api: api.update_user("42", {}), "PUT", "/api/users/42"),
            (lambda api: api.delete_user("42"), "DELETE", "/api/users/42"),
            (lambda api: api.get_unique_roles(), "GET", "/api/roles/unique"),
            (lambda api: api.suggest_roles("CTO"), "POST", "/api/ai/suggest-roles"),
            (lambda api: api.mark_notification_read("7"), "PATCH", "/api/notifications/7/read"),
            (lambda api: api.mark_all_notifications_read(), "POST", "/api/notifications/mark-all-read"),
            (lambda api: api.clear_notifications(), "DELETE", "/api/notifications"),
            (lambda api: api.update_notification_preferences({}), "PUT", "/api/settings/notifications"),
            (lambda api: api.update_language_preference({}), "PUT", "/api/settings/language"),
            (lambda api: api.submit_feedback({}), "POST", "/api/feedback"),
        ],
    )
    async def test_method_and_path(self, api, recorder, call, method, path):
        await call(api)
        assert recorder.last.method == method
        assert recorder.last.url.path == path

    async def test_user_id_is_escaped(self, api, recorder):
        await api.get_user_by_id("a/b")
        assert recorder.last.url.raw_path == b"/api/users/a%2Fb"

    async def test_list_users_query(self, api, recorder):
        recorder.response = httpx.Response(
            200, json={"users": [], "total": 0, "currentPage": 1, "totalPages": 1}
        )
        await api.get_users({"page": "1", "limit": "10", "search": "ada"})
        assert recorder.last.url.params["search"] == "ada"

    async def test_suggest_roles_body(self, api, recorder):
        await api.suggest_roles("Support Lead")
        assert recorder.last_json() == {"jobTitle": "Support Lead"}

    async def test_contact_support_is_multipart(self, api, recorder):
        await api.submit_contact_support(
            {"name": "Ada", "subject": "Locked out"},
            ("trace.log", b"stack", "text/plain"),
        )
        assert recorder.last.url.path == "/api/support/contact"
        assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
