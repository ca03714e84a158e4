"""Seed records for the mock backend, in the backend's wire format."""

import datetime

_BASE_TIME = datetime.datetime(2024, 6, 1, 9, 0, tzinfo=datetime.timezone.utc)

_SEED_USERS = [
    ("Alice", "Johnson", "admin@example.com", "System Administrator", "ROLE_ADMIN,ROLE_USER"),
    ("Bob", "Smith", "bob.smith@example.com", "Engineering Manager", "ROLE_MANAGER,ROLE_USER"),
    ("Carol", "White", "carol.white@example.com", "Content Editor", "ROLE_EDITOR,ROLE_USER"),
    ("David", "Brown", "david.brown@example.com", "Support Specialist", "ROLE_SUPPORT,ROLE_USER"),
    ("Eve", "Davis", "eve.davis@example.com", "Compliance Auditor", "ROLE_AUDITOR"),
    ("Frank", "Miller", "frank.miller@example.com", None, "ROLE_USER"),
    ("Grace", "Wilson", "grace.wilson@example.com", "Contractor", "ROLE_GUEST"),
    ("Henry", "Moore", "henry.moore@example.com", "Software Engineer", "ROLE_USER"),
    ("Ivy", "Taylor", "ivy.taylor@example.com", "Product Manager", "ROLE_MANAGER"),
    ("Jack", "Anderson", "jack.anderson@example.com", "Technical Writer", "ROLE_EDITOR"),
    ("Karen", "Thomas", "karen.thomas@example.com", "Helpdesk Lead", "ROLE_SUPPORT,ROLE_MANAGER"),
    ("Leo", "Jackson", "leo.jackson@example.com", "Intern", "ROLE_GUEST,ROLE_USER"),
]

_SEED_AUDIT_LOGS = [
    ("admin@example.com", "LOGIN_SUCCESS", "User logged in", "Auth"),
    ("admin@example.com", "USER_CREATED", "Created user leo.jackson@example.com", "User"),
    ("bob.smith@example.com", "LOGIN_FAILED", "Invalid password", "Auth"),
    ("admin@example.com", "USER_UPDATED", "Disabled grace.wilson@example.com", "User"),
    ("carol.white@example.com", "PROFILE_UPDATED", "Changed job title", "User"),
    ("admin@example.com", "ROLE_ASSIGNED", "Granted ROLE_SUPPORT to karen.thomas@example.com", "Role"),
    ("david.brown@example.com", "LOGOUT", "User logged out", "Auth"),
]

_SEED_NOTIFICATIONS = [
    ("New user registered", "leo.jackson@example.com created an account.", False, "/users/12"),
    ("Password changed", "Your password was changed successfully.", True, None),
    ("Role updated", "karen.thomas@example.com was granted ROLE_SUPPORT.", False, "/users/11"),
    ("System maintenance", "Scheduled maintenance on Sunday at 02:00 UTC.", False, None),
]


def _iso(dt: datetime.datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def seed_users() -> list[dict]:
    users = []
    for index, (first, last, email, title, roles) in enumerate(_SEED_USERS, start=1):
        created = _BASE_TIME - datetime.timedelta(days=90 - index * 5)
        user = {
            "id": str(index),
            "firstName": first,
            "lastName": last,
            "email": email,
            "roles": roles,
            "accountNonExpired": True,
            "accountNonLocked": True,
            "credentialsNonExpired": True,
            "enabled": email != "grace.wilson@example.com",
            "createdDate": _iso(created),
            "updatedDate": _iso(created + datetime.timedelta(days=3)),
            "lastLoginDate": _iso(_BASE_TIME - datetime.timedelta(hours=index)),
        }
        if title:
            user["jobTitle"] = title
        users.append(user)
    return users


def seed_audit_logs() -> list[dict]:
    return [
        {
            "id": str(index),
            "timestamp": _iso(_BASE_TIME - datetime.timedelta(minutes=30 * index)),
            "user": actor,
            "action": action,
            "details": details,
            "entity": entity,
        }
        for index, (actor, action, details, entity) in enumerate(_SEED_AUDIT_LOGS, start=1)
    ]


def seed_notifications() -> list[dict]:
    notifications = []
    for index, (title, message, read, link) in enumerate(_SEED_NOTIFICATIONS, start=1):
        notification = {
            "id": str(index),
            "title": title,
            "message": message,
            "timestamp": _iso(_BASE_TIME - datetime.timedelta(hours=2 * index)),
            "read": read,
        }
        if link:
            notification["link"] = link
        notifications.append(notification)
    return notifications
