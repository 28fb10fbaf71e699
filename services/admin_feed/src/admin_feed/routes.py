import logging
from collections.abc import Callable
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from soteros_shared.db import AdminNotification, AdminNotificationRepository, NotificationFilters
from soteros_shared.enums import ALL_EVENT_TYPES, NotificationType, PriorityLevel, Severity
from soteros_shared.events import parse_event

from admin_feed.config import AdminFeedConfig
from admin_feed.producers import create_from_event

logger = logging.getLogger(__name__)

bp = Blueprint("admin_notifications", __name__, url_prefix="/api/admin/notifications")
health_bp = Blueprint("health", __name__)

ADMIN_HEADER = "X-Admin-Id"

_TRUE_VALUES = {"1", "true", "yes"}


def _error(message: str, status: int, **extra: Any) -> tuple[Response, int]:
    body: dict[str, Any] = {"success": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def _session_factory() -> sessionmaker[Session]:
    return current_app.extensions["session_factory"]


def _config() -> AdminFeedConfig:
    return current_app.extensions["admin_feed_config"]


def _admin_id() -> int | None:
    raw = request.headers.get(ADMIN_HEADER, "")
    try:
        admin_id = int(raw)
    except ValueError:
        return None
    return admin_id if admin_id > 0 else None


def _positive_int(name: str, default: int) -> int | None:
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 1 else None


def _with_repo(
    action: Callable[[AdminNotificationRepository, int], tuple[Response, int]],
) -> tuple[Response, int]:
    """Resolve the caller, run ``action`` in one transaction and commit."""
    admin_id = _admin_id()
    if admin_id is None:
        return _error("Authentication required", 401)

    with _session_factory()() as session:
        try:
            response = action(AdminNotificationRepository(session), admin_id)
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Notification store error", extra={"admin_id": admin_id})
            return _error("Notification store unavailable", 503)
    return response


@bp.get("/")
def list_notifications() -> tuple[Response, int]:
    config = _config()
    page = _positive_int("page", 1)
    limit = _positive_int("limit", config.default_page_size)
    if page is None or limit is None:
        return _error("'page' and 'limit' must be positive integers", 400)
    limit = min(limit, config.max_page_size)

    filters = NotificationFilters(
        unread_only=request.args.get("unread_only", "").lower() in _TRUE_VALUES,
        type=request.args.get("type") or None,
        severity=request.args.get("severity") or None,
    )

    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        result = repo.list_for_admin(admin_id, page=page, page_size=limit, filters=filters)
        return jsonify({
            "success": True,
            "notifications": [n.to_dict() for n in result.notifications],
            "total": result.total,
            "unreadCount": result.unread_count,
            "pagination": {
                "page": result.page,
                "limit": result.page_size,
                "totalPages": result.total_pages,
            },
        }), 200

    return _with_repo(action)


@bp.get("/unread-count")
def unread_count() -> tuple[Response, int]:
    return _with_repo(
        lambda repo, admin_id: (
            jsonify({"success": True, "unreadCount": repo.unread_count(admin_id)}),
            200,
        )
    )


@bp.get("/priority-count")
def priority_count() -> tuple[Response, int]:
    return _with_repo(
        lambda repo, admin_id: (
            jsonify({
                "success": True,
                "priorityCount": repo.priority_unread_count(admin_id),
            }),
            200,
        )
    )


@bp.put("/<int:notification_id>/read")
def mark_read(notification_id: int) -> tuple[Response, int]:
    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        if not repo.mark_read(notification_id, admin_id):
            return _error("Notification not found", 404)
        return jsonify({"success": True, "message": "Notification marked as read"}), 200

    return _with_repo(action)


@bp.put("/read-all")
def mark_all_read() -> tuple[Response, int]:
    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        count = repo.mark_all_read(admin_id)
        return jsonify({
            "success": True,
            "message": f"{count} notifications marked as read",
            "count": count,
        }), 200

    return _with_repo(action)


@bp.delete("/<int:notification_id>")
def delete_notification(notification_id: int) -> tuple[Response, int]:
    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        if not repo.delete(notification_id, admin_id):
            return _error("Notification not found", 404)
        return jsonify({"success": True, "message": "Notification deleted"}), 200

    return _with_repo(action)


@bp.post("/test")
def create_test_notification() -> tuple[Response, int]:
    """Create a private test notification for the calling admin."""

    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        notification_id = repo.create(
            AdminNotification(
                type=NotificationType.SYSTEM,
                title="\U0001f9ea Test Notification",
                message="This is a test notification to verify the admin feed.",
                severity=Severity.INFO,
                priority_level=PriorityLevel.LOW,
            ),
            target_admin_id=admin_id,
        )
        return jsonify({"success": True, "notificationId": notification_id}), 201

    return _with_repo(action)


@bp.post("/events")
def post_event() -> tuple[Response, int]:
    if _admin_id() is None:
        return _error("Authentication required", 401)

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    event_type = body.get("event_type")
    payload = body.get("payload")

    if event_type is None or payload is None:
        return _error("Both 'event_type' and 'payload' are required", 400)

    if not isinstance(payload, dict):
        return _error("'payload' must be a JSON object", 400)

    if not isinstance(event_type, str):
        return _error("'event_type' must be a string", 400)

    if event_type not in ALL_EVENT_TYPES:
        return _error(
            "Unknown event type",
            422,
            event_type=event_type,
            supported=sorted(ALL_EVENT_TYPES),
        )

    try:
        event = parse_event({"metadata": {"event_type": event_type}, "payload": payload})
    except ValidationError as exc:
        return _error(
            "Payload validation failed",
            400,
            details=exc.errors(include_url=False),
        )

    def action(repo: AdminNotificationRepository, admin_id: int) -> tuple[Response, int]:
        notification_id = create_from_event(repo, event)
        logger.info(
            "Notification created from event",
            extra={
                "event_id": str(event.metadata.event_id),
                "event_type": event_type,
                "notification_id": notification_id,
                "admin_id": admin_id,
            },
        )
        return jsonify({"success": True, "notificationId": notification_id}), 201

    return _with_repo(action)


@health_bp.get("/health")
def health() -> tuple[Response, int]:
    try:
        with _session_factory()() as session:
            session.execute(text("SELECT 1"))
        db_ok = True
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        db_ok = False

    return jsonify({
        "status": "healthy" if db_ok else "unhealthy",
        "checks": {"database": "ok" if db_ok else "unreachable"},
    }), 200 if db_ok else 503
