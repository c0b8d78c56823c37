import pytest

from app.config.seed import NOTIFICATIONS
from app.core.errors import NotFoundError, ValidationFailure
from app.models.alert import AlertCreate, AlertStatus, AlertUpdate


def _create(alert_service, **overrides):
    data = {
        "user_id": "user-1",
        "latitude": 37.78,
        "longitude": -122.41,
        "garbage_type": "hazardous",
        "quantity": "medium",
        "description": "",
    }
    data.update(overrides)
    return alert_service.create_alert(AlertCreate(**data))


def test_create_alert_defaults_and_single_admin_notification(alert_service, notification_service):
    before = len(notification_service.list_notifications())

    result = _create(alert_service)
    alert = result.entity

    assert alert.status == AlertStatus.PENDING
    assert alert.is_form_sent is False
    assert alert.form_type_id is None
    assert alert.form_response is None
    assert alert.image is None
    assert alert.created_at == alert.updated_at
    assert alert.id.startswith("alert-")

    assert len(result.events) == 1
    notifications = notification_service.list_notifications()
    assert len(notifications) == before + 1
    assert notifications[0].user_id == "admin-1"
    assert notifications[0].title == "New Alert"
    assert "hazardous" in notifications[0].body


def test_get_alert_not_found(alert_service):
    with pytest.raises(NotFoundError):
        alert_service.get_alert("alert-missing")


def test_update_status_same_status_does_not_notify(alert_service, store):
    alert = _create(alert_service).entity
    count = len(store.list(NOTIFICATIONS))

    result = alert_service.update_status(alert.id, "pending")

    assert result.events == []
    assert len(store.list(NOTIFICATIONS)) == count
    assert result.entity.updated_at > alert.updated_at


def test_update_status_change_notifies_owner_once(alert_service, notification_service):
    alert = _create(alert_service, user_id="user-5").entity

    result = alert_service.update_status(alert.id, AlertStatus.PROCESSING)

    assert result.entity.status == AlertStatus.PROCESSING
    owner_notifications = notification_service.list_notifications("user-5")
    assert len(owner_notifications) == 1
    assert owner_notifications[0].body == 'Your alert has been updated to "processing".'


def test_update_status_unknown_alert(alert_service):
    with pytest.raises(NotFoundError):
        alert_service.update_status("alert-missing", "completed")


def test_update_status_rejects_unknown_value(alert_service):
    with pytest.raises(ValidationFailure):
        alert_service.update_status("alert-1", "archived")


def test_field_update_refreshes_timestamp_without_notification(alert_service, notification_service):
    alert = _create(alert_service, user_id="user-6").entity

    result = alert_service.update_alert(alert.id, AlertUpdate(description="Now twice as big"))

    assert result.entity.description == "Now twice as big"
    assert result.entity.updated_at > alert.updated_at
    assert result.entity.created_at == alert.created_at
    assert notification_service.list_notifications("user-6") == []


def test_updated_at_advances_even_with_a_frozen_clock(alert_service):
    alert = _create(alert_service).entity
    alert_service.clock = lambda: alert.created_at

    first = alert_service.update_status(alert.id, "processing").entity
    second = alert_service.update_status(alert.id, "completed").entity

    assert alert.created_at < first.updated_at < second.updated_at


def test_list_is_newest_first(alert_service):
    first = _create(alert_service).entity
    second = _create(alert_service).entity

    ids = [a.id for a in alert_service.list_alerts()]
    assert ids[:2] == [second.id, first.id]
    assert ids[2:] == ["alert-1", "alert-2", "alert-3"]


def test_list_filters_combine(alert_service):
    mine = _create(alert_service, user_id="user-9", garbage_type="organic").entity
    _create(alert_service, user_id="user-9", garbage_type="recyclable")
    _create(alert_service, user_id="user-8", garbage_type="organic")

    result = alert_service.list_alerts(user_id="user-9", garbage_type="organic", status="all")

    assert [a.id for a in result] == [mine.id]


def test_status_filter_only_returns_matching(alert_service):
    completed = alert_service.list_alerts(status="completed")
    assert completed
    assert all(a.status == AlertStatus.COMPLETED for a in completed)


def test_status_filters_partition_all_alerts(alert_service):
    created = _create(alert_service).entity
    alert_service.update_status(created.id, "completed")
    _create(alert_service, garbage_type="other")

    everything = [a.id for a in alert_service.list_alerts()]
    by_status = []
    for status in AlertStatus:
        by_status.extend(a.id for a in alert_service.list_alerts(status=status.value))

    assert sorted(by_status) == sorted(everything)
    assert len(set(by_status)) == len(by_status)
    assert [a.id for a in alert_service.list_alerts(status="all")] == everything
