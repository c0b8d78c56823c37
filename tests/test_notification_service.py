from app.models.notification import NotificationEvent


def test_list_newest_first_and_filtered(notification_service):
    notification_service.create_notification("user-1", "Hello", "First")
    notification_service.create_notification("admin-1", "Hello", "Second")

    everything = notification_service.list_notifications()
    assert everything[0].body == "Second"
    assert everything[1].body == "First"
    timestamps = [n.created_at for n in everything]
    assert timestamps == sorted(timestamps, reverse=True)

    mine = notification_service.list_notifications("user-1")
    assert {n.user_id for n in mine} == {"user-1"}
    assert mine[0].body == "First"


def test_create_defaults(notification_service):
    created = notification_service.create_notification("user-3", "Title", "Body")
    assert created.id.startswith("notif-")
    assert created.is_read is False


def test_dispatch_keeps_event_order_newest_on_top(notification_service):
    created = notification_service.dispatch([
        NotificationEvent(recipient_id="user-4", title="one", body=""),
        NotificationEvent(recipient_id="user-4", title="two", body=""),
    ])

    assert [n.title for n in created] == ["one", "two"]
    assert [n.title for n in notification_service.list_notifications("user-4")] == ["two", "one"]


def test_dispatch_nothing(notification_service, backend):
    assert notification_service.dispatch([]) == []
    assert backend.blobs == {}


def test_mark_read_and_unknown_id(notification_service):
    assert notification_service.mark_read("notif-1") is True
    assert notification_service.mark_read("notif-1") is False
    assert notification_service.mark_read("notif-missing") is False

    read = [n for n in notification_service.list_notifications() if n.id == "notif-1"][0]
    assert read.is_read is True


def test_mark_all_read_only_touches_recipient(notification_service):
    notification_service.create_notification("user-1", "Extra", "")
    assert notification_service.unread_count("user-1") == 2

    assert notification_service.mark_all_read("user-1") == 2

    assert notification_service.unread_count("user-1") == 0
    assert notification_service.unread_count("admin-1") == 1
    assert notification_service.mark_all_read("user-1") == 0
    assert notification_service.mark_all_read("nobody") == 0
