from app.services import fanout


ALERT = {"id": "alert-9", "user_id": "user-7", "garbage_type": "electronic", "status": "pending"}


def test_alert_created_goes_to_admin():
    event = fanout.alert_created(ALERT)
    assert event.recipient_id == "admin-1"
    assert event.title == "New Alert"
    assert "electronic" in event.body


def test_status_unchanged_produces_nothing():
    assert fanout.status_changed(ALERT, dict(ALERT)) is None


def test_status_changed_goes_to_owner():
    event = fanout.status_changed(ALERT, {**ALERT, "status": "completed"})
    assert event.recipient_id == "user-7"
    assert event.title == "Alert Status Updated"
    assert event.body == 'Your alert has been updated to "completed".'


def test_form_events():
    assert fanout.form_sent(ALERT).recipient_id == "user-7"
    received = fanout.form_response_received(ALERT)
    assert received.recipient_id == "admin-1"
    assert "#alert-9" in received.body


def test_message_goes_to_the_other_party():
    from_admin = fanout.message_sent(ALERT, {"alert_id": "alert-9", "sender_role": "admin"})
    from_user = fanout.message_sent(ALERT, {"alert_id": "alert-9", "sender_role": "user"})

    assert from_admin.recipient_id == "user-7"
    assert from_user.recipient_id == "admin-1"
    assert from_user.title == "New Message"


def test_message_without_alert_produces_nothing():
    assert fanout.message_sent(None, {"alert_id": "ghost", "sender_role": "user"}) is None


def test_admin_recipient_follows_settings(monkeypatch):
    monkeypatch.setattr(fanout.settings, "ADMIN_RECIPIENT_ID", "ops-desk")
    assert fanout.alert_created(ALERT).recipient_id == "ops-desk"
