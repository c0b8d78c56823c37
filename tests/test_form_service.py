import pytest

from app.config.seed import NOTIFICATIONS
from app.core.errors import NotFoundError, ValidationFailure
from app.models.alert import AlertCreate
from app.models.form import CheckboxField, SelectField


def _hazardous_alert(alert_service):
    return alert_service.create_alert(AlertCreate(
        user_id="user-1", latitude=37.7, longitude=-122.4, garbage_type="hazardous", quantity="medium",
    )).entity


def test_form_types_are_typed_fields(form_service):
    form = form_service.get_form_type("form-1")

    assert form.name == "Overflow Details"
    assert isinstance(form.fields_json[0], SelectField)
    assert form.fields_json[0].options == ["25%", "50%", "75%", "100%"]
    assert isinstance(form.fields_json[2], CheckboxField)
    assert [f.id for f in form_service.list_form_types()] == ["form-1", "form-2", "form-3"]


def test_unknown_form_type(form_service):
    with pytest.raises(NotFoundError):
        form_service.get_form_type("form-99")


def test_send_form_then_response_scenario(alert_service, form_service, notification_service, store):
    before = len(store.list(NOTIFICATIONS))

    alert = _hazardous_alert(alert_service)
    form_service.send_form(alert.id, "form-2")
    result = form_service.submit_response(alert.id, {"waste_type": "Chemical"})

    stored = alert_service.get_alert(alert.id)
    assert stored.is_form_sent is True
    assert stored.form_type_id == "form-2"
    assert stored.form_response == {"waste_type": "Chemical"}
    assert result.entity == stored

    notifications = notification_service.list_notifications()
    assert len(notifications) == before + 3
    # Newest first: response received, form request, new alert
    assert [n.user_id for n in notifications[:3]] == ["admin-1", "user-1", "admin-1"]
    assert [n.title for n in notifications[:3]] == ["Form Response Received", "Form Request", "New Alert"]


def test_send_form_unknown_alert(form_service):
    with pytest.raises(NotFoundError):
        form_service.send_form("alert-missing", "form-1")


def test_send_form_unknown_form_type_leaves_alert_untouched(alert_service, form_service):
    alert = _hazardous_alert(alert_service)

    with pytest.raises(NotFoundError):
        form_service.send_form(alert.id, "form-99")

    assert alert_service.get_alert(alert.id) == alert


def test_resend_overwrites_form_reference(alert_service, form_service):
    alert = _hazardous_alert(alert_service)
    form_service.send_form(alert.id, "form-1")
    result = form_service.send_form(alert.id, "form-3")

    assert result.entity.form_type_id == "form-3"
    assert len(result.events) == 1


def test_response_before_form_sent_is_rejected(alert_service, form_service, store):
    alert = _hazardous_alert(alert_service)
    count = len(store.list(NOTIFICATIONS))

    with pytest.raises(ValidationFailure):
        form_service.submit_response(alert.id, {"waste_type": "Chemical"})

    assert alert_service.get_alert(alert.id).form_response is None
    assert len(store.list(NOTIFICATIONS)) == count


def test_response_unknown_alert(form_service):
    with pytest.raises(NotFoundError):
        form_service.submit_response("alert-missing", {})


def test_response_is_stored_verbatim(form_service, alert_service):
    # alert-2 is seeded with form-2 already sent
    answers = {"waste_type": "Medical", "immediate_danger": True, "unexpected": "kept"}

    form_service.submit_response("alert-2", answers)

    assert alert_service.get_alert("alert-2").form_response == answers


def test_numeric_answers_are_not_coerced(alert_service, form_service):
    alert = _hazardous_alert(alert_service)
    form_service.send_form(alert.id, "form-3")

    result = form_service.submit_response(alert.id, {"item_count": 1, "weight_kg": 2.5, "notes": None})

    stored = alert_service.get_alert(alert.id).form_response
    assert stored == {"item_count": 1, "weight_kg": 2.5, "notes": None}
    assert stored["item_count"] is not True
    assert result.entity.form_response == stored


def test_form_mutations_advance_updated_at(alert_service, form_service):
    alert = _hazardous_alert(alert_service)

    sent = form_service.send_form(alert.id, "form-2").entity
    assert sent.updated_at > alert.updated_at
    assert sent.created_at == alert.created_at

    answered = form_service.submit_response(alert.id, {"waste_type": "Medical"}).entity
    assert answered.updated_at > sent.updated_at
    assert alert_service.get_alert(alert.id).updated_at == answered.updated_at
