"""Tests for reservation payload validation"""

from datetime import date, timedelta

import pytest

from brewbliss.errors import FieldError, ReservationValidationError
from brewbliss.services.validation import parse_reservation, validate_reservation

TODAY = date(2030, 6, 1)


def _fields(errors):
    return {error.field for error in errors}


def test_valid_payload_has_no_errors(reservation_data):
    assert validate_reservation(reservation_data, today=TODAY) == []


def test_defaults_status_and_occasion(reservation_data):
    payload = parse_reservation(reservation_data, today=TODAY)

    assert payload.status == "pending"
    assert payload.occasion == ""
    assert payload.notes is None


def test_blank_status_means_pending(reservation_data):
    payload = parse_reservation({**reservation_data, "status": ""}, today=TODAY)
    assert payload.status == "pending"


def test_missing_required_fields():
    errors = validate_reservation({}, today=TODAY)

    assert _fields(errors) == {"name", "email", "phone", "guests", "date", "time"}
    assert FieldError("name", "Name is required") in errors
    assert FieldError("guests", "Number of guests is required") in errors


@pytest.mark.parametrize("guests", [1, 20])
def test_guest_boundaries_accepted(reservation_data, guests):
    assert validate_reservation({**reservation_data, "guests": guests}, today=TODAY) == []


@pytest.mark.parametrize(
    "guests, message",
    [
        (0, "At least 1 guest is required"),
        (21, "Maximum 20 guests allowed"),
    ],
)
def test_guest_boundaries_rejected(reservation_data, guests, message):
    errors = validate_reservation({**reservation_data, "guests": guests}, today=TODAY)
    assert errors == [FieldError("guests", message)]


def test_numeric_string_guests_are_coerced(reservation_data):
    payload = parse_reservation({**reservation_data, "guests": "6"}, today=TODAY)
    assert payload.guests == 6


def test_past_date_rejected(reservation_data):
    yesterday = (TODAY - timedelta(days=1)).isoformat()
    errors = validate_reservation({**reservation_data, "date": yesterday}, today=TODAY)

    assert errors == [FieldError("date", "Reservation date cannot be in the past")]


def test_today_is_bookable(reservation_data):
    assert validate_reservation({**reservation_data, "date": TODAY.isoformat()}, today=TODAY) == []


def test_time_is_zero_padded(reservation_data):
    payload = parse_reservation({**reservation_data, "time": "9:05"}, today=TODAY)
    assert payload.time == "09:05"


@pytest.mark.parametrize("time", ["24:00", "19:60", "7pm", "19-00", ""])
def test_bad_times_rejected(reservation_data, time):
    errors = validate_reservation({**reservation_data, "time": time}, today=TODAY)
    assert errors == [FieldError("time", "Please enter a valid time in HH:MM format")]


def test_email_is_trimmed_and_lowercased(reservation_data):
    payload = parse_reservation({**reservation_data, "email": "  John.Doe@Example.COM "}, today=TODAY)
    assert payload.email == "john.doe@example.com"


@pytest.mark.parametrize("email", ["john", "john@example", "john@@example.com", "john@example.comxx"])
def test_bad_emails_rejected(reservation_data, email):
    errors = validate_reservation({**reservation_data, "email": email}, today=TODAY)
    assert _fields(errors) == {"email"}


@pytest.mark.parametrize("phone", ["+15551234567", "0", "1234567890123456"])
def test_phones_accepted(reservation_data, phone):
    assert validate_reservation({**reservation_data, "phone": phone}, today=TODAY) == []


@pytest.mark.parametrize("phone", ["12345678901234567", "555-1234", "++1555", "phone"])
def test_bad_phones_rejected(reservation_data, phone):
    errors = validate_reservation({**reservation_data, "phone": phone}, today=TODAY)
    assert errors == [FieldError("phone", "Please enter a valid phone number")]


def test_name_length_limits(reservation_data):
    short = validate_reservation({**reservation_data, "name": " J "}, today=TODAY)
    long = validate_reservation({**reservation_data, "name": "J" * 101}, today=TODAY)

    assert short == [FieldError("name", "Name must be at least 2 characters long")]
    assert long == [FieldError("name", "Name cannot exceed 100 characters")]


def test_notes_limit(reservation_data):
    assert validate_reservation({**reservation_data, "notes": "x" * 500}, today=TODAY) == []

    errors = validate_reservation({**reservation_data, "notes": "x" * 501}, today=TODAY)
    assert errors == [FieldError("notes", "Notes cannot exceed 500 characters")]


def test_enumerated_fields(reservation_data):
    errors = validate_reservation(
        {**reservation_data, "occasion": "wedding", "status": "seated"},
        today=TODAY,
    )
    assert _fields(errors) == {"occasion", "status"}


def test_unknown_fields_are_ignored(reservation_data):
    payload = parse_reservation({**reservation_data, "table": 12}, today=TODAY)
    assert not hasattr(payload, "table")


def test_non_object_payload_rejected():
    with pytest.raises(ReservationValidationError) as exc_info:
        parse_reservation(["not", "an", "object"], today=TODAY)

    assert exc_info.value.errors[0].field == "body"


def test_partial_payload_only_checks_supplied_fields():
    payload = parse_reservation({"notes": "Window seat"}, partial=True, today=TODAY)

    assert payload.model_fields_set == {"notes"}
    assert payload.moves_slot is False


def test_partial_payload_with_time_moves_slot():
    payload = parse_reservation({"time": "20:00"}, partial=True, today=TODAY)
    assert payload.moves_slot is True


def test_partial_payload_rejects_null_required_field():
    errors = validate_reservation({"name": None}, partial=True, today=TODAY)
    assert errors == [FieldError("name", "Name is required")]


def test_partial_payload_allows_clearing_notes():
    payload = parse_reservation({"notes": None}, partial=True, today=TODAY)
    assert payload.model_dump(exclude_unset=True) == {"notes": None}


def test_null_status_means_pending_on_create(reservation_data):
    payload = parse_reservation({**reservation_data, "status": None}, today=TODAY)
    assert payload.status == "pending"


def test_null_status_rejected_on_update():
    errors = validate_reservation({"status": None}, partial=True, today=TODAY)
    assert _fields(errors) == {"status"}
