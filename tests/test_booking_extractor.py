"""
Tests for pulling booking fields out of free text.
"""

from __future__ import annotations

from datetime import date

from app.application.utils.booking_extractor import extract_booking_info

REFERENCE = date(2026, 3, 10)


def test_full_sentence_extracts_every_field():
    text = "My name is John Smith, john.smith@example.com, book for tomorrow at 3pm for 2 hours for a meeting"
    draft = extract_booking_info(text, REFERENCE)

    assert draft is not None
    assert draft.name == "John Smith"
    assert draft.email == "john.smith@example.com"
    assert draft.date == "2026-03-11"
    assert draft.date_phrase == "tomorrow"
    assert draft.time == "15:00"
    assert draft.duration == "2 hours"
    assert "meeting" in draft.purpose


def test_nothing_matched_returns_none():
    assert extract_booking_info("hello there", REFERENCE) is None
    assert extract_booking_info("", REFERENCE) is None


def test_partial_match_keeps_other_fields_unset():
    draft = extract_booking_info("Hi, I'm Jane Doe", REFERENCE)

    assert draft is not None
    assert draft.name == "Jane Doe"
    assert draft.email is None
    assert draft.date is None
    assert draft.time is None
    assert draft.duration is None
    assert draft.purpose is None


def test_name_triggers():
    assert extract_booking_info("I am Alice", REFERENCE).name == "Alice"
    assert extract_booking_info("my name's Bob Stone and more", REFERENCE).name == "Bob Stone"
    assert extract_booking_info("the name is Carol.", REFERENCE).name == "Carol"


def test_email_is_stored_literally():
    draft = extract_booking_info("reach me at Mixed.Case+tag@Example.CO.uk please", REFERENCE)
    assert draft.email == "Mixed.Case+tag@Example.CO.uk"


def test_today_resolves_to_reference_date():
    assert extract_booking_info("a seat for today", REFERENCE).date == "2026-03-10"


def test_weekday_and_numeric_dates_collapse_to_reference_date():
    friday = extract_booking_info("can we do it on Friday", REFERENCE)
    assert friday.date == "2026-03-10"
    assert friday.date_phrase == "Friday"

    numeric = extract_booking_info("I'd like it on 12th dec", REFERENCE)
    assert numeric.date == "2026-03-10"
    assert numeric.date_phrase == "12th dec"


def test_time_conversion():
    assert extract_booking_info("at 12am", REFERENCE).time == "00:00"
    assert extract_booking_info("at 12pm", REFERENCE).time == "12:00"
    assert extract_booking_info("at 7:15 pm", REFERENCE).time == "19:15"
    assert extract_booking_info("@ 9:30", REFERENCE).time == "09:30"
    assert extract_booking_info("at 14", REFERENCE).time == "14:00"


def test_duration_units_are_normalized():
    assert extract_booking_info("for 3 hrs", REFERENCE).duration == "3 hours"
    assert extract_booking_info("for 1 Hour", REFERENCE).duration == "1 hours"
    assert extract_booking_info("for 45 mins", REFERENCE).duration == "45 minutes"
    assert extract_booking_info("for 30 minutes", REFERENCE).duration == "30 minutes"


def test_purpose_triggers():
    assert extract_booking_info("purpose: team meeting", REFERENCE).purpose == "team meeting"
    assert extract_booking_info("reason: job interview", REFERENCE).purpose == "job interview"
    assert extract_booking_info("it is for quiet work", REFERENCE).purpose == "quiet work"


def test_first_occurrence_wins():
    draft = extract_booking_info("I'm Dana at 9am. Actually at 11am", REFERENCE)
    assert draft.time == "09:00"
