"""Unit tests for domain/logs/coach_text.py (DAILY_LOG, LOG_JSON and FLAG blocks)."""

import pytest

from domain.logs.coach_text import extract_log_json, parse_daily_log_block, split_flag

CHAT_REPLY = """Great work today! Keep the protein high tomorrow.

DAILY_LOG:
user_id: usr_1
date: 2025-04-02
weight: 182.6 lbs
calories: 2150 kcal
steps: 9500
mood: upbeat
feeling:
main_struggle: late snacking
coach_focus: Prep lunch tonight
flag: false
favourite_color: blue

That's it for today."""


@pytest.mark.unit
class TestParseDailyLogBlock:
    def test_full_block(self):
        log = parse_daily_log_block(CHAT_REPLY)
        assert log == {
            "user_id": "usr_1",
            "date": "2025-04-02",
            "weight": 182.6,
            "calories": 2150,
            "steps": 9500,
            "mood": "upbeat",
            "feeling": None,
            "main_struggle": "late snacking",
            "coach_focus": "Prep lunch tonight",
            "flag": False,
        }

    def test_no_block(self):
        assert parse_daily_log_block("Just a normal reply.") is None
        assert parse_daily_log_block("") is None

    def test_block_stops_at_line_without_colon(self):
        reply = "DAILY_LOG:\nweight: 180\nThanks for checking in\nmood: sad"
        log = parse_daily_log_block(reply)
        assert log["weight"] == 180.0
        assert log["mood"] is None

    def test_unparseable_numbers_and_flag(self):
        log = parse_daily_log_block("DAILY_LOG:\nweight: heavy\ncalories: lots\nflag: maybe")
        assert log["weight"] is None
        assert log["calories"] is None
        assert log["flag"] is None

    def test_flag_true_case_insensitive(self):
        assert parse_daily_log_block("DAILY_LOG:\nflag: TRUE")["flag"] is True

    def test_keys_case_insensitive(self):
        assert parse_daily_log_block("DAILY_LOG:\nDate: 2025-01-01")["date"] == "2025-01-01"


@pytest.mark.unit
class TestExtractLogJson:
    def test_block_decoded(self):
        text = 'Looks like ~650 kcal.\n[[LOG_JSON {"calories": 650, "protein": 40}]]\nEnjoy!'
        assert extract_log_json(text) == {"calories": 650, "protein": 40}

    def test_missing_block(self):
        assert extract_log_json("No block here") is None

    def test_unterminated_block(self):
        assert extract_log_json('[[LOG_JSON {"calories": 650}') is None

    def test_invalid_json(self):
        assert extract_log_json("[[LOG_JSON {calories: 650}]]") is None

    def test_empty_object(self):
        assert extract_log_json("[[LOG_JSON {}]]") == {}


@pytest.mark.unit
class TestSplitFlag:
    def test_flag_line_removed(self):
        summary, flag = split_flag("Solid day overall.\nFLAG: weight up 3 lbs in two days\n")
        assert summary == "Solid day overall."
        assert flag == "weight up 3 lbs in two days"

    def test_no_flag(self):
        assert split_flag("  All good.  ") == ("All good.", "")

    def test_none(self):
        assert split_flag(None) == ("", "")
