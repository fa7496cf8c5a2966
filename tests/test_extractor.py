"""Tests for pwstate.extractor."""

from pwstate.extractor import extract_secrets
from pwstate.models import PasswordRecord, Secret


def _records(*items):
    return [PasswordRecord.model_validate(item) for item in items]


def test_skips_record_with_empty_key(logger, log_buffer):
    records = _records({"Title": "db", "Password": "p@ss"}, {"PasswordID": 2, "Title": "", "Password": "x"})
    secrets = extract_secrets(records, "Title", "Password", logger)
    assert secrets == [Secret(key="db", value="p@ss")]
    assert "Key is empty" in log_buffer.getvalue()
    assert "password_id=2" in log_buffer.getvalue()


def test_skips_record_with_empty_value(logger, log_buffer):
    records = _records({"Title": "db", "Password": ""}, {"Title": "api", "Password": "tok"})
    secrets = extract_secrets(records, "Title", "Password", logger)
    assert secrets == [Secret(key="api", value="tok")]
    assert "Value is empty" in log_buffer.getvalue()


def test_preserves_input_order(logger):
    records = _records(
        {"Title": "c", "Password": "3"},
        {"Title": "a", "Password": "1"},
        {"Title": "b", "Password": "2"},
    )
    secrets = extract_secrets(records, "Title", "Password", logger)
    assert [s.key for s in secrets] == ["c", "a", "b"]


def test_arbitrary_fields_by_name(logger):
    records = _records({"UserName": "svc_db", "GenericField3": "conn-string"})
    secrets = extract_secrets(records, "UserName", "GenericField3", logger)
    assert secrets == [Secret(key="svc_db", value="conn-string")]


def test_numeric_field_as_key(logger):
    records = _records({"PasswordID": 17, "Password": "pw"})
    secrets = extract_secrets(records, "PasswordID", "Password", logger)
    assert secrets == [Secret(key="17", value="pw")]


def test_unknown_field_skips_every_record(logger):
    records = _records({"Title": "db", "Password": "p"}, {"Title": "api", "Password": "q"})
    assert extract_secrets(records, "Title", "Passwd", logger) == []
    assert extract_secrets(records, "Name", "Password", logger) == []


def test_empty_input(logger):
    assert extract_secrets([], "Title", "Password", logger) == []


def test_blank_key_is_skipped(logger, log_buffer):
    records = _records({"PasswordID": 3, "Title": "   ", "Password": "x"}, {"Title": "db", "Password": "p"})
    secrets = extract_secrets(records, "Title", "Password", logger)
    assert secrets == [Secret(key="db", value="p")]
    assert "Key is empty" in log_buffer.getvalue()
    assert "password_id=3" in log_buffer.getvalue()


def test_blank_value_is_skipped(logger, log_buffer):
    records = _records({"PasswordID": 4, "Title": "db", "Password": " \t "})
    assert extract_secrets(records, "Title", "Password", logger) == []
    assert "Value is empty" in log_buffer.getvalue()
    assert "password_id=4" in log_buffer.getvalue()


def test_key_and_value_are_stripped(logger):
    records = _records({"Title": "  db ", "Password": " p@ss\n"})
    assert extract_secrets(records, "Title", "Password", logger) == [Secret(key="db", value="p@ss")]
