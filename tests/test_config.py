"""Tests for pwstate.config."""

import pytest

from pwstate.config import validate
from pwstate.errors import ConfigValidationError


def test_valid_config_passes(make_config, logger):
    validate(make_config(), logger)


@pytest.mark.parametrize(
    "endpoint",
    ["", "not-a-url", "ps.example.com/api", "ftp://ps.example.com", "https://", "/api/passwords"],
)
def test_invalid_endpoint_rejected(make_config, logger, endpoint):
    with pytest.raises(ConfigValidationError, match="not a valid URL"):
        validate(make_config(api_endpoint=endpoint), logger)


def test_endpoint_with_path_accepted(make_config, logger):
    validate(make_config(api_endpoint="http://ps.example.com:8080/api/"), logger)


def test_zero_list_id_rejected(make_config, logger):
    with pytest.raises(ConfigValidationError, match="list ID"):
        validate(make_config(password_list_id=0), logger)


def test_empty_api_key_rejected(make_config, logger):
    with pytest.raises(ConfigValidationError, match="API key"):
        validate(make_config(api_key=""), logger)


@pytest.mark.parametrize("fmt", ["JSON", "yaml", ""])
def test_unsupported_format_rejected(make_config, logger, fmt):
    with pytest.raises(ConfigValidationError, match="not supported"):
        validate(make_config(output_format=fmt), logger)


def test_first_failure_wins(make_config, logger):
    config = make_config(api_endpoint="bad", password_list_id=0, api_key="", output_format="XML")
    with pytest.raises(ConfigValidationError, match="not a valid URL"):
        validate(config, logger)


def test_unknown_field_names_only_warn(make_config, logger, log_buffer):
    validate(make_config(key_field="Nope", value_field="Password"), logger)
    out = log_buffer.getvalue()
    assert "WARNING" in out
    assert "key_field=Nope" in out
