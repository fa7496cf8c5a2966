"""Domain models for pwstate."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Config(BaseModel):
    """Run configuration. Built once by the CLI and never mutated."""

    model_config = ConfigDict(frozen=True)

    # Connection
    api_endpoint: str = ""
    api_key: str = ""
    password_list_id: int = 0
    connection_retries: int = 1
    connection_timeout: int = 5
    skip_tls_verify: bool = False

    # Extraction
    key_field: str = "Title"
    value_field: str = "Password"

    # Output
    encode_secrets: bool = False
    output_path: Path = Path("secrets.yml")
    output_format: str = "YAML"
    section_name: str = "secrets"

    debug: bool = False
    no_secrets_fail: bool = False


class PasswordRecord(BaseModel):
    """A single password entry as returned by ``GET /passwords/{id}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    password_id: int = Field(0, alias="PasswordID")
    title: str = Field("", alias="Title")
    user_name: str = Field("", alias="UserName")
    description: str = Field("", alias="Description")
    generic_field_1: str = Field("", alias="GenericField1")
    generic_field_2: str = Field("", alias="GenericField2")
    generic_field_3: str = Field("", alias="GenericField3")
    generic_field_4: str = Field("", alias="GenericField4")
    generic_field_5: str = Field("", alias="GenericField5")
    generic_field_6: str = Field("", alias="GenericField6")
    generic_field_7: str = Field("", alias="GenericField7")
    generic_field_8: str = Field("", alias="GenericField8")
    generic_field_9: str = Field("", alias="GenericField9")
    generic_field_10: str = Field("", alias="GenericField10")
    account_type_id: int = Field(0, alias="AccountTypeID")
    notes: str = Field("", alias="Notes")
    url: str = Field("", alias="URL")
    password: str = Field("", alias="Password")
    expiry_date: str = Field("", alias="ExpiryDate")
    allow_export: bool = Field(False, alias="AllowExport")
    account_type: str = Field("", alias="AccountType")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info):
        # Passwordstate sends null for unset fields.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Secret(BaseModel):
    """A key/value pair destined for the output file."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


# ---------------------------------------------------------------------------
# Field lookup by API name
# ---------------------------------------------------------------------------

FieldAccessor = Callable[[PasswordRecord], str]


def _as_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _accessor(attr: str) -> FieldAccessor:
    return lambda record: _as_text(getattr(record, attr))


RECORD_FIELDS: dict[str, FieldAccessor] = {
    info.alias: _accessor(name) for name, info in PasswordRecord.model_fields.items()
}


def field_accessor(name: str) -> Optional[FieldAccessor]:
    """Return the accessor for the API field *name*, or ``None`` if unknown."""
    return RECORD_FIELDS.get(name)
