"""Pydantic model for the credentials posted to the time recorder endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from ..constants import LOGIN_COMPANY_FIELD, LOGIN_PASSWORD_FIELD, LOGIN_USER_FIELD


class Credentials(BaseModel):
    """Yorozuya login credentials, supplied fresh on every request.

    Never persisted. The password is a SecretStr so it stays masked in
    reprs and log output.
    """

    model_config = ConfigDict(populate_by_name=True)

    company_code: str = Field(alias="companycd")
    username: str
    password: SecretStr

    def to_login_form(self) -> dict[str, str]:
        """Return the credential fields of the portal login form."""
        return {
            LOGIN_COMPANY_FIELD: self.company_code,
            LOGIN_USER_FIELD: self.username,
            LOGIN_PASSWORD_FIELD: self.password.get_secret_value(),
        }
