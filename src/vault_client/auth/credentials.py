"""
vault_client.auth.credentials

Credential resolution for request signing.

Responsibilities:
- Build static credentials from settings when both keys are configured.
- Fall back to botocore's default provider chain (env, shared config, instance metadata).
"""

from __future__ import annotations

import botocore.session
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError, PartialCredentialsError

from vault_client.settings import Settings


def resolve_credentials(settings: Settings) -> Credentials:
    key, secret = settings.access_key_id, settings.secret_access_key
    if key and secret:
        return Credentials(key, secret, settings.session_token)
    if key or secret:
        missing = "secret_access_key" if key else "access_key_id"
        raise PartialCredentialsError(provider="settings", cred_var=missing)

    creds = botocore.session.get_session().get_credentials()
    if creds is None:
        raise NoCredentialsError()
    return creds


# --- Module Notes -----------------------------------------------------------
# Called off the event loop; the client freezes the result once per request before signing.
