"""
vault_client.auth

Request authentication package.

Responsibilities:
- Resolve the credentials used to sign Vault requests.
- Apply AWS Signature Version 4 to outgoing requests.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Signing and credential chains are botocore's; this package only wires them up.
