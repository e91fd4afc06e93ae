"""
vault_client.operations

Operation shapes (typed inputs with validation, typed outputs).

Responsibilities:
- One module per Vault operation; the client attaches them to the request pipeline.
"""

# Package marker.
