"""
vault_client.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Per-request context propagation for consistent log enrichment.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The client only emits events; configuring output is left to the embedding application.
