"""Pre-flight validation for the Streamlit UI.

No ORM, no DB; uses the API client for backend checks.
"""
from typing import List


def validate_backend_connection(base_url: str | None = None) -> List[str]:
    """Validate that the FastAPI backend is reachable."""
    errors = []
    try:
        from eventdesk.ui.api_client import EventDeskClient
        client = EventDeskClient(base_url=base_url)
        client.health()
    except Exception as e:
        errors.append(f"Backend connection failed: {e}")
    return errors


def run_all_checks(base_url: str | None = None) -> List[str]:
    """Run all validation checks."""
    errors = []
    errors.extend(validate_backend_connection(base_url))
    return errors
