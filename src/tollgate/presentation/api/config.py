"""API configuration adapter.

Bridges the centralized tollgate_config settings with the API layer. Each
application instance carries its own settings on ``app.state`` so tests
can build apps with overrides side by side.
"""

from fastapi import Request

from tollgate_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
