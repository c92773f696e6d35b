"""
FastAPI routes and wiring.

- routes.py: POST /categorize, POST /categorize/batch, GET /providers/status, GET /health
- dependencies.py: Settings, provider registry and Categorizer singletons
- models.py: API request/response models
- middleware.py: Request-id tracing
"""

from mail_categorizer.api import dependencies, models
from mail_categorizer.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "models",
]
