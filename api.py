"""Estimate billing service entry point

Serves bills, drafts, the product catalog, customers and reports under
``ApplicationConfig.API_PREFIX``. Run directly for a reloading dev server:

    python api.py
"""

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
