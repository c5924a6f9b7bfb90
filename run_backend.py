#!/usr/bin/env python3
"""Start the VastuPlan API server."""

import uvicorn

from vastuplan.config import get_settings
from vastuplan.log import setup_logging

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "vastuplan.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["vastuplan"],
        log_level=settings.log_level.lower(),
    )
