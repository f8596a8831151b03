#!/usr/bin/env python
"""Script to run the Task API server."""
import uvicorn

from task_api.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "task_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
