# -*- coding: utf-8 -*-
"""
Entry point to run the service via python -m release_notes.
"""
import uvicorn

from release_notes.config import settings


def main():
    """Start the Uvicorn server."""
    uvicorn.run(
        "release_notes.api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
