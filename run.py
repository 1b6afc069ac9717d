#!/usr/bin/env python3
"""
Application startup script; host, port and log level come from settings.
"""

import uvicorn

from h2ok.config import get_settings


def main():
    settings = get_settings()

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Backend: {settings.backend_url}")
    print(f"   Host: {settings.host}")
    print(f"   Port: {settings.port}")

    uvicorn.run(
        "h2ok.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
