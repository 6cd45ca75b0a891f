#!/usr/bin/env python3
"""
Startup script for the API server
"""
import subprocess
import sys

from core.config import settings


def start_server():
    """Start the FastAPI server"""
    print(f"🚀 Starting {settings.app_name} on {settings.host}:{settings.port}...")
    result = subprocess.run([
        "uvicorn",
        "main:app",
        "--host", settings.host,
        "--port", str(settings.port),
        "--log-level", settings.log_level.lower(),
    ])
    return result.returncode


if __name__ == "__main__":
    sys.exit(start_server())
