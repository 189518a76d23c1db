#!/usr/bin/env python3
"""
Run script for the message service
"""
import uvicorn

from message_service.config.settings import settings
from message_service.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
