#!/usr/bin/env python3
"""
Simple startup script for the Executive Assistant.

Usage:
    python run.py
"""

import logging
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import uvicorn

from executive_assistant.config import load_settings


def main():
    """Start the FastAPI application."""
    settings = load_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Run with uvicorn
    uvicorn.run(
        "executive_assistant.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
