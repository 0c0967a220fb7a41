"""
CLI runner module.

Provides commands:
- ocr: Extract from receipt lines
- voice: Parse a voice transcript
- scan / listen: Recognize through the configured provider, then extract
- evaluate: Accuracy report over labelled samples
- init-config: Write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
