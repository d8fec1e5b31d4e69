"""
Main entry point for Flowdock.

This module allows Flowdock to be run as:
    python -m flowdock
"""

from .cli import main

if __name__ == "__main__":
    main()
