"""
SafePass Module Entry Point
============================

Allows running the SafePass CLI via: python -m safepass
"""

from safepass.cli import main

if __name__ == "__main__":
    main()
