"""
Main module entry point.

This allows running the checks as: python -m consul_health.main
"""

from .cli import main

if __name__ == "__main__":
    main()
