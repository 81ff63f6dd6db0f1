"""
Main entry point for the nexus_api package.

Allows running the client as: python -m nexus_api
"""

from nexus_api.cli import main

if __name__ == "__main__":
    main()
