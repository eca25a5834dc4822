"""Allows `python -m notes_api` to start the server."""

from notes_api.server import main

if __name__ == "__main__":
    main()
