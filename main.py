"""Main entry point for running the auth server."""

from src.api.server import Server


def main() -> None:
    """Start the auth server on the configured port."""
    Server().start()


if __name__ == "__main__":
    main()
