"""Entry point for `python -m snippetbox`."""

from snippetbox.server import run

if __name__ == "__main__":
    run()
