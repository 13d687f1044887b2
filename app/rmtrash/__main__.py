"""Allow running rmtrash as ``python -m rmtrash``."""

from rmtrash.cli.main import run

if __name__ == "__main__":
    run()
