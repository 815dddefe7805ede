"""Allow `python -m steamstats`."""

from steamstats.cli import main

if __name__ == "__main__":
    main()
