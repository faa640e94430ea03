"""Allow running as ``python -m issuestatus``."""

from issuestatus.cli import main

if __name__ == "__main__":
    main()
