"""Allow running gitsw with ``python -m gitsw``."""

from gitsw.cli import main

if __name__ == "__main__":
    main()
