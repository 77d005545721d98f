"""Module entrypoint for ``python -m droute``."""

from droute.cli import main

if __name__ == "__main__":
    main()
