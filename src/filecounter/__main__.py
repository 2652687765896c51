"""Allow ``python -m filecounter``."""

from filecounter.ui.cli import main


if __name__ == "__main__":
    main()
