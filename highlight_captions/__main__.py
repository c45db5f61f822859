"""Package entry point for ``python -m highlight_captions``."""

from highlight_captions.cli import main

if __name__ == "__main__":
    main()
