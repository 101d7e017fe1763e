"""
Package entry point.

Allows running the application via:

    python -m schoolorg

This simply forwards execution to schoolorg.cli.main().
"""

from schoolorg.cli import main

if __name__ == "__main__":
    main()
