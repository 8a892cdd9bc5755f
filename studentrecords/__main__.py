"""
Package entry point.

Allows running the application via:

    python -m studentrecords

This simply forwards execution to studentrecords.cli.main().
"""

from studentrecords.cli import main

if __name__ == "__main__":
    main()
