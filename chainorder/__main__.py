"""
chainorder module entry point.

Allows running as: python -m chainorder solve 2 5 4 1 10
"""

from .cli import main

if __name__ == "__main__":
    main()
