"""Main entry point for running tumblget as a module.

Usage:
    python -m tumblget parse "<cookie header>"
    python -m tumblget --help
"""

from tumblget.cli import main

if __name__ == '__main__':
    main()
