"""
Entry point for running vsfinder CLI as a module.

Usage: python -m vsfinder [command] [options]
"""

from vsfinder.cli.parser import main

if __name__ == "__main__":
    main()
