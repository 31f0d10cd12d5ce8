"""
Entry point for running the carthage-cache CLI as a module.

Usage: python -m carthagecache.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
