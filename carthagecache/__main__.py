"""
Entry point for running carthage-cache as a module.

Usage: python -m carthagecache [command] [options]
"""

from carthagecache.cli.parser import main

if __name__ == "__main__":
    main()
