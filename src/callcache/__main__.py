"""
CLI entry point for running callcache as a module.

Usage: python -m callcache [OPTIONS] COMMAND [ARGS]...
"""

from callcache.cli.main import cli

if __name__ == "__main__":
    cli()
