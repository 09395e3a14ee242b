"""
Entry point for running ddgsearch as a module: python -m ddgsearch
"""

from ddgsearch.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
