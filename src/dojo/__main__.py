"""
Entry point for running the dojo as a module.

Usage:
    python -m src.dojo init
    python -m src.dojo start
    python -m src.dojo learn cli-basics
"""
from .cli import run

if __name__ == "__main__":
    run()
