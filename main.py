#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py demo [--games G] [--size N] [--mines M] [--delay D]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield.cli import main


if __name__ == "__main__":
    main()
