"""
Gradient Clock - Main Entry Point

A desktop window with an animated dark gradient background and a live
clock in the middle.

Usage:
    python main.py
"""
import sys
from pathlib import Path

# Ensure we're in the right directory for imports
sys.path.insert(0, str(Path(__file__).parent))

from gui.app import run_app


if __name__ == "__main__":
    run_app()
