#!/usr/bin/env python3
"""
Schema Rename Preview - Main Entry

Usage:
    python main.py components                       # List component kinds
    python main.py sample -C original_stem -C sequence
    python main.py preview ./dir -C folder_name -C original_stem
    python main.py preview ./dir --schema schema.json --log-dir ./logs
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
