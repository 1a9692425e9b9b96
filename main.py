#!/usr/bin/env python3
"""TimeProgress — entry point.

Run with:
    python main.py
    python -m timeprogress
"""

from timeprogress.__main__ import main


if __name__ == "__main__":
    main()
