#!/usr/bin/env python3
"""FocusPad — entry point.

Run with:
    python main.py
    python -m focuspad
"""

from focuspad.__main__ import main


if __name__ == "__main__":
    main()
