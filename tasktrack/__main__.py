from __future__ import annotations

from tasktrack.cli import main

if __name__ == "__main__":
    main()
