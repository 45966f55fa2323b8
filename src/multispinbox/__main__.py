"""Command-line entry point: launches the demo window."""
import sys

from multispinbox.app.main import main

if __name__ == "__main__":
    sys.exit(main())
