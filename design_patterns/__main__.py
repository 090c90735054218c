"""Allow running the showcase with ``python -m design_patterns``."""
import sys

from design_patterns.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
