"""Entry point for `python -m parametric_eq`."""
import sys

from parametric_eq.cli import main


if __name__ == "__main__":
    sys.exit(main())
