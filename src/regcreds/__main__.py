"""
regcreds - Plaintext registry credential store.

Run with ``python -m regcreds``.
"""

import sys

from regcreds.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
