"""Allow ``python -m projtrack``."""

from projtrack.cli import main

main()
