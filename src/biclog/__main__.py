"""Allow ``python -m biclog``."""

from biclog.cli import main

main()
