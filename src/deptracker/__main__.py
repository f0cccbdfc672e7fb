"""Allow `python -m deptracker`."""

from deptracker.presentation.cli import main

main()
