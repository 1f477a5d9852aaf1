"""Module entrypoint for running texthelpers as ``python -m texthelpers``."""

from __future__ import annotations

from texthelpers.cli import main


if __name__ == "__main__":
    main()
