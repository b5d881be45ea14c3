"""Module entrypoint for running Text Statistics as ``python -m textstatistics``."""

from __future__ import annotations

from textstatistics.cli import main


if __name__ == "__main__":
    main()
