"""Allow running ChainSync as ``python -m chainsync``."""

from chainsync.cli import app

if __name__ == "__main__":
    app()
