"""Run the interactive demo with ``python -m burstfx``."""

from burstfx.helpers import run_demo

if __name__ == "__main__":
    run_demo()
