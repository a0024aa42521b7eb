"""Command line interface for WaveFit."""

from wavefit.cli.app import app

__all__ = ["app"]
