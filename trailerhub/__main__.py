"""Entry point for ``python -m trailerhub``."""

from trailerhub.etl.pipeline.cli import main

main()
