"""Allow ``python -m lambdaplay``."""

from lambdaplay.cli import cli

cli()
