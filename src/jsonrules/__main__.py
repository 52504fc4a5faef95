"""Allow ``python -m jsonrules``."""

from jsonrules.cli import app

app()
