"""Allow ``python -m sparc_init``."""

from sparc_init.cli import app

app()
