# Allows `python -m fileenum`.

from fileenum.cli import app

app()
