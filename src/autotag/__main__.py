from autotag.cli import app

app()
