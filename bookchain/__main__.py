from bookchain.cli import app

app()
