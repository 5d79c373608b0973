from inline_mathjax.cli.main import app

app(prog_name="mdbook-inline-mathjax")
