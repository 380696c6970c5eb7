from notes_analyse.cli import app

app(prog_name="an")
