from find_project.cli import app

app(prog_name="find-project")
