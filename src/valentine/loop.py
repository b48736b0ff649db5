import typer

from valentine.cli.commands.run import run_command

app = typer.Typer(add_completion=False)

app.command(name="run")(run_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
