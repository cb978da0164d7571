import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from talkbox.cli.commands.demo import demo_command
from talkbox.cli.commands.paginate import paginate_command

app = typer.Typer(help="Paginated, typewriter-style dialogue boxes.")

app.command(name="demo")(demo_command)
app.command(name="paginate")(paginate_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
