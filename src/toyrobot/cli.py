"""Root CLI command for toyrobot.

``toyrobot [COMMAND_FILE]`` runs a session: from the file when it exists,
otherwise interactively from stdin until end of input.
"""

from __future__ import annotations

from typing import Any

import click

from toyrobot import __version__
from toyrobot._context import AppContext
from toyrobot.config.settings import RobotSettings

EXAMPLES = """\
  toyrobot commands.txt
  toyrobot --width 10 --height 10 commands.txt
  echo -e "PLACE 0,0,NORTH\\nMOVE\\nREPORT" | toyrobot
  toyrobot --skip-unknown < session.txt
  toyrobot -v --log-json commands.txt"""


class ToyCommand(click.Command):
    """Click Command that accepts an ``examples`` block shown by ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


@click.command(cls=ToyCommand, examples=EXAMPLES)
@click.version_option(version=__version__, prog_name="toyrobot")
@click.argument("command_file", required=False)
@click.option("--width", type=click.IntRange(min=1), default=None, help="Grid width.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Grid height.")
@click.option(
    "--stop-on-unknown/--skip-unknown",
    default=None,
    help="Whether an unknown command ends an interactive session.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    command_file: str | None,
    width: int | None,
    height: int | None,
    stop_on_unknown: bool | None,
    config_path: str | None,
    verbose: bool,
    log_json: bool,
) -> None:
    """Toy robot simulator.

    Reads commands from COMMAND_FILE if it exists, otherwise from stdin.
    Send HELP for the list of commands.
    """
    settings = RobotSettings.from_cli(
        config_path=config_path,
        width=width,
        height=height,
        stop_on_unknown=stop_on_unknown,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    session = app.create_session()
    app.emit(session.run(command_file))