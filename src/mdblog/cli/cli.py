"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import build_cmd, list_cmd, new_cmd


app = typer.Typer(name="mdblog", invoke_without_command=True, help="Static blog builder for a directory of markdown posts")


@app.callback()
def main(ctx: typer.Context):
    """Run `build` when invoked without a command."""
    if ctx.invoked_subcommand is None:
        build_cmd()


app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="new")(new_cmd)
