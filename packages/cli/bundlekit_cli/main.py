"""bundlekit CLI - Main entry point."""

import typer

from . import plan_cmd

app = typer.Typer(
    name="bundlekit",
    help="bundlekit CLI - Compile package exports into build plans",
    no_args_is_help=True,
    add_completion=False,
)

# Register all commands
app.command()(plan_cmd.plan)
app.command()(plan_cmd.exports)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
