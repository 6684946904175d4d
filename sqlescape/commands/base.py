"""
Base class for Rich-enhanced Click commands.

This module defines:
- `rich_help`: Builds Rich markup help text for a command.
- `RichCommand`: A custom Click command with Rich-enhanced help rendering.
"""

import click
from rich.console import Console
from rich.panel import Panel
from sqlescape.lib.log import LOG

console: Console = Console()


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{command}[/bold cyan]: {description}\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


class RichCommand(click.Command):
    """
    A Click Command that uses Rich for rendering help messages.

    Methods:
        format_help(ctx, formatter): Renders the command-level help message with Rich formatting.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command using Rich.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        help_text = self.help or "No help text available."
        panel_width = max(len(line) for line in help_text.splitlines()) + 10
        panel_width = min(panel_width, 100)  # Cap the width to avoid excessive size
        LOG(f"Rendering help for {ctx.info_name}")
        console.print(
            Panel(help_text, expand=False, width=panel_width, border_style="cyan")
        )
