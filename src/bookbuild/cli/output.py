"""Output utilities for CLI commands with clear intent.

user_output is for messages meant for a person (stderr), machine_output is for
values other programs consume (stdout). Keeping them apart lets `bookbuild which`
be used in command substitution while progress lines still reach the terminal.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print a machine-readable value to stdout."""
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Print an error message with the red "Error:" prefix."""
    user_output(click.style("Error: ", fg="red") + message)


def format_duration(seconds: float) -> str:
    """Format a duration for humans.

    Example:
        >>> format_duration(0.42)
        '0.4s'
        >>> format_duration(83)
        '1m 23s'
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m {secs}s"


def format_build_summary(
    *,
    success: bool,
    duration: float,
    tool_description: str | None,
    failed_step: str | None,
    exit_code: int,
) -> Panel:
    """Format the final summary box shown after a build.

    Args:
        success: Whether every step succeeded
        duration: Total run time in seconds
        tool_description: How the documentation tool was resolved, if it was
        failed_step: Name of the step that failed, if any
        exit_code: Exit code the run will finish with

    Returns:
        Rich Panel with formatted summary
    """
    lines: list[Text] = []

    if success:
        lines.append(Text("✅ Status: Success", style="green"))
    else:
        lines.append(Text("❌ Status: Failed", style="red"))

    lines.append(Text(f"⏱  Duration: {format_duration(duration)}"))

    if tool_description is not None:
        lines.append(Text(f"🔧 Tool: {tool_description}"))

    if not success:
        lines.append(Text(""))
        lines.append(Text(f"Failed step: {failed_step}", style="red bold"))
        lines.append(Text(f"Exit code: {exit_code}", style="red"))

    content = Text("\n").join(lines)
    title = "Book Built" if success else "Book Build Failed"
    return Panel(content, title=title, border_style="green" if success else "red", padding=(1, 2))


def print_panel(panel: Panel) -> None:
    """Render a rich panel to stderr."""
    Console(stderr=True).print(panel)
