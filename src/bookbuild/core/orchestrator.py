"""Build orchestration: pre-build, tool resolution, book build.

The run is strictly sequential. Each step reports an explicit status and the
first failure ends the run with that step's exit code. The working directory
is entered once around all steps and always restored.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from bookbuild.cli.output import error_output, user_output
from bookbuild.core.context import BookBuildContext
from bookbuild.core.directory import change_directory
from bookbuild.core.release.abc import ReleaseFetchError
from bookbuild.core.tool import ResolvedTool, resolve_tool

logger = logging.getLogger(__name__)

# Exit code reported when the tool cannot be downloaded or unpacked
RESOLVE_FAILURE_EXIT_CODE = 1


class BuildStep(Enum):
    PREBUILD = "prebuild"
    RESOLVE_TOOL = "resolve-tool"
    BUILD = "build"


@dataclass(frozen=True)
class StepResult:
    step: BuildStep
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class BuildOutcome:
    """Result of a full run.

    exit_code is 0 on success, otherwise the exit code of failed_step.
    tool is set once resolution succeeded, even if the build itself failed.
    """

    exit_code: int
    failed_step: BuildStep | None
    tool: ResolvedTool | None

    @property
    def success(self) -> bool:
        return self.failed_step is None

    @staticmethod
    def failed(result: StepResult, tool: ResolvedTool | None = None) -> "BuildOutcome":
        return BuildOutcome(exit_code=result.exit_code, failed_step=result.step, tool=tool)


def run_prebuild(ctx: BookBuildContext, book_dir: Path) -> StepResult:
    """Run the asset pre-build helper (the custom highlight.js bundle)."""
    command = list(ctx.config.prebuild)
    logger.debug("Pre-build starting: %s", command)
    exit_code = ctx.shell.run_command(command, book_dir)
    logger.debug("Pre-build finished: exit_code=%d", exit_code)
    return StepResult(step=BuildStep.PREBUILD, exit_code=exit_code)


def run_book_build(ctx: BookBuildContext, tool: ResolvedTool, book_dir: Path) -> StepResult:
    """Invoke the resolved tool's build subcommand in book_dir."""
    user_output("Building book..")
    exit_code = ctx.shell.run_command([tool.command, "build"], book_dir)
    logger.debug("Build finished: tool=%s, exit_code=%d", tool.command, exit_code)
    return StepResult(step=BuildStep.BUILD, exit_code=exit_code)


def _run_steps(ctx: BookBuildContext, book_dir: Path) -> BuildOutcome:
    prebuild = run_prebuild(ctx, book_dir)
    if not prebuild.ok:
        return BuildOutcome.failed(prebuild)

    try:
        tool = resolve_tool(ctx.shell, ctx.fetcher, ctx.config.release, book_dir)
    except ReleaseFetchError as e:
        error_output(str(e))
        return BuildOutcome.failed(
            StepResult(step=BuildStep.RESOLVE_TOOL, exit_code=RESOLVE_FAILURE_EXIT_CODE)
        )

    build = run_book_build(ctx, tool, book_dir)
    if not build.ok:
        return BuildOutcome.failed(build, tool=tool)

    return BuildOutcome(exit_code=0, failed_step=None, tool=tool)


def run_build(ctx: BookBuildContext) -> BuildOutcome:
    """Build the book: ENTER_DIR -> PREBUILD -> RESOLVE_TOOL -> BUILD -> EXIT_DIR.

    The caller is expected to have checked that the book directory exists.

    Returns:
        BuildOutcome describing the first failing step, or success
    """
    with change_directory(ctx.book_dir) as book_dir:
        outcome = _run_steps(ctx, book_dir)

    logger.debug(
        "Run finished: exit_code=%d, failed_step=%s", outcome.exit_code, outcome.failed_step
    )
    return outcome
