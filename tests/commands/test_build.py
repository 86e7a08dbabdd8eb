"""Tests for the build command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from bookbuild.cli.cli import cli
from bookbuild.core.context import BookBuildContext
from tests.fakes.release import FakeReleaseFetcher
from tests.fakes.shell import FakeShell

PREBUILD = "./ci/build-highlight-js"


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "book").mkdir()
    monkeypatch.chdir(tmp_path)
    return Path.cwd()


def invoke(ctx: BookBuildContext, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["build", *args], obj=ctx)


def test_build_success(project: Path) -> None:
    shell = FakeShell(installed_tools={"mdbook": "/usr/bin/mdbook"})
    ctx = BookBuildContext.for_test(shell=shell, fetcher=FakeReleaseFetcher(), cwd=project)

    result = invoke(ctx)

    assert result.exit_code == 0, result.output
    assert "Building book.." in result.output
    assert "Book Built" in result.output
    assert shell.commands == [[PREBUILD], ["mdbook", "build"]]
    assert Path.cwd() == project


def test_build_downloads_missing_tool(project: Path) -> None:
    shell = FakeShell()
    fetcher = FakeReleaseFetcher()
    ctx = BookBuildContext.for_test(shell=shell, fetcher=fetcher, cwd=project)

    result = invoke(ctx)

    assert result.exit_code == 0, result.output
    assert "Installing mdbook.." in result.output
    assert len(fetcher.fetch_calls) == 1
    assert shell.commands[-1] == ["./mdbook", "build"]


def test_prebuild_failure_exit_code(project: Path) -> None:
    shell = FakeShell(exit_codes={PREBUILD: 2})
    ctx = BookBuildContext.for_test(shell=shell, fetcher=FakeReleaseFetcher(), cwd=project)

    result = invoke(ctx)

    assert result.exit_code == 2
    assert "Failed step: prebuild" in result.output
    assert shell.commands == [[PREBUILD]]
    assert Path.cwd() == project


def test_build_failure_exit_code(project: Path) -> None:
    shell = FakeShell(installed_tools={"mdbook": "/usr/bin/mdbook"}, exit_codes={"mdbook": 1})
    ctx = BookBuildContext.for_test(shell=shell, fetcher=FakeReleaseFetcher(), cwd=project)

    result = invoke(ctx, "--no-summary")

    assert result.exit_code == 1
    assert "Book Build Failed" not in result.output
    assert Path.cwd() == project


def test_missing_book_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    shell = FakeShell()
    ctx = BookBuildContext.for_test(shell=shell, fetcher=FakeReleaseFetcher(), cwd=tmp_path)

    result = invoke(ctx)

    assert result.exit_code == 1
    assert "Book directory not found" in result.output
    assert shell.commands == []


def test_book_dir_option(project: Path) -> None:
    docs = project / "docs"
    docs.mkdir()
    shell = FakeShell(installed_tools={"mdbook": "/usr/bin/mdbook"})
    ctx = BookBuildContext.for_test(shell=shell, fetcher=FakeReleaseFetcher(), cwd=project)

    result = invoke(ctx, "--book-dir", "docs")

    assert result.exit_code == 0, result.output
    assert [cwd for _, cwd in shell.command_calls] == [docs.resolve(), docs.resolve()]


def test_dry_run_executes_nothing(project: Path) -> None:
    shell = FakeShell()
    fetcher = FakeReleaseFetcher()
    ctx = BookBuildContext.for_test(shell=shell, fetcher=fetcher, cwd=project)

    result = invoke(ctx, "--dry-run")

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would run: ./ci/build-highlight-js" in result.output
    assert "[DRY RUN] Would download: https://github.com/rust-lang-nursery/mdBook" in result.output
    assert "[DRY RUN] Would run: ./mdbook build" in result.output
    assert shell.commands == []
    assert shell.lookup_calls == ["mdbook"]
    assert fetcher.fetch_calls == []
    assert not (project / "book" / "mdbook").exists()
