"""htmlbuilder CLI

Usage:
    htmlbuilder render page.hb               # print compiled HTML
    htmlbuilder render page.hb -o out.html   # write it to a file
    htmlbuilder render page.hb --page        # wrap in a full document
    htmlbuilder tree page.hb                 # show the node trees
    htmlbuilder --version
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.tree import Tree

from htmlbuilder._version import __version__
from htmlbuilder.ast.spec import NodeTree
from htmlbuilder.compiler import Compiler
from htmlbuilder.config import BuilderConfig, find_config_file
from htmlbuilder.dom import Element, render_page
from htmlbuilder.exceptions import HtmlBuilderError

console = Console()

typer_app = typer.Typer(no_args_is_help=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the htmlbuilder package.

    Log levels:
    - Normal: warnings (template diagnostics) and errors
    - Verbose (-v): INFO
    - Debug (HTMLBUILDER_DEBUG=1): DEBUG, with source paths
    """
    debug = bool(os.environ.get("HTMLBUILDER_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("htmlbuilder")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def load_config(config_path: Optional[Path]) -> BuilderConfig:
    """Explicit --config, else htmlbuilder.yaml in cwd or parents, else defaults."""
    path = config_path or find_config_file()
    if path is None:
        return BuilderConfig()
    return BuilderConfig.load(path)


def _read_template(path: Path) -> str:
    if not path.exists():
        exit_with_error(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def _add_branch(branch: Tree, node: NodeTree) -> None:
    sub = branch.add(Text(node.descriptor.to_source()))
    for child in node.children:
        _add_branch(sub, child)


def build_rich_tree(trees: List[NodeTree], label: str) -> Tree:
    """A rich Tree with one branch per compiled root."""
    root = Tree(Text(label))
    for node in trees:
        _add_branch(root, node)
    return root


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"htmlbuilder {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Compile line-oriented markup templates to HTML."""


@typer_app.command()
def render(
    template: Path = typer.Argument(..., help="Template file to compile."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write HTML to file instead of stdout."
    ),
    page: bool = typer.Option(False, "--page", help="Wrap output in a full HTML page."),
    title: str = typer.Option("", "--title", help="Page title (with --page)."),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to htmlbuilder.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Compile TEMPLATE and emit HTML."""
    setup_logging(verbose)
    source = _read_template(template)

    try:
        compiler = Compiler(load_config(config_path))
        container = Element(compiler.config.container)
        compiler.generate(source, container=container)
    except HtmlBuilderError as exc:
        exit_with_error(str(exc))

    html = container.inner_html()
    if page:
        html = render_page(html, title=title)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output}")
    else:
        typer.echo(html)


@typer_app.command()
def tree(
    template: Path = typer.Argument(..., help="Template file to compile."),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to htmlbuilder.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Show the node trees TEMPLATE compiles to."""
    setup_logging(verbose)
    source = _read_template(template)

    try:
        trees = Compiler(load_config(config_path)).compile(source)
    except HtmlBuilderError as exc:
        exit_with_error(str(exc))

    console.print(build_rich_tree(trees, str(template)))


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    typer_app(args=argv)


if __name__ == "__main__":
    app()
