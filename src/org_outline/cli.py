"""CLI entry point for org-outline."""

import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from org_outline import __version__
from org_outline.config import load_config
from org_outline.content import ListBlock, TextBlock
from org_outline.document import OrgDocument, OrgObject
from org_outline.errors import OrgError
from org_outline.headline import HeadlineGroup
from org_outline.status_labels import StatusLabels
from org_outline.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)
console = Console()


def describe_object(obj: OrgObject) -> str:
    """
    Describe one entry of the object stream on a single line.

    Args:
        obj: HeadlineGroup, TextBlock or ListBlock

    Returns:
        Summary line, e.g. "headline  * TODO write docs" or "list      3 items (-)"
    """
    if isinstance(obj, HeadlineGroup):
        return f"headline  {obj.headline.render()}"
    if isinstance(obj, TextBlock):
        count = len(obj.lines)
        return f"text      {count} line{'s' if count != 1 else ''}"
    if isinstance(obj, ListBlock):
        count = len(obj.items)
        family = obj.kind.value if obj.kind is not None else "empty"
        return f"list      {count} item{'s' if count != 1 else ''} ({family})"
    raise TypeError(f"not an org object: {obj!r}")


def build_tree(document: OrgDocument, label: str) -> Tree:
    """
    Build a rich Tree of the document's headlines.

    Args:
        document: Parsed document
        label: Label for the root node (usually the file name)

    Returns:
        rich Tree mirroring the headline hierarchy
    """
    tree = Tree(Text(label))

    def add_children(node: Tree, group: HeadlineGroup) -> None:
        for child in group.children():
            # plain Text, titles may contain [brackets]
            branch = node.add(Text(child.headline.render()))
            add_children(branch, child)

    add_children(tree, document.root)
    return tree


def resolve_status_labels(labels: Optional[str], configured: list[str]) -> StatusLabels:
    """Pick --labels over the configured labels.

    Raises:
        click.BadParameter: If --labels contains an invalid label
    """
    if labels is None:
        return StatusLabels(configured)
    try:
        return StatusLabels.from_string(labels)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--labels'") from e


def show_error(message: str) -> None:
    """Show error message on stderr."""
    click.echo(f"Error: {message}", err=True)


@click.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to org file to parse (default: file_path from config)",
)
@click.option(
    "--labels",
    "-l",
    help="Comma (',') separated status labels, e.g. TODO,STARTED,DONE",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/org-outline/config.yaml)",
)
@click.option("--objects", "mode", flag_value="objects", help="Print the object stream, one line per object")
@click.option("--headlines", "mode", flag_value="headlines", help="Print every headline in document order")
@click.option("--tree", "mode", flag_value="tree", help="Print the headline hierarchy as a tree")
@click.version_option(__version__, prog_name="org-outline")
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: Optional[Path],
    labels: Optional[str],
    config_path: Optional[Path],
    mode: Optional[str],
):
    """org-outline - Parse org formatted outline files.

    Parses headlines (with status keywords and tags), lists and text into a
    tree and prints it back out. Without a mode flag the re-rendered
    document is printed.
    """
    configure_logging()

    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        show_error(f"Invalid configuration: {e}")
        ctx.exit(1)

    status_labels = resolve_status_labels(labels, config.parser.status_labels)

    if file_path is None:
        if config.file_path is None:
            raise click.UsageError("No org file given. Use --file or set file_path in config.yaml")
        file_path = Path(config.file_path)

    logger.info("cli_started", path=str(file_path), mode=mode, status_labels=str(status_labels))

    try:
        document = OrgDocument.load(file_path, status_labels, config.parser.max_entries)
    except OrgError as e:
        logger.error("document_load_failed", path=str(file_path), error=str(e))
        show_error(str(e))
        ctx.exit(1)

    logger.info("document_loaded", path=str(file_path), characters=len(document.text))

    if mode == "objects":
        for obj in document.objects():
            click.echo(describe_object(obj))
    elif mode == "headlines":
        for group in document.headlines():
            click.echo(group.headline.render())
    elif mode == "tree":
        console.print(build_tree(document, file_path.name))
    else:
        rendered = document.render()
        click.echo(rendered, nl=not rendered.endswith("\n"))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
