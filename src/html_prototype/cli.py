"""
Command-line interface for html-prototype.
Writes the bundled JavaScript library and stylesheet as static files.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from html_prototype.helpers import Prototype
from html_prototype.library import PROTOTYPE_VERSION, prototype_js
from html_prototype.templates import AUTOCOMPLETE_STYLESHEET
from html_prototype.version import __version__

cli = typer.Typer(
	name="html-prototype",
	help="HTML and JavaScript generators for the Prototype library",
	no_args_is_help=True,
)


@cli.command("js")
def write_js(
	output: Path = typer.Argument(
		Path("prototype.js"), help="Destination file, or '-' for stdout"
	),
	force: bool = typer.Option(False, "--force", "-f", help="Overwrite OUTPUT"),
):
	"""Write the bundled Prototype library to a static file."""
	source = prototype_js()
	if str(output) == "-":
		typer.echo(source, nl=False)
		return

	console = Console(stderr=True)
	if output.exists() and not force:
		console.log(f"❌ {output} already exists, use --force to overwrite")
		raise typer.Exit(1)
	try:
		output.parent.mkdir(parents=True, exist_ok=True)
		output.write_text(source, encoding="utf-8")
	except OSError as exc:
		console.log(f"❌ Could not write {output}: {exc}")
		raise typer.Exit(1) from None
	console.log(f"✅ Wrote Prototype {PROTOTYPE_VERSION} to {output}")


@cli.command("stylesheet")
def stylesheet(
	tag: bool = typer.Option(False, "--tag", help="Wrap the CSS in a <style> block"),
):
	"""Print the autocomplete stylesheet."""
	if tag:
		typer.echo(Prototype().auto_complete_stylesheet())
	else:
		typer.echo(AUTOCOMPLETE_STYLESHEET.strip())


@cli.command("version")
def version():
	"""Print the package and bundled library versions."""
	typer.echo(f"html-prototype {__version__} (Prototype {PROTOTYPE_VERSION})")


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		console = Console()
		console.print_exception()
		raise typer.Exit(1) from None


if __name__ == "__main__":
	main()
