import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from lxml import etree
from pydantic import ValidationError
from pydantic_xml import ParsingError
from rich.console import Console
from rich.markup import escape

from .config import AppConfig, ContractReferenceSource, get_config, setup_logging
from .converter import convert_file, to_json
from .errors import ConversionError
from .ubl.ubl_document import read_xml_file, resolve_document_kind

app = typer.Typer()

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error: {escape(message)}[/bold red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
    config_file: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="TOML configuration file", dir_okay=False)
    ] = None,
) -> None:
    setup_logging(verbose)
    if verbose:
        logger.debug("Verbose mode enabled")
    try:
        ctx.obj = get_config(config_file)
    except (OSError, ValueError) as e:
        _fail(f"invalid configuration: {e}")


@app.command()
def convert(
    ctx: typer.Context,
    xml_file: Annotated[Path, typer.Argument(help="CIUS-PT Invoice or CreditNote XML file", dir_okay=False)],
    contract_reference: Annotated[
        Optional[ContractReferenceSource],
        typer.Option("--contract-reference", help="UBL element used for ContractReferenceNumber"),
    ] = None,
    indent: Annotated[Optional[int], typer.Option(help="JSON indentation")] = None,
) -> None:
    """Convert a CIUS-PT document to a DDL ItemTransaction and print it as JSON."""
    config: AppConfig = ctx.obj
    mapping_config = config.mapping
    if contract_reference is not None:
        mapping_config = replace(mapping_config, contract_reference_source=contract_reference)

    try:
        result = convert_file(xml_file, mapping_config)
    except FileNotFoundError as e:
        _fail(str(e))
    except etree.XMLSyntaxError as e:
        _fail(f"{xml_file} is not well-formed XML: {e}")
    except (ParsingError, ValidationError) as e:
        _fail(f"{xml_file} could not be loaded as UBL: {e}")
    except ConversionError as e:
        _fail(f"{xml_file}: {e}")

    typer.echo(to_json(result.transaction, indent=indent if indent is not None else config.output.indent))


@app.command()
def kind(
    xml_file: Annotated[Path, typer.Argument(help="UBL XML file", dir_okay=False)],
) -> None:
    """Print the UBL document kind (Invoice or CreditNote) of a file."""
    try:
        document_kind = resolve_document_kind(read_xml_file(xml_file))
    except OSError as e:
        _fail(str(e))
    except etree.XMLSyntaxError as e:
        _fail(f"{xml_file} is not well-formed XML: {e}")
    except ConversionError as e:
        _fail(f"{xml_file}: {e}")

    typer.echo(document_kind.value)


if __name__ == "__main__":
    app()
