"""
Command line interface for EAN-Search.

Usage:
    eansearch verify 5099750442227
    eansearch lookup 5099750442227
    eansearch --format json search "bananaboat"
    eansearch image 5099750442227 --output thriller.png
"""

import json
import sys
from typing import NoReturn

import click  # type: ignore

from eansearch.barcode import barcode_digits, calculate_check_digit, detect_symbology
from eansearch.client import EANSearchClient
from eansearch.config import get_settings
from eansearch.exceptions import EANSearchError, InvalidBarcodeError
from eansearch.log import configure_logging
from eansearch.models import Product, ProductPage


def format_products(products: list[Product], output_format: str) -> str:
    """Render products as a table or as JSON."""
    if output_format == "json":
        return json.dumps([p.model_dump() for p in products], indent=2)

    lines = [
        f"{'EAN':<15} {'Category':<25} {'Country':<8} Name",
        "-" * 80,
    ]
    for p in products:
        category = f"{p.category_id}: {p.category_name}"
        lines.append(f"{p.ean:0>13}  {category:<25} {p.issuing_country:<8} {p.name}")
    return "\n".join(lines)


def echo_page(page: ProductPage, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps(page.model_dump(), indent=2))
        return

    click.echo(format_products(page.products, output_format))
    click.echo("-" * 80)
    total = page.total_products if page.total_products is not None else len(page.products)
    more = " (more available)" if page.more_products else ""
    click.echo(f"Page {page.page}: {len(page.products)} of {total} product(s){more}")


class ClientContext:
    """Lazily created API client shared by the subcommands."""

    def __init__(self, token: str | None, output_format: str):
        self.token = token
        self.output_format = output_format
        self._client: EANSearchClient | None = None

    @property
    def client(self) -> EANSearchClient:
        if self._client is None:
            if not self.token:
                raise click.UsageError("API token required: pass --token or set EAN_SEARCH_API_TOKEN")
            settings = get_settings()
            self._client = EANSearchClient(
                self.token,
                base_url=settings.ean_search_api_url,
                timeout=settings.ean_search_timeout,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()


def fail(message: str, code: int = 1) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)


@click.group()
@click.option(
    "--token", "-t",
    envvar="EAN_SEARCH_API_TOKEN",
    default=None,
    help="EAN-Search API token (defaults to $EAN_SEARCH_API_TOKEN)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option("--log-level", default=None, help="Log level (defaults to $LOG_LEVEL or INFO)")
@click.pass_context
def main(ctx: click.Context, token: str | None, output_format: str, log_level: str | None) -> None:
    """Search the EAN barcode database at EAN-Search.org."""
    configure_logging(level=log_level)
    obj = ClientContext(token or get_settings().api_token_str, output_format)
    ctx.obj = obj
    ctx.call_on_close(obj.close)


@main.command()
@click.argument("barcode")
@click.option("--length", "-l", type=int, default=None, help="Intended digit count (restores leading zeros)")
@click.option("--remote", is_flag=True, help="Let the API verify the checksum instead")
@click.pass_obj
def verify(obj: ClientContext, barcode: str, length: int | None, remote: bool) -> None:
    """Verify the check digit of BARCODE. Exits 1 on mismatch, 2 on malformed input."""
    if remote:
        try:
            valid = obj.client.verify_checksum(barcode)
        except EANSearchError as e:
            fail(str(e))
        symbology = "remote"
    else:
        try:
            code = barcode_digits(barcode, length)
        except InvalidBarcodeError as e:
            fail(str(e), code=2)
        valid = calculate_check_digit(code[:-1]) == int(code[-1])
        symbology = detect_symbology(code).value

    if obj.output_format == "json":
        click.echo(json.dumps({"barcode": barcode, "valid": valid, "symbology": symbology}))
    else:
        click.echo(f"{barcode}: {'valid' if valid else 'invalid'} checksum ({symbology})")
    if not valid:
        sys.exit(1)


@main.command()
@click.argument("ean")
@click.option("--language", type=int, default=None, help="Result language code")
@click.pass_obj
def lookup(obj: ClientContext, ean: str, language: int | None) -> None:
    """Look up a product by its EAN barcode."""
    if language is None:
        language = get_settings().ean_search_language
    try:
        product = obj.client.barcode_lookup(ean, language=language)
    except EANSearchError as e:
        fail(str(e))

    if product is None:
        fail(f"Barcode not found: {ean}")
    if obj.output_format == "json":
        click.echo(json.dumps(product.model_dump(), indent=2))
    else:
        click.echo(str(product))


@main.command("prefix-search")
@click.argument("prefix")
@click.option("--language", type=int, default=None, help="Result language code")
@click.option("--page", type=int, default=0, show_default=True)
@click.pass_obj
def prefix_search(obj: ClientContext, prefix: str, language: int | None, page: int) -> None:
    """List products whose EAN starts with PREFIX."""
    if language is None:
        language = get_settings().ean_search_language
    try:
        result = obj.client.barcode_prefix_search(
            prefix,
            language=language,
            page=page,
        )
    except EANSearchError as e:
        fail(str(e))
    echo_page(result, obj.output_format)


@main.command()
@click.argument("name")
@click.option("--language", type=int, default=99, show_default=True, help="Result language code")
@click.option("--page", type=int, default=0, show_default=True)
@click.pass_obj
def search(obj: ClientContext, name: str, language: int, page: int) -> None:
    """Search products by keywords in NAME."""
    try:
        result = obj.client.product_search(name, language=language, page=page)
    except EANSearchError as e:
        fail(str(e))
    echo_page(result, obj.output_format)


@main.command("category-search")
@click.argument("category", type=int)
@click.option("--name", default=None, help="Restrict to products matching these keywords")
@click.option("--language", type=int, default=99, show_default=True, help="Result language code")
@click.option("--page", type=int, default=0, show_default=True)
@click.pass_obj
def category_search(obj: ClientContext, category: int, name: str | None, language: int, page: int) -> None:
    """List products in CATEGORY."""
    try:
        result = obj.client.category_search(category, name=name, language=language, page=page)
    except EANSearchError as e:
        fail(str(e))
    echo_page(result, obj.output_format)


@main.command()
@click.argument("ean")
@click.pass_obj
def country(obj: ClientContext, ean: str) -> None:
    """Show the country that issued EAN."""
    try:
        issuing_country = obj.client.issuing_country(ean)
    except EANSearchError as e:
        fail(str(e))
    if obj.output_format == "json":
        click.echo(json.dumps({"ean": ean, "issuing_country": issuing_country}))
    else:
        click.echo(issuing_country)


@main.command("account-status")
@click.pass_obj
def account_status(obj: ClientContext) -> None:
    """Show how many API requests remain in this payment cycle."""
    try:
        status = obj.client.account_status()
    except EANSearchError as e:
        fail(str(e))
    if obj.output_format == "json":
        click.echo(json.dumps({**status.model_dump(), "remaining": status.remaining}))
    else:
        click.echo(f"Account {status.id}: {status.requests}/{status.request_limit} requests used, {status.remaining} remaining")


@main.command()
@click.argument("ean")
@click.option("--width", type=int, default=102, show_default=True)
@click.option("--height", type=int, default=50, show_default=True)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    required=True,
    help="PNG file to write",
)
@click.pass_obj
def image(obj: ClientContext, ean: str, width: int, height: int, output: str) -> None:
    """Download a PNG image of the EAN barcode."""
    try:
        png = obj.client.barcode_image(ean, width=width, height=height)
    except EANSearchError as e:
        fail(str(e))
    with open(output, "wb") as f:
        f.write(png)
    click.echo(f"Barcode image written to: {output}")


if __name__ == "__main__":
    main()
