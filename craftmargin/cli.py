# craftmargin/cli.py
"""
CLI interface for craftmargin.

Thin presentation layer over the tools/ service layer.
All commands delegate to the same functions that MCP wraps.
"""

import asyncio
import json

import typer

app = typer.Typer(
    name="craftmargin",
    help="Pricing, marketplace fees and AI price advice for handmade products.",
    no_args_is_help=True,
)


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _load_config():
    """Load config and route logging to stderr at the configured verbosity."""
    from craftmargin.config.loader import load_config
    from craftmargin.errors import ConfigError
    from craftmargin.logging_config import configure_logging

    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(f"Error: {e} ({e.code})", err=True)
        raise typer.Exit(1)
    configure_logging(config.output.verbosity)
    return config


def _fail_on_error(result: dict) -> None:
    """Exit 1 with the tool's error message when it reported failure."""
    if not result.get("success"):
        typer.echo(f"Error: {result.get('error')} ({result.get('error_code')})", err=True)
        raise typer.Exit(1)


def _echo_json(result: dict) -> None:
    typer.echo(json.dumps(result, indent=2))


def _money(value: float, symbol: str) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _breakdown_table(result: dict, symbol: str, title: str):
    """Build a rich table for one PricingResult dict."""
    from rich.table import Table

    table = Table(title=title, show_header=False)
    table.add_column("Item", style="bold")
    table.add_column("Amount", justify="right")
    table.add_row("Selling price", _money(result["selling_price"], symbol))
    table.add_row("Materials", _money(result["materials_cost"], symbol))
    table.add_row("Labor", _money(result["labor_cost"], symbol))
    table.add_row("Overhead", _money(result["overhead_cost"], symbol))
    table.add_row("Total cost", _money(result["total_cost"], symbol))
    table.add_row("Marketplace fee", _money(result["marketplace_fee"], symbol))
    style = "green" if result["profit"] >= 0 else "red"
    table.add_row("Profit", f"[{style}]{_money(result['profit'], symbol)}[/{style}]")
    table.add_row("Margin", f"[{style}]{result['profit_margin']:.1f}%[/{style}]")
    return table


@app.command()
def profit(
    selling_price: float = typer.Argument(..., help="Selling price per unit"),
    materials: float = typer.Option(0.0, "--materials", "-m", help="Materials cost per unit"),
    hours: float = typer.Option(0.0, "--hours", "-H", help="Labor hours per unit"),
    rate: float = typer.Option(None, "--rate", "-r", help="Hourly labor rate (config default)"),
    overhead: float = typer.Option(0.0, "--overhead", "-o", help="Overhead % of materials + labor"),
    channel: str = typer.Option(None, "--channel", "-c", help="none, etsy, shopify, or amazon"),
    category: str = typer.Option(None, "--category", help="Amazon category: handmade, jewelry, default"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
):
    """Show cost, fee, profit and margin for one channel at one price."""
    from rich.console import Console

    from craftmargin.tools.calculate_profit import calculate_profit

    config = _load_config()
    result = calculate_profit(
        selling_price, materials, hours, rate, overhead, channel, category, config=config
    )
    _fail_on_error(result)

    if as_json:
        _echo_json(result)
        return

    symbol = config.output.currency_symbol
    breakdown = result["result"]
    console = Console()
    console.print(_breakdown_table(breakdown, symbol, f"Profit on {breakdown['channel']}"))
    fees = {name: amount for name, amount in result["fee_breakdown"].items() if amount}
    if fees:
        console.print(
            "Fees: " + ", ".join(f"{name} {_money(amount, symbol)}" for name, amount in fees.items())
        )


@app.command()
def price(
    materials: float = typer.Option(0.0, "--materials", "-m", help="Materials cost per unit"),
    hours: float = typer.Option(0.0, "--hours", "-H", help="Labor hours per unit"),
    rate: float = typer.Option(None, "--rate", "-r", help="Hourly labor rate (config default)"),
    overhead: float = typer.Option(0.0, "--overhead", "-o", help="Overhead % of materials + labor"),
    channel: str = typer.Option(None, "--channel", "-c", help="none, etsy, shopify, or amazon"),
    category: str = typer.Option(None, "--category", help="Amazon category: handmade, jewelry, default"),
    margin: float = typer.Option(None, "--margin", help="Target profit margin % (config default)"),
    exact: bool = typer.Option(False, "--exact", help="Skip .99 price-point rounding"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
):
    """Recommend the selling price that reaches a target margin."""
    from rich.console import Console

    from craftmargin.tools.suggest_price import suggest_price

    config = _load_config()
    result = suggest_price(
        materials, hours, rate, overhead, channel, category, margin,
        False if exact else None,
        config=config,
    )
    _fail_on_error(result)

    if as_json:
        _echo_json(result)
        return

    symbol = config.output.currency_symbol
    optimal = result["optimal"]
    console = Console()
    console.print(
        f"[bold]Suggested price on {optimal['channel']}:[/bold] "
        f"{_money(optimal['price'], symbol)} "
        f"(target {optimal['target_margin']:.1f}%, exact {_money(optimal['raw_price'], symbol)})"
    )
    console.print(_breakdown_table(result["result"], symbol, "At the suggested price"))


@app.command()
def fees(
    selling_price: float = typer.Argument(..., help="Selling price per unit"),
    materials: float = typer.Option(0.0, "--materials", "-m", help="Materials cost per unit"),
    hours: float = typer.Option(0.0, "--hours", "-H", help="Labor hours per unit"),
    rate: float = typer.Option(None, "--rate", "-r", help="Hourly labor rate (config default)"),
    overhead: float = typer.Option(0.0, "--overhead", "-o", help="Overhead % of materials + labor"),
    category: str = typer.Option(None, "--category", help="Amazon category: handmade, jewelry, default"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
):
    """Compare marketplace fees and profit across channels at one price."""
    from rich.console import Console
    from rich.table import Table

    from craftmargin.tools.compare_fees import compare_fees

    config = _load_config()
    result = compare_fees(
        selling_price, materials, hours, rate, overhead, category, config=config
    )
    _fail_on_error(result)

    if as_json:
        _echo_json(result)
        return

    symbol = config.output.currency_symbol
    table = Table(title=f"Channels at {_money(result['selling_price'], symbol)}")
    table.add_column("Channel")
    table.add_column("Fee", justify="right")
    table.add_column("Profit", justify="right")
    table.add_column("Margin", justify="right")
    for name, row in result["channels"].items():
        label = f"{name} *" if name == result["best_marketplace"] else name
        table.add_row(
            label,
            _money(row["marketplace_fee"], symbol),
            _money(row["profit"], symbol),
            f"{row['profit_margin']:.1f}%",
        )
    console = Console()
    console.print(table)
    console.print(f"Best marketplace: [green]{result['best_marketplace']}[/green]")


@app.command()
def advise(
    use_case: str = typer.Argument(
        ..., help="competitive_pricing, material_prices, better_prices, or parse_input"
    ),
    params: str = typer.Option(..., "--params", "-p", help="Use-case params as a JSON object"),
    entitled: bool = typer.Option(
        False, "--entitled/--not-entitled", help="Whether the user has an active subscription"
    ),
    costs: str = typer.Option(
        None, "--costs", help="CostInputs JSON to merge competitive advice with"
    ),
    selling_price: float = typer.Option(None, "--price", help="Current selling price"),
    channel: str = typer.Option(None, "--channel", "-c", help="Channel for the merged report"),
    category: str = typer.Option(None, "--category", help="Amazon category for the merged report"),
    previous_price: float = typer.Option(
        None, "--previous-price", help="Stored material price to check against"
    ),
):
    """Ask the AI provider chain for advice and print the JSON result."""
    from craftmargin.tools.advise import advise as advise_tool

    try:
        params_data = json.loads(params)
        cost_inputs = json.loads(costs) if costs else None
    except json.JSONDecodeError as e:
        typer.echo(f"Error: invalid JSON: {e}", err=True)
        raise typer.Exit(1)
    if not isinstance(params_data, dict) or not isinstance(cost_inputs, (dict, type(None))):
        typer.echo("Error: --params and --costs must be JSON objects", err=True)
        raise typer.Exit(1)

    config = _load_config()
    result = _run(
        advise_tool(
            use_case,
            params_data,
            entitled,
            config=config,
            cost_inputs=cost_inputs,
            selling_price=selling_price,
            channel=channel,
            category=category,
            previous_price=previous_price,
        )
    )
    _fail_on_error(result)
    _echo_json(result)


@app.command("config")
def show_config():
    """Print the config file path and its current values."""
    import yaml

    from craftmargin.config.loader import get_config_path

    config = _load_config()
    typer.echo(f"# {get_config_path()}")
    typer.echo(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False).rstrip())


@app.command()
def serve():
    """Start the MCP server over stdio."""
    from craftmargin.__main__ import main

    _run(main())


if __name__ == "__main__":
    app()
