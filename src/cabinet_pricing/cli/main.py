"""Typer CLI for cabinet pricing."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_pricing.application import (
    CabinetPriceOutput,
    OrderOutput,
    ServiceFactory,
)
from cabinet_pricing.application.config import (
    ConfigError,
    load_order,
    request_to_configuration,
    zone_to_domain,
)
from cabinet_pricing.cli.commands import display_load_error, validate_command
from cabinet_pricing.domain import (
    CabinetConfiguration,
    CatalogLookupError,
    Dimensions,
    PricingValidationError,
    RateSnapshot,
    ScheduleMismatchError,
)
from cabinet_pricing.domain.services import WidthRange
from cabinet_pricing.domain.value_objects import PaymentType
from cabinet_pricing.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    order_to_dict,
    payment_check_to_dict,
    price_list_to_dict,
    price_output_to_dict,
    schedule_to_dict,
    weight_to_dict,
)

CATALOG_ENV_VAR = "CABINET_PRICING_CATALOG"

CatalogOption = Annotated[
    Path,
    typer.Option(
        "--catalog",
        "-c",
        envvar=CATALOG_ENV_VAR,
        help="Path to the JSON rate catalog",
    ),
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text or json"),
]


app = typer.Typer(
    name="cabinet-pricing",
    help="Price configurable kitchen cabinets, orders and payment schedules.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show calculation traces on stderr"),
    ] = False,
) -> None:
    """Cabinet pricing and fulfilment calculations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format} (expected text or json)", err=True)
        raise typer.Exit(code=1)
    return fmt


def _load_snapshot(factory: ServiceFactory) -> RateSnapshot:
    try:
        return factory.get_rate_repository().load()
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _report_error(error: Exception) -> None:
    """Print a rejected-request error to stderr."""
    if isinstance(error, PricingValidationError):
        typer.echo("Invalid input:", err=True)
        for issue in error.issues:
            typer.echo(f"  {issue.field}: {issue.message}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)


def _parse_hardware(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``category=set_or_brand_id`` options."""
    selections: dict[str, str] = {}
    for value in values or []:
        category, sep, identifier = value.partition("=")
        if not sep or not category.strip() or not identifier.strip():
            raise typer.BadParameter(
                f"Expected CATEGORY=ID, got '{value}'", param_hint="--hardware"
            )
        selections[category.strip()] = identifier.strip()
    return selections


def _parse_width_ranges(values: list[str] | None) -> list[WidthRange] | None:
    """Parse repeated ``MIN-MAX`` width range options."""
    if not values:
        return None
    ranges = []
    for value in values:
        low, _, high = value.partition("-")
        try:
            ranges.append(WidthRange(f"{low}-{high}mm", float(low), float(high)))
        except ValueError:
            # also covers a missing "-", where float("") fails
            raise typer.BadParameter(
                f"Expected MIN-MAX in mm, got '{value}'", param_hint="--range"
            )
    return ranges


def _export(
    output_formats: str | None,
    output_dir: Path | None,
    result: CabinetPriceOutput | OrderOutput,
    base_name: str,
) -> None:
    """Write the result to the requested export formats."""
    if not output_formats:
        return
    if output_formats.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]

    invalid = [f for f in formats if not ExporterRegistry.is_registered(f)]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(
            f"Available formats: {', '.join(ExporterRegistry.available_formats())}",
            err=True,
        )
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, base_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def price(
    catalog: CatalogOption,
    cabinet_type: Annotated[
        str, typer.Option("--type", "-t", help="Cabinet type id")
    ],
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", help="Height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Depth in mm")
    ] = None,
    quantity: Annotated[
        int, typer.Option("--quantity", "-q", help="Number of cabinets")
    ] = 1,
    door_style: Annotated[
        str | None, typer.Option("--door-style", help="Door style id")
    ] = None,
    color: Annotated[str | None, typer.Option("--color", help="Colour id")] = None,
    finish: Annotated[str | None, typer.Option("--finish", help="Finish id")] = None,
    material: Annotated[
        str | None, typer.Option("--material", help="Carcass material type, e.g. HMR")
    ] = None,
    hardware: Annotated[
        list[str] | None,
        typer.Option(
            "--hardware",
            help="Hardware selection as CATEGORY=SET_OR_BRAND_ID (repeatable)",
        ),
    ] = None,
    service_fees: Annotated[
        bool,
        typer.Option(
            "--service-fees",
            help="Apply colour service fees as if this were the whole order",
        ),
    ] = False,
    show_parts: Annotated[
        bool, typer.Option("--parts", help="List every priced panel")
    ] = False,
    output_format: FormatOption = "text",
    output_formats: Annotated[
        str | None,
        typer.Option("--output-formats", help="Comma-separated export formats: json,csv (or 'all')"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
) -> None:
    """Price a single cabinet configuration."""
    fmt = _check_format(output_format)
    factory = ServiceFactory(catalog_path=catalog)
    snapshot = _load_snapshot(factory)

    configuration = CabinetConfiguration(
        cabinet_type_id=cabinet_type,
        width_mm=width,
        height_mm=height,
        depth_mm=depth,
        quantity=quantity,
        door_style_id=door_style,
        color_id=color,
        finish_id=finish,
        material_type=material,
        hardware_selections=_parse_hardware(hardware),
    )

    try:
        result = factory.create_price_command().execute(
            configuration, snapshot, include_service_fees=service_fees
        )
    except (PricingValidationError, CatalogLookupError) as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(json.dumps(price_output_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_breakdown_formatter(show_parts).format(result.breakdown))
        if result.weight is not None:
            typer.echo()
            typer.echo(f"Weight: {result.weight.total_weight_kg:.2f} kg")

    _export(output_formats, output_dir, result, cabinet_type)


@app.command()
def order(
    order_file: Annotated[
        Path, typer.Argument(help="Path to the JSON order request")
    ],
    catalog: CatalogOption,
    show_parts: Annotated[
        bool, typer.Option("--parts", help="List every priced panel")
    ] = False,
    output_format: FormatOption = "text",
    output_formats: Annotated[
        str | None,
        typer.Option("--output-formats", help="Comma-separated export formats: json,csv (or 'all')"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = None,
) -> None:
    """Price a whole order with service fees, fulfilment and payment schedule."""
    fmt = _check_format(output_format)
    factory = ServiceFactory(catalog_path=catalog)

    try:
        request = load_order(order_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    snapshot = _load_snapshot(factory)

    try:
        result = factory.create_order_command().execute(
            [request_to_configuration(item) for item in request.items],
            snapshot,
            zone=zone_to_domain(request.zone) if request.zone else None,
            assembly=request.assembly,
            deposit_percentage=request.deposit_percentage,
        )
    except (PricingValidationError, CatalogLookupError) as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(json.dumps(order_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_order_formatter(show_parts).format(result))

    _export(output_formats, output_dir, result, order_file.stem)


@app.command()
def weight(
    catalog: CatalogOption,
    cabinet_type: Annotated[
        str, typer.Option("--type", "-t", help="Cabinet type id")
    ],
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", help="Height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Depth in mm")
    ] = None,
    quantity: Annotated[
        int, typer.Option("--quantity", "-q", help="Number of cabinets")
    ] = 1,
    door_style: Annotated[
        str | None, typer.Option("--door-style", help="Door style id")
    ] = None,
    material: Annotated[
        str | None, typer.Option("--material", help="Carcass material type")
    ] = None,
    output_format: FormatOption = "text",
) -> None:
    """Estimate weight and shipping carton of a cabinet line."""
    fmt = _check_format(output_format)
    factory = ServiceFactory(catalog_path=catalog)
    snapshot = _load_snapshot(factory)

    configuration = CabinetConfiguration(
        cabinet_type_id=cabinet_type,
        width_mm=width,
        height_mm=height,
        depth_mm=depth,
        quantity=quantity,
        door_style_id=door_style,
        material_type=material,
    )
    try:
        issues = factory.get_input_validator().validate_configuration(configuration, snapshot)
        if issues:
            raise PricingValidationError(issues)
        resolved_type = snapshot.cabinet_type(cabinet_type)
    except (PricingValidationError, CatalogLookupError) as e:
        _report_error(e)
        raise typer.Exit(code=1)

    w, h, d = configuration.resolved_size(resolved_type)
    result = factory.get_weight_calculator().calculate(
        resolved_type,
        Dimensions(width_mm=w, height_mm=h, depth_mm=d),
        quantity,
        door_style=snapshot.door_style(door_style),
        material=snapshot.material(material) or snapshot.default_material(),
    )

    if fmt == "json":
        typer.echo(json.dumps(weight_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_weight_formatter().format(result))


@app.command()
def schedule(
    total: Annotated[float, typer.Argument(help="Order total to split")],
    deposit: Annotated[
        float, typer.Option("--deposit", "-p", help="Deposit percentage")
    ] = 20.0,
    deposit_days: Annotated[
        int, typer.Option("--deposit-days", help="Days until the deposit is due")
    ] = 7,
    balance_days: Annotated[
        int, typer.Option("--balance-days", help="Days until the balance is due")
    ] = 30,
    output_format: FormatOption = "text",
) -> None:
    """Split an order total into deposit and balance."""
    fmt = _check_format(output_format)
    factory = ServiceFactory()
    try:
        result = factory.create_schedule_command().execute(
            total, deposit, deposit_days, balance_days
        )
    except PricingValidationError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(json.dumps(schedule_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_schedule_formatter().format(result))


@app.command(name="check-payment")
def check_payment(
    amount: Annotated[float, typer.Argument(help="Attempted payment amount")],
    total: Annotated[float, typer.Option("--total", help="Order total")],
    payment_type: Annotated[
        PaymentType, typer.Option("--type", help="Payment being made")
    ] = PaymentType.DEPOSIT,
    deposit: Annotated[
        float, typer.Option("--deposit", "-p", help="Deposit percentage")
    ] = 20.0,
    output_format: FormatOption = "text",
) -> None:
    """Check a payment amount against the schedule for a total.

    Exits with code 1 when the amount does not match to the cent.
    """
    fmt = _check_format(output_format)
    factory = ServiceFactory()
    command = factory.create_schedule_command()
    try:
        plan = command.execute(total, deposit)
        result = command.check_payment(amount, plan, payment_type, strict=True)
    except (PricingValidationError, ScheduleMismatchError) as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(json.dumps(payment_check_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_schedule_formatter().format_check(result))


@app.command(name="price-list")
def price_list(
    catalog: CatalogOption,
    cabinet_type: Annotated[
        str, typer.Option("--type", "-t", help="Cabinet type id")
    ],
    ranges: Annotated[
        list[str] | None,
        typer.Option("--range", "-r", help="Width range as MIN-MAX in mm (repeatable)"),
    ] = None,
    output_format: FormatOption = "text",
) -> None:
    """Show list prices of a cabinet type per width range."""
    fmt = _check_format(output_format)
    factory = ServiceFactory(catalog_path=catalog)
    width_ranges = _parse_width_ranges(ranges)
    snapshot = _load_snapshot(factory)

    try:
        result = factory.create_price_list_command().execute(
            snapshot, cabinet_type, width_ranges
        )
    except CatalogLookupError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(json.dumps(price_list_to_dict(result), indent=2))
    else:
        typer.echo(factory.get_price_list_formatter().format(result))


if __name__ == "__main__":
    app()
