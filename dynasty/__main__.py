"""Entry point for dynasty package."""

import argparse

from rich.console import Console
from rich.table import Table


def _print_evaluation(console: Console, evaluation) -> None:
    table = Table(title="Team Totals (Adjusted)")
    table.add_column("Team")
    table.add_column("Assets")
    table.add_column("Raw", justify="right")
    table.add_column("Adjusted", justify="right")
    table.add_column("Delta", justify="right")

    for result in evaluation.teams:
        assets = ", ".join(f"{s.label} ({s.value:,})" for s in result.segments) or "-"
        delta = f"{result.delta:+,}"
        style = "blue" if result.delta < 0 else "yellow"
        table.add_row(
            result.name,
            assets,
            f"{result.raw_total:,}",
            f"{result.adjusted_total:,}",
            f"[{style}]{delta}[/{style}]",
        )
    console.print(table)
    console.print(
        f"Grand (adj) {evaluation.grand_adjusted:,}  |  "
        f"Avg / team (adj) {evaluation.average_adjusted:,}  |  "
        f"Decay {evaluation.decay:.2f} (2nd piece ~{evaluation.second_piece_percent}%)"
    )

    console.print()
    console.print("[bold]Suggestions (to make even)[/bold]")
    for result in evaluation.teams:
        advice = result.advice
        console.print(f"  {result.name}: {advice.message}")
        for entry in advice.suggestions:
            console.print(f"    +{entry.value:,} -> {entry.name}")


def run_demo(args: argparse.Namespace) -> None:
    """Evaluate a sample two-team trade and print the results."""
    from dynasty.config import get_config
    from dynasty.core.board import TradeBoard
    from dynasty.core.enums import Position, SuggestionPreference, ValueSource
    from dynasty.core.evaluation import evaluate
    from dynasty.core.market.catalog import MarketCatalog
    from dynasty.core.market.importer import (
        MarketImportError,
        import_picks,
        import_players,
        read_import_file,
    )
    from dynasty.core.settings import LeagueSettings, ValueSourceConfig
    from dynasty.core.valuation import ValueResolver

    console = Console()
    config = get_config()
    resolver = ValueResolver(config.current_year)
    settings = LeagueSettings(superflex=not args.one_qb, te_premium=args.te_premium)
    source = ValueSourceConfig()
    catalog = MarketCatalog()

    try:
        if args.players:
            rows = import_players(read_import_file(args.players))
            catalog.replace_external_players(row.to_entry() for row in rows)
            source.source = ValueSource.BLEND
        if args.picks:
            table = import_picks(read_import_file(args.picks))
            catalog.merge_external_picks(args.pick_year or resolver.current_year + 1, table)
            source.source = ValueSource.BLEND
    except MarketImportError as e:
        console.print(f"[red]Import failed:[/red] {e}")
        return

    board = TradeBoard.new()
    team_a, team_b = board.teams
    board.add_player(team_a.id, "Josh Allen", Position.QB)
    board.add_player(team_b.id, "Justin Jefferson", Position.WR)
    board.add_pick(team_b.id, resolver.current_year + 1, "2.06")

    evaluation = evaluate(
        board,
        settings,
        catalog,
        source,
        resolver,
        preference=SuggestionPreference(args.preference),
        tolerance=args.tolerance,
    )

    console.print("[bold]Dynasty Trade Calculator (Demo Mode)[/bold]")
    console.print(f"Source: {source.source.value}  |  Superflex: {settings.superflex}")
    console.print()
    _print_evaluation(console, evaluation)


def main() -> None:
    """Main entry point for the calculator."""
    from dynasty.config import configure_logging, get_config

    config = get_config()
    parser = argparse.ArgumentParser(
        description="Dynasty - multi-team dynasty trade calculator",
        prog="dynasty",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default=config.api_host)
    serve.add_argument("--port", type=int, default=config.api_port)
    serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    demo = subparsers.add_parser("demo", help="Evaluate a sample trade in the terminal")
    demo.add_argument("--one-qb", action="store_true", help="Use 1QB values instead of superflex")
    demo.add_argument("--te-premium", action="store_true", help="Apply TE premium to picks")
    demo.add_argument("--players", type=str, help="Players CSV to blend in")
    demo.add_argument("--picks", type=str, help="Draft pick CSV to blend in")
    demo.add_argument("--pick-year", type=int, help="Draft year for --picks (default: next year)")
    demo.add_argument(
        "--preference",
        choices=["any", "players", "picks"],
        default="any",
        help="Suggest players or picks first (default: any)",
    )
    demo.add_argument("--tolerance", type=float, default=0.10, help="Suggestion window (default: 0.10)")

    args = parser.parse_args()
    configure_logging()

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    if args.command == "serve":
        from dynasty.api.main import run_api

        run_api(host=args.host, port=args.port, reload=args.reload)
    elif args.command == "demo":
        run_demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
