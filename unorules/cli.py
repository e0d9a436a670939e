"""CLI entry point."""

from __future__ import annotations

import dataclasses
import random
from typing import Optional

import typer
from dotenv import load_dotenv

from unorules.config import Settings, configure_logging
from unorules.engine import CardSpec, DeckSpecError, PlayerSetup, SeatKind, Variant

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO-style card game with rule-driven deck variants and bots")


def _parse_seats(seat_specs: str) -> list[PlayerSetup]:
    kinds = []
    for part in (s.strip().lower() for s in seat_specs.split(",") if s.strip()):
        try:
            kinds.append(SeatKind(part))
        except ValueError:
            raise typer.BadParameter(
                f"Unknown seat type: {part}. Use human, random, aggressive or cheater."
            ) from None
    if len(kinds) < 2:
        raise typer.BadParameter("At least two seats are needed.")

    ids = list(range(1, len(kinds) + 1))
    # Cheaters target the first human, or the first plain bot.
    targets = [i for i, k in zip(ids, kinds) if k == SeatKind.HUMAN]
    targets += [i for i, k in zip(ids, kinds) if k not in (SeatKind.HUMAN, SeatKind.CHEATER)]
    seats = []
    for pid, kind in zip(ids, kinds):
        name = "You" if kind == SeatKind.HUMAN else f"{kind.value.capitalize()} Bot {pid}"
        victim = None
        if kind == SeatKind.CHEATER:
            if not targets:
                raise typer.BadParameter("A cheater needs a non-cheating seat to target.")
            victim = targets[0]
        seats.append(PlayerSetup(pid, name, kind, victim_id=victim))
    return seats


def _settings(
    variant: Optional[str],
    deck_file: Optional[str],
    seed: Optional[int],
    max_turns: Optional[int],
) -> Settings:
    overrides = {
        "variant": variant.lower() if variant else None,
        "deck_file": deck_file,
        "seed": seed,
        "max_turns": max_turns,
    }
    try:
        settings = Settings.from_env()
        settings = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    configure_logging(settings.log_level)
    return settings


def _deck_specs(settings: Settings) -> Optional[list[CardSpec]]:
    try:
        return settings.deck_specs()
    except DeckSpecError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def play(
    seats: str = typer.Option(
        "human,random,aggressive,cheater",
        "--seats",
        help="Comma-separated seat types: human, random, aggressive, cheater",
    ),
    variant: Optional[str] = typer.Option(None, "--variant", "-v", help="Deck variant or 'random'"),
    deck_file: Optional[str] = typer.Option(None, "--deck-file", "-d", help="Path to a deck file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", help="Stop after this many turns"),
) -> None:
    """Run a single game."""
    from unorules.agents.human_agent import HumanAgent
    from unorules.engine import Game
    from unorules.orchestration.game_runner import GameRunner

    settings = _settings(variant, deck_file, seed, max_turns)
    rng = random.Random(settings.seed)
    setup = _parse_seats(seats)
    agents = {s.id: HumanAgent(name=s.name) for s in setup if s.is_human}

    game = Game(setup, deck_specs=_deck_specs(settings), rng=rng, variant=settings.variant)
    runner = GameRunner(game, agents=agents, max_turns=settings.max_turns)
    result = runner.run()
    for line in result.history[-10:]:
        typer.echo(f"> {line}")
    winner = game.player(result.winner).name if result.winner is not None else "None (turn cap reached)"
    if game.variant is not None:
        typer.echo(f"Variant: {game.variant.value}")
    typer.echo(f"Winner: {winner}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    seats: str = typer.Option(
        "random,aggressive,cheater",
        "--seats",
        help="Comma-separated bot types: random, aggressive, cheater",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    variant: Optional[str] = typer.Option(None, "--variant", "-v", help="Deck variant or 'random'"),
    deck_file: Optional[str] = typer.Option(None, "--deck-file", "-d", help="Path to a deck file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", help="Turn cap per game"),
) -> None:
    """Run a bot-only tournament."""
    from unorules.orchestration.tournament import run_tournament

    settings = _settings(variant, deck_file, seed, max_turns)
    setup = _parse_seats(seats)
    if any(s.is_human for s in setup):
        raise typer.BadParameter("Tournaments are bot-only.")

    wins = run_tournament(
        setup,
        num_games=games,
        deck_specs=_deck_specs(settings),
        seed=settings.seed,
        max_turns=settings.max_turns,
        variant=settings.variant,
    )
    names = {s.id: s.name for s in setup}
    typer.echo("Tournament results:")
    for pid in sorted(names, key=lambda p: -wins.get(p, 0)):
        typer.echo(f"  {names[pid]}: {wins.get(pid, 0)} wins")


@app.command()
def variants() -> None:
    """List the bundled deck variants."""
    for v in Variant:
        typer.echo(f"{v.value:<16}{v.description}")


if __name__ == "__main__":
    app()
