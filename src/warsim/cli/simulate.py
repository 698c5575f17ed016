"""CLI command for simulating War games."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from warsim.analysis.stats import game_stats, simulate_games, summarize_results
from warsim.history.serialization import save_history
from warsim.simulation.engine import WarConfig, play_war_game
from warsim.simulation.errors import ConfigurationError
from warsim.simulation.shuffles import ShuffleStrategy
from warsim.simulation.war import MAX_ROUNDS


@click.command()
@click.option("-p", "--players", type=int, default=2, help="Number of players")
@click.option(
    "--shuffle",
    type=click.Choice([s.value for s in ShuffleStrategy]),
    default=ShuffleStrategy.NONE.value,
    help="Shuffle applied to each pot before the winner takes it",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--max-rounds", type=int, default=MAX_ROUNDS, help="Round limit before a draw")
@click.option("-n", "--games", type=int, default=1, help="Number of games to simulate")
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the game history (one game) or batch summary (several) as JSON",
)
@click.option("--no-deck-shuffle", is_flag=True, help="Deal the deck in its initial order")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    players: int,
    shuffle: str,
    seed: int | None,
    max_rounds: int,
    games: int,
    output: str | None,
    no_deck_shuffle: bool,
    verbose: bool,
):
    """Simulate games of War and report how they ended."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if games < 1:
        raise click.BadParameter("must be at least 1", param_hint="--games")

    try:
        config = WarConfig(
            player_count=players,
            win_shuffle=shuffle,
            max_rounds=max_rounds,
            seed=seed,
            shuffle_deck=not no_deck_shuffle,
        )
        if games == 1:
            result = play_war_game(config)
        else:
            results = simulate_games(config, games)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if games == 1:
        stats = game_stats(result.rounds, result.winner)
        outcome = "draw" if result.is_draw else f"player {result.winner} wins"
        click.echo(f"Seed {result.seed}: {outcome} after {stats.round_count} rounds")
        click.echo(f"Rounds with a war: {stats.war_count} (longest: {stats.longest_war} wars)")
        for position, won in sorted(stats.wins.items()):
            click.echo(f"  Player {position}: {won} rounds won")
        if output:
            save_history(result.rounds, Path(output))
            click.echo(f"History saved to {output}")
        return

    summary = summarize_results(results)
    click.echo(f"Games: {summary.games} (seed {config.seed})")
    click.echo(
        f"Rounds: mean {summary.mean_rounds:.1f}, median {summary.median_rounds:.1f}, "
        f"min {summary.min_rounds}, max {summary.max_rounds}"
    )
    click.echo(f"Draws: {summary.draws} ({summary.draw_rate:.1%})")
    for position, won in sorted(summary.wins.items()):
        click.echo(f"  Player {position}: {won} games won")
    if output:
        Path(output).write_text(json.dumps(summary.to_dict(), indent=2), encoding="utf-8")
        click.echo(f"Summary saved to {output}")


if __name__ == "__main__":
    main()
