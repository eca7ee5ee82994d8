#!/usr/bin/env python
"""Watch five oracle-driven players play One Night Werewolf.

Usage:
    onenight                          # Play with the OpenAI oracle
    onenight --stub --seed 42         # Reproducible offline game
    onenight --rounds 1 --delay 0.5   # Short game, paced output
    onenight --stub --validate        # Check state invariants after the game
"""

import argparse
import asyncio
import logging
import random

from rich.console import Console
from rich.panel import Panel

from onenight.ai import OpenAIOracle, StubOracle
from onenight.config import settings
from onenight.engine import InMemorySessionStore, StepRunner
from onenight.events import EventFormatter, EventType, GameEventLog
from onenight.exceptions import GameError
from onenight.validation import validate_state

_STYLES = {
    EventType.SETUP: "dim",
    EventType.PHASE_CHANGE: "bold cyan",
    EventType.NIGHT_ACTION: "magenta",
    EventType.VOTE: "yellow",
    EventType.RESOLUTION: "bold red",
}


async def run_game(
    seed: int,
    rounds: int,
    use_stub: bool = False,
    delay: float = 0.0,
    log_file: str | None = None,
    validate: bool = False,
    show_reasoning: bool = False,
) -> GameEventLog:
    """Play one game to the end, printing every event as it happens.

    Args:
        seed: Random seed for the deal (and the stub oracle)
        rounds: Number of discussion rounds
        use_stub: Use the offline stub oracle instead of OpenAI
        delay: Delay in seconds between events
        log_file: YAML file to save the event log to (None to disable)
        validate: Check state invariants once the game is over
        show_reasoning: Print the oracle's rationale under each decision

    Returns:
        The game's event log
    """
    console = Console()

    if use_stub:
        oracle = StubOracle(seed=seed)
    else:
        oracle = OpenAIOracle(
            api_key=settings.openai_api_key or None,
            model=settings.oracle_model,
            temperature=settings.oracle_temperature,
        )

    store = InMemorySessionStore(
        ttl_seconds=settings.session_ttl_seconds,
        completed_ttl_seconds=settings.completed_session_ttl_seconds,
    )
    runner = StepRunner(store, oracle, settings)
    formatter = EventFormatter(show_reasoning=show_reasoning)

    start = await runner.start_game(discussion_rounds=rounds, rng=random.Random(seed))
    event_log = GameEventLog(
        game_id=start.game_id,
        metadata={"seed": seed, "rounds": rounds, "oracle": "stub" if use_stub else settings.oracle_model},
    )
    console.print(f"\n[bold]Game {start.game_id} (seed {seed}, {start.total_steps} steps)[/bold]\n")

    completed = False
    while not completed:
        result = await runner.execute_step(start.game_id)
        event_log.add_event(result.event)
        completed = result.completed

        style = _STYLES.get(result.event.type)
        text = formatter.format(result.event)
        console.print(text, style=style, markup=False, highlight=False)

        if delay > 0 and not completed:
            await asyncio.sleep(delay)

    winners = ", ".join(event_log.get_winners() or []) or "nobody"
    console.print(Panel(f"[bold]Game Over[/bold]\n\nWinners: {winners}", title="Result"))

    if validate:
        session = await runner.get_session(start.game_id)
        violations = validate_state(session.state)
        if violations:
            console.print(f"[red]{len(violations)} violation(s):[/red]")
            for violation in violations:
                console.print(f"  {violation}", markup=False)
        else:
            console.print("[green]All state invariants hold.[/green]")

    if log_file:
        try:
            event_log.save_to_file(log_file)
            console.print(f"Event log saved to {log_file}")
        except OSError as e:
            console.print(f"[red]Failed to save log: {e}[/red]")

    return event_log


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="One Night Werewolf - five AI players, one night, one vote",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible games"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=settings.discussion_rounds,
        help=f"Discussion rounds (default: {settings.discussion_rounds})"
    )
    parser.add_argument(
        "--stub",
        action="store_true",
        help="Use the offline stub oracle instead of OpenAI"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Delay in seconds between events (default: 0)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="game_log.yaml",
        help="File to save game event log (default: game_log.yaml, use '' to disable)"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check state invariants after the game"
    )
    parser.add_argument(
        "--reasoning",
        action="store_true",
        help="Show the oracle's reasoning under each decision"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(name)s: %(message)s",
    )

    if args.seed is None:
        args.seed = random.randint(1, 1000000)

    if args.rounds < 1:
        print("Error: --rounds must be a positive integer")
        return 1

    try:
        asyncio.run(run_game(
            args.seed,
            args.rounds,
            use_stub=args.stub,
            delay=args.delay,
            log_file=args.log_file or None,
            validate=args.validate,
            show_reasoning=args.reasoning,
        ))
    except GameError as e:
        print(f"Error: {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
