"""
AI 对战脚本

让两个难度的 AI 对战多次，统计胜率。支持单场对战和矩阵对战。
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from tictactoe.battle import BattleStats, run_battle
from tictactoe.logging import setup_logging
from tictactoe.types import Difficulty

console = Console()
app = typer.Typer()


@app.callback()
def main() -> None:
    setup_logging()


def _run_with_progress(
    progress: Progress, x: Difficulty, o: Difficulty, num_games: int, seed: int | None
) -> BattleStats:
    task = progress.add_task(f"[cyan]{x.value} vs {o.value}...", total=num_games)
    return run_battle(
        x, o, games=num_games, seed=seed, on_game=lambda _: progress.update(task, advance=1)
    )


def _progress() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    )


@app.command()
def battle(
    ai_x: Difficulty = typer.Option(Difficulty.MEDIUM, "--x", "-x", help="X (first) difficulty"),
    ai_o: Difficulty = typer.Option(Difficulty.HARD, "--o", "-o", help="O difficulty"),
    num_games: int = typer.Option(20, "--games", "-n", help="Number of games"),
    seed: int | None = typer.Option(42, "--seed", "-s", help="Random seed"),
):
    """Run AI vs AI battle"""
    console.print("\n[bold]Tic-Tac-Toe AI Battle[/bold]")
    console.print(f"X: [red]{ai_x.value}[/red] vs O: [blue]{ai_o.value}[/blue]")
    console.print(f"Games: {num_games}, Seed: {seed}\n")

    with _progress() as progress:
        stats = _run_with_progress(progress, ai_x, ai_o, num_games, seed)

    # 显示结果
    table = Table(title="Battle Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("X Wins", f"[red]{stats.x_wins}[/red] ({stats.rate(stats.x_wins):.1f}%)")
    table.add_row("O Wins", f"[blue]{stats.o_wins}[/blue] ({stats.rate(stats.o_wins):.1f}%)")
    table.add_row("Draws", f"{stats.draws} ({stats.rate(stats.draws):.1f}%)")
    table.add_row("Avg Moves", f"{stats.avg_moves:.1f}")

    console.print(table)


@app.command()
def compare(
    num_games: int = typer.Option(20, "--games", "-n", help="Games per pairing"),
    seed: int | None = typer.Option(42, "--seed", "-s", help="Random seed"),
    output: str | None = typer.Option(None, "--output", "-o", help="Save results as JSON"),
):
    """Play every difficulty against every other (row=X, col=O)"""
    levels = list(Difficulty)
    results: dict[str, dict[str, BattleStats]] = {}

    console.print("\n[bold]AI Round-Robin Comparison[/bold]")
    console.print(f"Games per pairing: {num_games}, Total games: {num_games * len(levels) ** 2}\n")

    with _progress() as progress:
        for x in levels:
            results[x.value] = {}
            for o in levels:
                results[x.value][o.value] = _run_with_progress(progress, x, o, num_games, seed)

    console.print("\n[bold]Result Matrix (X wins / O wins / draws)[/bold]")
    table = Table()
    table.add_column("X \\ O", style="cyan")
    for o in levels:
        table.add_column(o.value, justify="center")
    for x in levels:
        row = []
        for o in levels:
            s = results[x.value][o.value]
            row.append(f"[red]{s.x_wins}[/red] / [blue]{s.o_wins}[/blue] / {s.draws}")
        table.add_row(x.value, *row)
    console.print(table)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        data = [s.to_dict() for row in results.values() for s in row.values()]
        output_path.write_text(json.dumps(data, indent=2))
        console.print(f"\n[green]Results saved to: {output_path}[/green]")


if __name__ == "__main__":
    app()
