"""
井字棋命令行

- best: 获取 AI 推荐走法
- evaluate: 评估局面
- list: 列出所有难度和策略
- play: 在终端里和电脑对战

## 使用示例

```bash
# 困难难度下 O 方的走法
python -m tictactoe.cli best --board "XX.OO...." --difficulty hard

# 评估局面
python -m tictactoe.cli evaluate --board "XOXXOOOXX" --json

# 终端对战
python -m tictactoe.cli play --difficulty medium
```
"""

from __future__ import annotations

import json
import random
import sys
import time

import typer
from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table

from tictactoe.ai import AIEngine, select_opponent_move
from tictactoe.board import Board
from tictactoe.game import Game, GameConfig
from tictactoe.logging import setup_logging
from tictactoe.types import DIFFICULTY_CONFIG, Cell, Difficulty

app = typer.Typer(help="Tic-Tac-Toe Engine - 三档难度的井字棋 AI")
console = Console()


@app.callback()
def main() -> None:
    """开启文件日志（目录见 TICTACTOE_LOG_DIR）"""
    setup_logging()


def _parse_mark(mark: str) -> Cell:
    cell = Cell(mark.upper())
    if cell == Cell.EMPTY:
        raise ValueError("mark must be X or O")
    return cell


def render_board(board: Board) -> Table:
    """把棋盘渲染为 rich 表格，空格显示下标"""
    table = Table(show_header=False, show_lines=True, box=None, padding=(0, 1))
    winning = set(board.winning_line() or ())
    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            if cell == Cell.EMPTY:
                cells.append(f"[dim]{index}[/dim]")
            else:
                style = "bold red" if cell == Cell.X else "bold blue"
                if index in winning:
                    style += " reverse"
                cells.append(f"[{style}]{cell.value}[/{style}]")
        table.add_row(*cells)
    return table


@app.command()
def best(
    board: str = typer.Option(..., "--board", "-b", help="棋盘，例如 XX.OO...."),
    difficulty: Difficulty = typer.Option(Difficulty.HARD, "--difficulty", "-d", help="难度"),
    mark: str = typer.Option("O", "--mark", "-m", help="AI 执的标记 (X/O)"),
    seed: int | None = typer.Option(None, "--seed", help="随机种子"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """选择最佳走法"""
    try:
        parsed = Board.from_string(board)
        move = select_opponent_move(
            parsed, difficulty, rng=random.Random(seed), mark=_parse_mark(mark)
        )

        if output_json:
            response = {
                "board": parsed.to_string(),
                "difficulty": difficulty.value,
                "mark": mark.upper(),
                "move": move,
            }
            print(json.dumps(response, indent=2))
        else:
            print(f"Best move (difficulty={difficulty.value}, mark={mark.upper()}): {move}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None


@app.command()
def evaluate(
    board: str = typer.Option(..., "--board", "-b", help="棋盘，例如 XOXXOOOXX"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """评估局面"""
    try:
        parsed = Board.from_string(board)
        data = parsed.to_dict()

        if output_json:
            print(json.dumps(data, indent=2))
        else:
            console.print(render_board(parsed))
            outcome = parsed.evaluate()
            if outcome.winner:
                print(f"Winner: {outcome.winner.value} (line {data['winning_line']})")
            elif outcome.is_draw:
                print("Draw")
            else:
                print(f"Ongoing, available moves: {list(outcome.available_moves)}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None


@app.command(name="list")
def list_levels() -> None:
    """列出所有难度等级和 AI 策略"""
    table = Table(title="Difficulty levels")
    table.add_column("Level")
    table.add_column("Name")
    table.add_column("Strategy")
    table.add_column("Smart move chance", justify="right")
    table.add_column("Description")
    for level, config in DIFFICULTY_CONFIG.items():
        table.add_row(
            level.value,
            config.name,
            config.strategy,
            f"{config.smart_move_chance:.1f}",
            config.description,
        )
    console.print(table)
    print(f"Registered strategies: {', '.join(AIEngine.list_strategies())}")


@app.command()
def play(
    difficulty: Difficulty = typer.Option(Difficulty.MEDIUM, "--difficulty", "-d", help="难度"),
    seed: int | None = typer.Option(None, "--seed", help="随机种子"),
    delay: bool = typer.Option(True, "--delay/--no-delay", help="模拟电脑思考时间"),
) -> None:
    """在终端里和电脑对战（你执 X 先手）"""
    game = Game(config=GameConfig(difficulty=difficulty, seed=seed))

    while True:
        while not game.is_game_over:
            console.print(render_board(game.board))
            if game.is_ai_turn():
                with console.status(game.status_message(thinking=True)):
                    if delay:
                        time.sleep(game.thinking_delay())
                    move = game.play_ai_move()
                console.print(f"Computer plays [bold blue]{move}[/bold blue]")
                continue

            choices = [str(m) for m in game.board.available_moves()]
            index = IntPrompt.ask(game.status_message(), choices=choices)
            game.make_move(index)

        console.print(render_board(game.board))
        console.print(f"[bold]{game.status_message()}[/bold]")
        score = game.score
        console.print(
            f"Score - You: {score.player_wins}  Computer: {score.computer_wins}  "
            f"Draws: {score.draws}"
        )
        if not typer.confirm("Play again?", default=True):
            break
        game.new_game()


if __name__ == "__main__":
    app()
