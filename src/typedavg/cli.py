# connects the terminal session to the exercise logic and prints results in the required format.

from __future__ import annotations
import logging
import sys
from enum import Enum
from typing import Callable, Dict, Optional
import typer
from rich.console import Console
from .config import ConfigError, load_settings
from .service import Platform, VariablesContext, evaluate, format_double, greeting, run_variables
from .terminal import TerminalSession

logger = logging.getLogger(__name__)

# stderr only, stdout belongs to the exercises
console = Console(stderr=True)

# literal operands of the average exercise: int, int8_t, uint32_t
AVERAGE_OPERANDS = (0, 15, 30)

def _finish(session: TerminalSession) -> None:
    # every exercise ends with two blank lines
    session.write_line()
    session.write_line()

def run_greeting(session: TerminalSession, platform: Platform) -> None:
    session.prompt("Enter your name: ")
    name = session.read_token()
    session.write_line(greeting(name))
    _finish(session)

def run_variables_exercise(session: TerminalSession, platform: Platform) -> None:
    session.write_lines(run_variables(VariablesContext(), platform))
    _finish(session)

def run_average(session: TerminalSession, platform: Platform) -> None:
    result = evaluate(*AVERAGE_OPERANDS, platform=platform)
    session.write_line(f"Your code returned: {format_double(result)}")
    _finish(session)

class Exercise(str, Enum):
    greeting = "greeting"
    variables = "variables"
    average = "average"

EXERCISES: Dict[Exercise, Callable[[TerminalSession, Platform], None]] = {
    Exercise.greeting: run_greeting,
    Exercise.variables: run_variables_exercise,
    Exercise.average: run_average,
}

app = typer.Typer(
    name="typedavg",
    help="Introductory terminal exercises with C-style integer promotion",
    add_completion=False,
)

@app.command()
def run(
    exercise: Optional[Exercise] = typer.Argument(None, help="Exercise to run; all of them when omitted"),
) -> None:
    """Run one exercise, or every exercise in order."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(1)

    logging.basicConfig(level=settings.log_level, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    platform = Platform(int_bits=settings.int_bits)
    session = TerminalSession()
    for name in ([exercise] if exercise else list(EXERCISES)):
        logger.info("running exercise %s (int is %d bits)", name.value, platform.int_bits)
        EXERCISES[name](session, platform)

def main() -> None:
    app()

if __name__ == "__main__":
    main()
