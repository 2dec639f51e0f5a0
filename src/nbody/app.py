import re
import sys
from typing import Optional

import typer
from loguru import logger

from nbody.backends import cpu
from nbody.config import default_config
from nbody.errors import InvalidArgument
from nbody.frontends import headless

app = typer.Typer(add_completion=False, help='Five body solar system energy benchmark.')

_STEPS_RE = re.compile(r'\+?[0-9]+')


def parse_steps(raw: Optional[str]) -> int:
    if raw is None:
        raise InvalidArgument('missing step count')
    text = raw.strip()
    if not _STEPS_RE.fullmatch(text):
        raise InvalidArgument(f'step count must be a non-negative integer, got {raw!r}')
    return int(text)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


@app.command()
def run(
    steps: Optional[str] = typer.Argument(None, help='Number of integration steps (non-negative integer).'),
    log_level: str = typer.Option('WARNING', help='loguru level for stderr logging.'),
    progress: bool = typer.Option(False, help='Show a progress bar on stderr.'),
    summary: bool = typer.Option(False, help='Print body state tables on stderr.'),
):
    configure_logging(log_level)

    try:
        n = parse_steps(steps)
    except InvalidArgument as exc:
        logger.error(f'Invalid argument: {exc}')
        typer.echo(f'error: {exc}', err=True)
        raise typer.Exit(code=2)

    backend = cpu.Backend(config=default_config())
    frontend = headless.Frontend(backend=backend, progress=progress)

    if summary:
        typer.echo("\nInitial state:", err=True)
        typer.echo(frontend.summary_table().get_string(), err=True)

    typer.echo(f'{backend.energy():.9f}')
    result = frontend.simulate(n)
    typer.echo(f'{result.final_energy:.9f}')

    if summary:
        typer.echo(f"\nState after {n} steps:", err=True)
        typer.echo(frontend.summary_table().get_string(), err=True)


def main():
    app()


if __name__ == '__main__':
    main()
