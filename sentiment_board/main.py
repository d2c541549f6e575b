"""
➡️ But : assembler toutes les pièces du puzzle.

Configure les logs, construit le stockage et les services,
charge éventuellement un fichier de seed, puis lance la console.

🔹 Avantages :

Point unique d'exécution : python -m sentiment_board.main (ou la commande sentiment-board).
Un Container déjà construit peut être passé via obj= (CliRunner dans les tests).
"""

import logging

import click

from sentiment_board.cli.console import Console
from sentiment_board.cli.dependencies import build_container
from sentiment_board.core.config import settings
from sentiment_board.core.logging import configure_logging
from sentiment_board.db.seed import load_seed_yaml, seed_all

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file loaded before the console starts (defaults to SEED_PATH)",
)
@click.pass_context
def run(ctx: click.Context, seed_path: str) -> None:
    """Record, tag, search and sort sentiment comments."""
    if ctx.obj is None:
        configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        ctx.obj = build_container(settings)
    container = ctx.obj

    seed_path = seed_path or container.settings.SEED_PATH
    if seed_path:
        try:
            counts = seed_all(container.user_service, container.comment_service, load_seed_yaml(seed_path))
        except (OSError, ValueError) as e:
            raise click.ClickException(f"cannot load seed {seed_path}: {e}") from e
        logger.info("seed loaded from %s: %s", seed_path, counts)

    Console(container).run()


if __name__ == "__main__":
    run()
