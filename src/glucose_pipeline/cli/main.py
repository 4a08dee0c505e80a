"""Main CLI entry point for glucose-pipeline.

Provides command group with global options and subcommands for pipeline operations.
"""

import logging
from pathlib import Path

import click

from glucose_pipeline import __version__
from glucose_pipeline.config.loader import load_config_with_overrides
from glucose_pipeline.cli.motifs_cmd import motifs
from glucose_pipeline.cli.score_cmd import score


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@click.group()
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Path to pipeline configuration YAML file (default: built-in settings)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging (DEBUG level)'
)
@click.pass_context
def cli(ctx, config, verbose):
    """Glucose-pipeline: rank Arabidopsis genes by promoter propensity for glucose response.

    Scores the lowercase promoter region of each gene against known
    transcription factor binding site motifs and exports the top candidates.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Verbose logging enabled")


@cli.command()
@click.pass_context
def info(ctx):
    """Display pipeline information and configuration summary."""
    config_path = ctx.obj['config_path']

    click.echo(f"Glucose Pipeline v{__version__}")
    click.echo(f"Config: {config_path if config_path else '(defaults)'}")
    click.echo()

    try:
        config = load_config_with_overrides(config_path, {})

        config_hash = config.config_hash()
        click.echo(f"Config Hash: {config_hash[:16]}...")
        click.echo()

        click.echo(click.style("Paths:", bold=True))
        click.echo(f"  Input:  {config.input_path}")
        click.echo(f"  Output: {config.output_path}")
        click.echo()

        click.echo(click.style("Ranking:", bold=True))
        click.echo(f"  Top N: {config.ranking.top_n}")
        click.echo(f"  Display top gene: {config.display_top_gene}")
        click.echo(f"  Write provenance: {config.write_provenance}")

    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)


# Register commands
cli.add_command(score)
cli.add_command(motifs)


if __name__ == '__main__':
    cli()
