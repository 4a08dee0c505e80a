"""Score command: compute propensities, rank genes and export the top candidates.

Pipeline steps:
- Load gene records from the input CSV
- Score each promoter region against the binding site table
- Rank by propensity and keep the top N
- Write the top N to the output CSV (plus provenance sidecar)
- Display the binding site breakdown of the best gene
"""

import logging
import sys
from pathlib import Path

import click

from glucose_pipeline.config.loader import load_config_with_overrides
from glucose_pipeline.genes import load_genes, write_genes
from glucose_pipeline.output import format_gene_report, select_top
from glucose_pipeline.persistence import ProvenanceTracker
from glucose_pipeline.scoring import binding_site_contributions, score_genes

logger = logging.getLogger(__name__)


@click.command('score')
@click.option(
    '--input', 'input_path',
    type=click.Path(path_type=Path),
    default=None,
    help='Gene CSV to score (default: input_path from config)'
)
@click.option(
    '--output', 'output_path',
    type=click.Path(path_type=Path),
    default=None,
    help='Destination CSV for the top genes (default: output_path from config)'
)
@click.option(
    '--top-n',
    type=int,
    default=None,
    help='Number of genes to export (default: ranking.top_n from config)'
)
@click.option(
    '--no-display',
    is_flag=True,
    help='Do not print the binding site breakdown of the best gene'
)
@click.pass_context
def score(ctx, input_path, output_path, top_n, no_display):
    """Compute glucose response propensities and export the top genes.

    Examples:

        # Score with config defaults (arabidopsis.csv -> top20.csv)
        glucose-pipeline score

        # Custom files and top 50
        glucose-pipeline score --input genes.csv --output top50.csv --top-n 50
    """
    config_path = ctx.obj['config_path']

    click.echo(click.style("=== Glucose Response Propensity Scoring ===", bold=True))
    click.echo()

    # Load config
    try:
        config = load_config_with_overrides(config_path, {
            'input_path': input_path,
            'output_path': output_path,
            'ranking.top_n': top_n,
            'display_top_gene': False if no_display else None,
        })
    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        sys.exit(1)

    provenance = ProvenanceTracker(config)

    # Step 1: Load genes
    click.echo(click.style("Step 1: Loading genes...", bold=True))
    try:
        genes = load_genes(config.input_path)
    except Exception as e:
        click.echo(click.style(f"  Error loading genes: {e}", fg='red'), err=True)
        logger.exception("Failed to load genes")
        sys.exit(1)

    click.echo(click.style(f"  Loaded {len(genes)} genes from {config.input_path}", fg='green'))
    click.echo()
    provenance.record_step('load_genes', {
        'input_path': str(config.input_path),
        'gene_count': len(genes),
    })

    # Step 2: Score
    click.echo(click.style("Step 2: Computing propensities...", bold=True))
    score_genes(genes)
    if genes:
        mean_propensity = sum(g.propensity for g in genes) / len(genes)
        click.echo(click.style(
            f"  Scored {len(genes)} genes (mean propensity: {mean_propensity:.4f})",
            fg='green'
        ))
    else:
        click.echo(click.style("  No genes to score", fg='yellow'))
    click.echo()
    provenance.record_step('score_genes', {'gene_count': len(genes)})

    # Step 3: Rank and select
    top_genes = select_top(genes, config.ranking.top_n)
    click.echo(click.style(
        f"Step 3: Selected top {len(top_genes)} of {len(genes)} genes",
        bold=True
    ))
    click.echo()
    provenance.record_step('select_top', {
        'requested': config.ranking.top_n,
        'selected': len(top_genes),
    })

    # Step 4: Write output
    click.echo(click.style("Step 4: Writing top genes...", bold=True))
    try:
        written = write_genes(top_genes, config.output_path)
        click.echo(click.style(f"  Saved to {written}", fg='green'))
        provenance.record_step('write_genes', {'output_path': str(written)})
        if config.write_provenance:
            sidecar = provenance.save_sidecar(written)
            click.echo(f"  Provenance: {sidecar}")
    except Exception as e:
        click.echo(click.style(f"  Error writing output: {e}", fg='red'), err=True)
        logger.exception("Failed to write top genes")
        sys.exit(1)

    click.echo()

    # Display the best candidate
    if config.display_top_gene and top_genes:
        best = top_genes[0]
        click.echo(format_gene_report(best, binding_site_contributions(best.sequence)))
        click.echo()

    click.echo(click.style("Scoring complete", fg='green', bold=True))
