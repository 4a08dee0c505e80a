"""Motifs command: list the binding site table used for scoring."""

import click

from glucose_pipeline.scoring import BINDING_SITES


@click.command('motifs')
def motifs():
    """List transcription factor binding site motifs and their weights.

    Ambiguous motifs from the published table appear as their concrete
    expansions (rccgac -> accgac, gccgac).
    """
    click.echo(click.style(f"{'Motif':>10}   Weight", bold=True))
    for site in BINDING_SITES:
        colour = 'green' if site.weight > 0 else 'red'
        click.echo(f"{site.motif:>10}   " + click.style(f"{site.weight:+.4f}", fg=colour))
    click.echo()
    click.echo(f"{len(BINDING_SITES)} binding sites")
