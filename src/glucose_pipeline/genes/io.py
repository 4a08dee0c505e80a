"""Load and save gene records as headerless quoted CSV.

One record per line, fields in the order identifier, sequence, propensity:

    "AT1G01010","ACGTaccgacGGG",1.6152

String fields are double-quoted with embedded quotes doubled; the
propensity is written unquoted using the shortest representation that
parses back to the same float.
"""

from pathlib import Path

import polars as pl
import structlog

from glucose_pipeline.genes.models import GeneRecord

logger = structlog.get_logger(__name__)

GENE_SCHEMA = {
    "gene_id": pl.String,
    "sequence": pl.String,
    "propensity": pl.Float64,
}

# Fields are read as text first; the propensity is parsed once quoting is resolved
_RAW_SCHEMA = {name: pl.String for name in GENE_SCHEMA}

# A quoted field preceded by whitespace is not unquoted by the CSV reader
_SPACED_QUOTED = r'^\s+"(.*)"\s*$'


def _unquote_spaced(column: str) -> pl.Expr:
    inner = pl.col(column).str.extract(_SPACED_QUOTED, 1)
    return (
        pl.when(inner.is_not_null())
        .then(inner.str.replace_all('""', '"', literal=True))
        .otherwise(pl.col(column))
        .alias(column)
    )


def load_genes(path: Path | str) -> list[GeneRecord]:
    """Read gene records from a quoted CSV file.

    Blank lines are skipped and whitespace before a quoted field is
    ignored, so '"AT1", "acgt", 0' reads the same as '"AT1","acgt",0'.

    Args:
        path: CSV file with one "id","sequence",propensity record per line

    Returns:
        List of GeneRecord in file order (empty for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a record is missing a field or its propensity is not a number
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Gene file not found: {path}")

    try:
        raw = pl.read_csv(
            path,
            has_header=False,
            schema=_RAW_SCHEMA,
            quote_char='"',
            raise_if_empty=False,
        )
    except pl.exceptions.SchemaError as e:
        # Column count is taken from the first line
        raise ValueError(f"Malformed gene record 1 in {path}: {e}") from e

    if raw.is_empty():
        logger.info("genes_loaded", path=str(path), gene_count=0)
        return []

    df = (
        raw.with_row_index("record", offset=1)
        .filter(~pl.all_horizontal(pl.col(list(_RAW_SCHEMA)).is_null()))
        .with_columns([_unquote_spaced(name) for name in _RAW_SCHEMA])
        .with_columns(
            pl.col("propensity")
            .str.strip_chars()
            .cast(pl.Float64, strict=False)
            .alias("propensity_value")
        )
    )

    genes = []
    for row in df.iter_rows(named=True):
        missing = [name for name in _RAW_SCHEMA if row[name] is None]
        if missing:
            raise ValueError(
                f"Malformed gene record {row['record']} in {path}: "
                f"missing {', '.join(missing)}"
            )
        if row["propensity_value"] is None:
            raise ValueError(
                f"Malformed gene record {row['record']} in {path}: "
                f"invalid propensity {row['propensity']!r}"
            )
        genes.append(GeneRecord(
            gene_id=row["gene_id"],
            sequence=row["sequence"],
            propensity=row["propensity_value"],
        ))

    logger.info("genes_loaded", path=str(path), gene_count=len(genes))

    return genes


def write_genes(genes: list[GeneRecord], path: Path | str) -> Path:
    """Write gene records to a quoted CSV file.

    Args:
        genes: Records to write, in output order
        path: Destination file (parent directories are created)

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pl.DataFrame(
        {
            "gene_id": [g.gene_id for g in genes],
            "sequence": [g.sequence for g in genes],
            "propensity": [g.propensity for g in genes],
        },
        schema=GENE_SCHEMA,
    )

    df.write_csv(path, include_header=False, quote_style="non_numeric")

    logger.info("genes_written", path=str(path), gene_count=df.height)

    return path
