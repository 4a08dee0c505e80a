"""Pydantic models for pipeline configuration."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel, Field


class RankingConfig(BaseModel):
    """Selection of the top candidates after scoring."""

    top_n: int = Field(
        default=20,
        ge=0,
        description="Number of highest-propensity genes to export",
    )


class PipelineConfig(BaseModel):
    """Main pipeline configuration."""

    input_path: Path = Field(
        default=Path("arabidopsis.csv"),
        description="CSV file of promoter sequences to score",
    )
    output_path: Path = Field(
        default=Path("top20.csv"),
        description="CSV file receiving the top ranked genes",
    )
    ranking: RankingConfig = Field(
        default_factory=RankingConfig,
        description="Top-N selection settings",
    )
    display_top_gene: bool = Field(
        default=True,
        description="Print the binding site breakdown of the best gene",
    )
    write_provenance: bool = Field(
        default=True,
        description="Write a provenance sidecar next to the output file",
    )

    def config_hash(self) -> str:
        """
        Compute SHA-256 hash of the configuration.

        Returns a deterministic hash based on all config values,
        useful for tracking which settings produced an output file.
        """
        config_dict = self.model_dump(mode="python")
        # Path objects are serialized through default=str
        config_json = json.dumps(
            config_dict,
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(config_json.encode()).hexdigest()
