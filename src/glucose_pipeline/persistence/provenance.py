"""Provenance sidecar for exported candidate lists."""

import json
from datetime import datetime, timezone
from pathlib import Path

from glucose_pipeline.scoring.binding_sites import BINDING_SITES


class ProvenanceTracker:
    """
    Collects the steps of one scoring run and writes them next to its output.

    The sidecar records the pipeline version, the config hash and the
    binding site table, so a top-N file can be traced back to the settings
    and weights that produced it.
    """

    def __init__(self, config: "PipelineConfig", pipeline_version: str | None = None):
        if pipeline_version is None:
            from glucose_pipeline import __version__
            pipeline_version = __version__

        self.pipeline_version = pipeline_version
        self.config_hash = config.config_hash()
        self.started_at = datetime.now(timezone.utc)
        self.steps: list[dict] = []

    def record_step(self, step_name: str, details: dict | None = None) -> None:
        step = {
            "step_name": step_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if details:
            step["details"] = details
        self.steps.append(step)

    def create_metadata(self) -> dict:
        return {
            "pipeline_version": self.pipeline_version,
            "config_hash": self.config_hash,
            "binding_sites": {site.motif: site.weight for site in BINDING_SITES},
            "started_at": self.started_at.isoformat(),
            "processing_steps": self.steps,
        }

    def save_sidecar(self, output_path: Path) -> Path:
        """
        Write the run metadata as {stem}.provenance.json beside output_path.

        Returns:
            Path of the sidecar file
        """
        sidecar_path = Path(output_path).with_suffix(".provenance.json")
        sidecar_path.parent.mkdir(parents=True, exist_ok=True)

        with open(sidecar_path, "w") as f:
            json.dump(self.create_metadata(), f, indent=2)

        return sidecar_path
