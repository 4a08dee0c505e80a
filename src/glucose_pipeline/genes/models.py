"""Data model for a gene and its glucose response propensity."""

from pydantic import BaseModel, ConfigDict, Field


class GeneRecord(BaseModel):
    """A gene identifier, its sequence and computed propensity.

    The lowercase part of the sequence is the upstream promoter region.
    Comparison operators look at the propensity only, so records can be
    ordered and tested for equal scores regardless of identifier.
    """

    model_config = ConfigDict(validate_assignment=True)

    gene_id: str = Field(description="Gene identifier (e.g. AT1G01010)")
    sequence: str = Field(
        description="Mixed-case nucleotide sequence, lowercase = promoter region"
    )
    propensity: float = Field(
        default=0.0,
        description="Glucose response propensity, 0.0 until scored",
    )

    def __lt__(self, other: "GeneRecord") -> bool:
        return self.propensity < other.propensity

    def __le__(self, other: "GeneRecord") -> bool:
        return self.propensity <= other.propensity

    def __gt__(self, other: "GeneRecord") -> bool:
        return self.propensity > other.propensity

    def __ge__(self, other: "GeneRecord") -> bool:
        return self.propensity >= other.propensity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneRecord):
            return NotImplemented
        return self.propensity == other.propensity

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, GeneRecord):
            return NotImplemented
        return self.propensity != other.propensity
