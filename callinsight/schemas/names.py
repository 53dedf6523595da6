"""Prospect-name extraction shapes."""

from pydantic import BaseModel, Field


class NameExtractionOptions(BaseModel):
    prefer_customer_names: bool = True
    include_agent_names: bool = False
    minimum_confidence: float = Field(default=0.6, ge=0, le=1)
    validate_names: bool = True


class NameExtractionResult(BaseModel):
    """One name candidate; the selected one is returned by extraction."""

    full_name: str = ""
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    confidence: float = 0.0
    extraction_method: str = "none"
    is_valid: bool = False

    @classmethod
    def empty(cls) -> "NameExtractionResult":
        return cls()


class ExtractionStats(BaseModel):
    total_candidates: int = 0
    valid_candidates: int = 0
    customer_candidates: int = 0
    best_candidate: NameExtractionResult | None = None
    all_candidates: list[NameExtractionResult] = Field(default_factory=list)
