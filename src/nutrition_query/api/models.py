"""Pydantic models for the analysis API."""

from pydantic import BaseModel, ConfigDict

from nutrition_query.domain.analysis import AnalysisResult, AnalyzedItem


class AnalyzeRequest(BaseModel):
    """Request body for ``POST /analyze``."""

    query: str


class AnalyzedItemModel(BaseModel):
    """One resolved food mention."""

    name: str
    qty: float
    unit: str | None = None
    kcal: int
    protein_g: float
    carbs_g: float
    fat_g: float

    @classmethod
    def from_domain(cls, item: AnalyzedItem) -> "AnalyzedItemModel":
        return cls(
            name=item.name,
            qty=item.qty,
            unit=item.unit.value if item.unit else None,
            kcal=item.nutrients.kcal,
            protein_g=item.nutrients.protein_g,
            carbs_g=item.nutrients.carbs_g,
            fat_g=item.nutrients.fat_g,
        )


class AnalyzeResponse(BaseModel):
    """Totals plus the per-item breakdown, in query order."""

    kcal: int
    protein_g: float
    carbs_g: float
    fat_g: float
    items: list[AnalyzedItemModel]
    source: str

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls(
            kcal=result.totals.kcal,
            protein_g=result.totals.protein_g,
            carbs_g=result.totals.carbs_g,
            fat_g=result.totals.fat_g,
            items=[AnalyzedItemModel.from_domain(item) for item in result.items],
            source=result.source,
        )


class ErrorResponse(BaseModel):
    """Error envelope shared by every non-200 answer."""

    model_config = ConfigDict(extra="allow")

    error: str
    message: str
