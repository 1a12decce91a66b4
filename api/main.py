# api/main.py
"""
FastAPI backend - exposes the arrow_fem analysis as a REST API.
"""

import io
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from arrow_fem import AnalysisParams, InvalidParameter, SingularSystem, analyze
from arrow_fem.post import modes_table, nodal_displacements

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Arrow FEM API",
    description="Arrow shaft natural frequency estimator",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class ArrowParams(BaseModel):
    """Input parameters for one arrow analysis."""
    length_in: float = Field(..., gt=0.0, description="Shaft length (in)")
    spine: float = Field(..., gt=0.0, description="Static spine")
    shaft_mass_g: float = Field(12.0, ge=0.0, description="Bare shaft mass (g)")
    n_elements: int = Field(20, ge=1, le=200, description="Beam elements")
    tip_grains: float = Field(0.0, ge=0.0, description="Tip / point weight (gr)")
    nock_grains: float = Field(0.0, ge=0.0, description="Nock weight (gr)")
    fletching_grains: float = Field(0.0, ge=0.0, description="Fletching weight (gr)")
    fletching_pos_in: float = Field(0.0, description="Fletching position from nock (in)")
    velocity: Optional[float] = Field(None, ge=0.0, description="Exit velocity (m/s)")
    power_stroke: Optional[float] = Field(None, ge=0.0, description="Power stroke (m)")
    max_modes: int = Field(6, ge=1, le=50, description="Modes to return")

    def to_analysis_params(self) -> AnalysisParams:
        return AnalysisParams(**self.model_dump())


class ModeData(BaseModel):
    """One natural mode."""
    index: int
    omega2: float
    omega: float
    frequency: float
    w: List[float]
    theta: List[float]


class AnalysisResponse(BaseModel):
    """Complete analysis result."""
    ei: float
    total_mass: float
    n_free_dofs: int
    axial_factor: float
    max_axial_force: float
    warnings: List[str]
    modes: List[ModeData]


# =============================================================================
# Analysis
# =============================================================================

def run_analysis(params: ArrowParams):
    """analyze() with domain errors mapped to HTTP 422."""
    try:
        return analyze(params.to_analysis_params())
    except (InvalidParameter, SingularSystem) as e:
        logger.info("Rejected analysis request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


def to_response(result) -> AnalysisResponse:
    modes = []
    for mode in result.modes:
        w, theta = nodal_displacements(mode.shape)
        modes.append(ModeData(
            index=mode.index,
            omega2=mode.omega2,
            omega=mode.omega,
            frequency=mode.frequency,
            w=w.tolist(),
            theta=theta.tolist(),
        ))

    summary = result.to_dict()
    return AnalysisResponse(
        ei=result.ei,
        total_mass=summary['total_mass'],
        n_free_dofs=summary['n_free_dofs'],
        axial_factor=summary['axial_factor'],
        max_axial_force=summary['max_axial_force'],
        warnings=summary['warnings'],
        modes=modes,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Arrow FEM API"}


@app.post("/api/analyze", response_model=AnalysisResponse)
async def analyze_arrow(params: ArrowParams):
    """Estimate EI and the lowest natural modes of an arrow."""
    return to_response(run_analysis(params))


@app.post("/api/export/csv")
async def export_csv(params: ArrowParams):
    """Export the mode table as CSV."""
    result = run_analysis(params)

    output = io.StringIO()
    modes_table(result).to_csv(output, index=False)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=arrow_modes.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    from arrow_fem.logging_config import setup_logging

    setup_logging(logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
