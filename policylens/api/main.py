import logging
import os
import time
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from policylens.adapters.text_input import PolicyInputError
from policylens.audit.hash_utils import compute_report_hash
from policylens.audit.version_registry import current_engine_version
from policylens.orchestrator.pipeline import analyze_policy
from policylens.rules.catalog import CATALOG_VERSION
from policylens.scoring.weights import WeightingPolicy
from policylens.telemetry import (
    emit_analysis_telemetry,
    emit_exception_telemetry,
    init_telemetry,
)

load_dotenv()

# --- 1. SETUP AUDIT LOGGING ---
logging.basicConfig(
    filename=os.getenv("POLICYLENS_AUDIT_LOG", "audit.log"),
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")

tags_metadata = [
    {
        "name": "Analysis",
        "description": "Evaluates privacy policy text against the GDPR disclosure catalog.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="PolicyLens Compliance Engine",
    description="""
    **Privacy policy compliance checks** against GDPR disclosure requirements.

    * **Rule Catalog:** keyword and heuristic presence checks.
    * **Score:** 0-100, priority- or risk-weighted.
    * **Fine Exposure:** estimated EUR range for unmet requirements.

    Lexical detection only. Results are advisory, not legal advice.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()


# --- 2. MIDDLEWARE: AUDIT TRAIL ---
@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class AnalyzeRequest(BaseModel):
    text: Optional[str] = None
    weighting_policy: Optional[WeightingPolicy] = None


class ComplianceResponse(BaseModel):
    report_type: str
    timestamp: str
    weighting_policy: str
    score: int
    score_band: str
    checks: List[Dict[str, Any]]
    financial_risk: Dict[str, Any]
    engine_version: str
    catalog_version: str
    report_hash: str


# --- ENDPOINTS ---

@app.post("/analyze", response_model=ComplianceResponse, tags=["Analysis"])
def analyze(request: AnalyzeRequest):
    """
    Submit privacy policy text for compliance analysis.
    """
    start_time = time.perf_counter()

    try:
        report = analyze_policy(request.text, request.weighting_policy)
    except PolicyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        emit_exception_telemetry(e)
        audit_logger.error(f"ENGINE_ERROR: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Policy analysis failed")

    latency_ms = int((time.perf_counter() - start_time) * 1000)
    emit_analysis_telemetry(
        analysis_latency_ms=latency_ms,
        score=report.score,
        weighting_policy=report.weighting_policy,
        violation_count=len(report.financial_risk.violations),
    )

    payload = report.to_dict()
    payload["report_hash"] = compute_report_hash(payload)
    return payload


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "engine_version": current_engine_version(),
        "catalog_version": CATALOG_VERSION,
        "weighting_policies": [p.value for p in WeightingPolicy],
    }
