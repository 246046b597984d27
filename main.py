from fastapi import FastAPI, Header, HTTPException, Depends
from config import Config
from models import AnalyzeRequest, AnalyzeResponse, ProfileInfo
from profiles import get_profile
from spam_detector import SpamDetector
import logging
import uvicorn

# Setup Logger
logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger("spam-filter-api")

app = FastAPI(title="Spam Filter API")

# Initialize engine once; it holds no per-call state
detector = SpamDetector(get_profile(Config.PROFILE))
logger.info(f"Classifier profile: {detector.config.name} (threshold {detector.config.threshold})")


async def verify_api_key(x_api_key: str = Header(None)):
    if Config.API_KEY and x_api_key != Config.API_KEY:
        raise HTTPException(status_code=401, detail="Invalid API Key")
    return x_api_key


def probability_band(probability: float) -> str:
    if probability > Config.HIGH_PROBABILITY_BAND:
        return "High spam probability"
    if probability < Config.LOW_PROBABILITY_BAND:
        return "Low spam probability"
    return "Uncertain"


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze_endpoint(request: AnalyzeRequest, api_key: str = Depends(verify_api_key)):
    message = (request.message or "").strip()

    # 1. User-facing input checks (distinct from the engine's own bounds)
    if not message:
        raise HTTPException(status_code=422, detail="Please enter a message to analyze!")
    if len(message) < Config.UI_MIN_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"Message too short. Please enter at least {Config.UI_MIN_LENGTH} characters."
        )
    if len(message) > Config.UI_MAX_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"Message too long. Please limit to {Config.UI_MAX_LENGTH} characters."
        )

    # 2. Classification. Deterministic, so failures are not retried.
    try:
        verdict = detector.normalize_and_score(message)
        if verdict.rejected:
            raise HTTPException(status_code=422, detail=f"Analysis error: {verdict.rejectionReason}")
        explanations = detector.explain(verdict, message)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Classification failed")
        raise HTTPException(status_code=500, detail="An error occurred during analysis.")

    logger.info(
        f"Analyzed '{message[:20]}...': spam={verdict.isSpam} "
        f"p={verdict.spamProbability:.3f} confidence={verdict.confidence:.2f} reasons={explanations}"
    )

    return AnalyzeResponse(
        isSpam=verdict.isSpam,
        spamProbability=verdict.spamProbability,
        confidence=verdict.confidence,
        confidencePercent=round(verdict.confidence * 100),
        probabilityBand=probability_band(verdict.spamProbability),
        explanations=explanations,
        features=verdict.features,
        profile=detector.config.name,
    )


@app.get("/api/profile", response_model=ProfileInfo)
def profile_info():
    config = detector.config
    return ProfileInfo(
        name=config.name,
        threshold=config.threshold,
        minTextLength=config.minTextLength,
        maxTextLength=config.maxTextLength,
        maxTokens=config.maxTokens,
    )


@app.get("/health")
def health_check():
    return {"status": "running", "service": "Spam Filter", "profile": detector.config.name}


if __name__ == "__main__":
    uvicorn.run("main:app", host=Config.HOST, port=Config.PORT, reload=True)
