from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException
from .config import Settings, setup_logging
from .models import ValidationReport, HealthResponse
from .validator import ResourceValidator

settings = Settings()
setup_logging(settings.log_level)

app = FastAPI(
    title="propcheck",
    description="Duplicate-key and charset-ambiguity checks for .properties resources",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/validate", response_model=ValidationReport)
async def validate_properties(file: UploadFile = File(...), check_encoding: Optional[bool] = None):
    if not file.filename.lower().endswith("." + settings.extension):
        raise HTTPException(status_code=422, detail=f"Only .{settings.extension} files are supported")

    if check_encoding is None:
        check_encoding = settings.encoding_check_enabled()

    raw = await file.read()
    return ResourceValidator(check_encoding).report(raw, file.filename)
