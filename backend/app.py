import os

import mlflow.models
import mlflow.sklearn
import numpy as np
from fastapi import FastAPI, HTTPException

from frontend.schemas import STUDENT_FIELDS, PredictRequest, PredictResponse, PredictResponseItem


# Paths
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
MODEL_PATH = os.path.join(BASE_DIR, "model")

# Column order the model was trained with
FEATURES = STUDENT_FIELDS


app = FastAPI(title="Dropout prediction service", version="0.1.0")

model = None
model_version = "local"


@app.on_event("startup")
def load_model() -> None:
    if not os.path.exists(MODEL_PATH):
        raise RuntimeError(
            f"Model not found at {MODEL_PATH}. Save an MLflow sklearn model there first."
        )
    # Load sklearn-flavor model from MLflow directory
    global model, model_version
    model = mlflow.sklearn.load_model(MODEL_PATH)
    model_version = mlflow.models.Model.load(MODEL_PATH).run_id or "local"


@app.post("/predict", response_model=PredictResponse, response_model_by_alias=True)
def predict(req: PredictRequest) -> PredictResponse:
    if not req.students:
        return PredictResponse(results=[])

    # Shape (n_students, 4)
    x = np.array(
        [[getattr(s, f) for f in FEATURES] for s in req.students], dtype=float
    )

    try:
        proba = model.predict_proba(x)[:, 1]
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Prediction failed: {e}")

    return PredictResponse(
        results=[
            PredictResponseItem(risk_score=float(p), model_version=model_version)
            for p in proba
        ]
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
