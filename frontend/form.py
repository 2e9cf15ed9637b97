"""State and submit logic behind the prediction form.

Kept free of Streamlit so the view only reads ``FormState`` and calls
``FormController.submit_prediction``.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from frontend import client, messages
from frontend.config import settings
from frontend.errors import PredictionError
from frontend.schemas import STUDENT_FIELDS, PredictResponseItem, StudentInput

logger = logging.getLogger(__name__)

FIELDS = STUDENT_FIELDS


def parse_decimal(text: str) -> Optional[float]:
    """Parse a form value, accepting a comma as decimal separator.

    Returns None for empty, non numeric or non finite input.
    """
    normalized = text.replace(",", ".").strip()
    if not normalized or "_" in normalized:
        return None
    try:
        value = float(normalized)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass
class FormState:
    absences: str = ""
    average_grade: str = ""
    work_hours: str = ""
    age: str = ""

    result_message: str = ""
    risk_score: Optional[float] = None
    model_version: Optional[str] = None
    in_flight: bool = False

    closed: bool = False

    def __setattr__(self, name, value):
        # Writes after teardown come from a submission that outlived its view
        if getattr(self, "closed", False):
            return
        super().__setattr__(name, value)

    @property
    def show_result(self) -> bool:
        return bool(self.result_message) or self.risk_score is not None

    @property
    def risk_percentage(self) -> Optional[str]:
        if self.risk_score is None:
            return None
        return messages.format_percentage(self.risk_score)

    def clear_result(self):
        self.result_message = ""
        self.risk_score = None
        self.model_version = None


class FormController:
    def __init__(
        self,
        state: Optional[FormState] = None,
        predictor: Optional[Callable[[StudentInput], PredictResponseItem]] = None,
        locale: Optional[str] = None,
    ):
        self.state = state if state is not None else FormState()
        self.predictor = predictor or client.predict
        self.locale = locale or settings.locale

    def parse_inputs(self) -> Optional[StudentInput]:
        values = {}
        for name in FIELDS:
            value = parse_decimal(getattr(self.state, name))
            if value is None:
                return None
            values[name] = value
        return StudentInput(**values)

    def submit_prediction(self) -> None:
        state = self.state
        state.clear_result()

        record = self.parse_inputs()
        if record is None:
            state.result_message = messages.text("invalid_input", self.locale)
            return

        state.in_flight = True
        try:
            item = self.predictor(record)
        except PredictionError as e:
            logger.info("Prediction failed: %s", e)
            state.result_message = messages.error_message(e, self.locale)
        else:
            state.risk_score = item.risk_score
            state.model_version = item.model_version
            state.result_message = messages.risk_label(item.risk_score, self.locale)
        finally:
            state.in_flight = False

    def close(self) -> None:
        """Tear down the form session; later updates are dropped."""
        self.state.closed = True
