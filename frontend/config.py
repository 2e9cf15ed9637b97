import logging

from pydantic import BaseModel


class Settings(BaseModel):
    base_url: str = "http://127.0.0.1:8000"
    predict_path: str = "/predict"
    locale: str = "en"
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level=None) -> None:
    # no-op once the root logger has handlers; Streamlit reruns this on every interaction
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
