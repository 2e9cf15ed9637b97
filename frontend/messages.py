"""User-facing strings for the prediction form."""

from frontend.errors import (
    BadStatusError,
    DecodingError,
    EmptyResultsError,
    InvalidURLError,
    PredictionError,
    TransportError,
)

RISK_THRESHOLD = 0.5

DEFAULT_LOCALE = "en"

CATALOGS = {
    "en": {
        "title": "Dropout prediction",
        "student_data": "Student data",
        "absences": "Absences",
        "average_grade": "Average grade",
        "work_hours": "Work hours",
        "age": "Age",
        "submit": "Predict dropout",
        "clear": "Clear",
        "loading": "Asking the prediction service...",
        "result": "Result",
        "risk": "Risk: {percentage}",
        "model": "Model: {version}",
        "invalid_input": "Please fill all fields correctly.",
        "likely_dropout": "Likely dropout",
        "no_risk": "No significant risk",
        "error": "Error: {description}",
        "invalid_url": "Invalid URL.",
        "bad_status": "HTTP error {code}.",
        "empty_results": "Empty response from server.",
        "decoding": "Failed to decode: {description}",
    },
    "pt_BR": {
        "title": "Previsão de Evasão",
        "student_data": "Dados do Aluno",
        "absences": "Faltas",
        "average_grade": "Nota Média",
        "work_hours": "Horas de Trabalho",
        "age": "Idade",
        "submit": "Prever Evasão",
        "clear": "Limpar",
        "loading": "Consultando o serviço de previsão...",
        "result": "Resultado",
        "risk": "Risco: {percentage}",
        "model": "Modelo: {version}",
        "invalid_input": "Preencha todos os campos corretamente.",
        "likely_dropout": "Evasão provável",
        "no_risk": "Sem risco relevante",
        "error": "Erro: {description}",
        "invalid_url": "URL inválida.",
        "bad_status": "Erro HTTP {code}.",
        "empty_results": "Resposta vazia do servidor.",
        "decoding": "Falha ao decodificar: {description}",
    },
}


def text(key: str, locale: str = DEFAULT_LOCALE, **kwargs) -> str:
    catalog = CATALOGS.get(locale, CATALOGS[DEFAULT_LOCALE])
    return catalog[key].format(**kwargs)


def is_high_risk(score: float) -> bool:
    return score >= RISK_THRESHOLD


def risk_label(score: float, locale: str = DEFAULT_LOCALE) -> str:
    return text("likely_dropout" if is_high_risk(score) else "no_risk", locale)


def format_percentage(score: float) -> str:
    # Truncates: 0.738 shows as 73%
    return f"{int(score * 100)}%"


def describe_error(error: PredictionError, locale: str = DEFAULT_LOCALE) -> str:
    """Human readable description of a prediction failure."""
    if isinstance(error, InvalidURLError):
        return text("invalid_url", locale)
    if isinstance(error, BadStatusError):
        return text("bad_status", locale, code=error.status_code)
    if isinstance(error, EmptyResultsError):
        return text("empty_results", locale)
    if isinstance(error, DecodingError):
        return text("decoding", locale, description=error.inner)
    if isinstance(error, TransportError):
        return str(error.inner)
    return str(error)


def error_message(error: PredictionError, locale: str = DEFAULT_LOCALE) -> str:
    return text("error", locale, description=describe_error(error, locale))
