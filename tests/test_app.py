"""Smoke tests for the Streamlit view."""

from streamlit.testing.v1 import AppTest

from frontend import client
from frontend.schemas import PredictResponseItem

APP = "../frontend/app.py"


def fill_form(at):
    for field, value in zip(at.text_input, ["3", "7,5", "20", "19"]):
        field.input(value)


def test_renders_empty_form():
    at = AppTest.from_file(APP).run()

    assert not at.exception
    assert at.title[0].value == "Dropout prediction"
    assert len(at.text_input) == 4
    assert len(at.header) == 1


def test_empty_submit_shows_validation_notice():
    at = AppTest.from_file(APP).run()

    at.button[0].click().run()

    assert not at.exception
    assert "Please fill all fields correctly." in [m.value for m in at.markdown]


def test_submit_shows_result(monkeypatch):
    monkeypatch.setattr(
        client, "predict",
        lambda record: PredictResponseItem(risk_score=0.73, model_version="rf-1"),
    )
    at = AppTest.from_file(APP).run()
    fill_form(at)

    at.button[0].click().run()

    assert not at.exception
    values = [m.value for m in at.markdown]
    assert "### :red[Risk: 73%]" in values
    assert "Likely dropout" in values
    assert at.caption[0].value == "Model: rf-1"
    assert at.text_input[1].value == "7,5"


def test_submit_button_locked_while_request_runs(monkeypatch):
    def hung_up(record):
        # Aborts the script mid-request, leaving the page as drawn at that moment
        raise RuntimeError("service hung up")

    monkeypatch.setattr(client, "predict", hung_up)
    at = AppTest.from_file(APP).run()
    fill_form(at)

    at.button[0].click().run()

    assert at.exception
    assert at.button[0].disabled


def test_submit_button_enabled_again_after_request(monkeypatch):
    calls = []

    def predictor(record):
        calls.append(record)
        return PredictResponseItem(risk_score=0.2, model_version="rf-1")

    monkeypatch.setattr(client, "predict", predictor)
    at = AppTest.from_file(APP).run()
    fill_form(at)

    at.button[0].click().run()

    assert not at.exception
    assert not at.button[0].disabled
    assert "No significant risk" in [m.value for m in at.markdown]

    at.button[0].click().run()

    assert len(calls) == 2
