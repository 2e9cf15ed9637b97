from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    # English attribute names, Portuguese wire names
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class StudentInput(WireModel):
    absences: float = Field(alias="faltas")
    average_grade: float = Field(alias="nota_media")
    work_hours: float = Field(alias="horas_trabalho")
    age: float = Field(alias="idade")


class PredictRequest(WireModel):
    # The service accepts a batch; the form always sends a single student
    students: List[StudentInput] = Field(alias="alunos")


class PredictResponseItem(WireModel):
    # JSON NaN/Infinity tokens are not valid scores
    risk_score: float = Field(allow_inf_nan=False)
    model_version: str


class PredictResponse(WireModel):
    results: List[PredictResponseItem]

    @classmethod
    def decode(cls, raw: Union[bytes, str]) -> "PredictResponse":
        """Validate a JSON body, raising pydantic.ValidationError on any mismatch."""
        return cls.model_validate_json(raw)


# Column order shared by the form and the model: faltas, nota_media, horas_trabalho, idade
STUDENT_FIELDS = tuple(StudentInput.model_fields)
