from pydantic import BaseModel, field_validator

DEFAULT_VALUE = 100


class Question(BaseModel):
    id: str
    category: str
    prompt: str
    answer: str
    value: int = DEFAULT_VALUE

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        # jService entrega ids numéricos
        return str(v)

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, v):
        return DEFAULT_VALUE if v is None else v
