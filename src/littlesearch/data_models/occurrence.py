from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """How many times one keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: int = Field(default=1, ge=1)

    def bumped(self) -> "Occurrence":
        return self.model_copy(update={"frequency": self.frequency + 1})
