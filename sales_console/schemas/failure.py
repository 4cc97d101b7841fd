from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class FetchFailure(BaseModel):
    """Identifier and status code captured from a failed single-record lookup."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    failed_id: str = ""
    failed_status: str = ""

    @property
    def occurred(self) -> bool:
        return bool(self.failed_id or self.failed_status)
