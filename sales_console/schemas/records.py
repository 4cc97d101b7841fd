from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict

# Server objects are snake_case (customer_first_name, hire_date, ...).
# The console's model shape is camelCase: that is what by_alias dumps produce
# and what the console routes return. Either spelling is accepted on input.
RECORD_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class Record(BaseModel):
    model_config = RECORD_CONFIG

    id: int = 0

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        """Build a record from a server object, translating field names."""
        return cls.model_validate(data)

    def to_wire(self) -> Dict[str, Any]:
        """Server-side (snake_case) payload for create/update requests."""
        return self.model_dump(mode="json")

    def view(self) -> Dict[str, Any]:
        """Console (camelCase) shape of the record."""
        return self.model_dump(mode="json", by_alias=True)

class Sale(Record):
    customer_first_name: str = ""
    customer_last_name: str = ""
    date: str = ""  # ISO-8601 calendar date, kept verbatim
    total: float = Field(0.0, ge=0)
    salesperson_id: int = 0

class Salesperson(Record):
    first_name: str = ""
    last_name: str = ""
    department: str = ""
    hire_date: str = ""  # ISO-8601 calendar date, kept verbatim
    salary: float = Field(0.0, ge=0)

    @classmethod
    def blank(cls) -> "Salesperson":
        """Placeholder shown before a detail lookup resolves."""
        return cls()

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
