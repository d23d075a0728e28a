"""Event Schemas — `from` is a Python keyword, so the attribute is `from_`.

Invariants:
    - JSON in and out always uses the key "from"
    - Records handed to the core carry "from", never "from_"
"""

from pydantic import Field

from eventgraph.schemas.common import CreateInput, RecordOutput, UpdateInput


class CreateEventInput(CreateInput):
    title: str
    desc: str
    date: str
    from_: str = Field(alias="from")
    to: str
    location_id: str
    user_id: str


class UpdateEventInput(UpdateInput):
    title: str | None = None
    desc: str | None = None
    date: str | None = None
    from_: str | None = Field(None, alias="from")
    to: str | None = None
    location_id: str | None = None
    user_id: str | None = None


class Event(RecordOutput):
    id: str
    title: str
    desc: str
    date: str
    from_: str = Field(alias="from")
    to: str
    user_id: str
    location_id: str
