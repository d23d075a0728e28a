"""Location Schemas."""

from eventgraph.schemas.common import CreateInput, RecordOutput, UpdateInput


class CreateLocationInput(CreateInput):
    name: str
    desc: str
    lat: float
    lng: float
    event_id: str


class UpdateLocationInput(UpdateInput):
    name: str | None = None
    desc: str | None = None
    lat: float | None = None
    lng: float | None = None
    event_id: str | None = None


class Location(RecordOutput):
    id: str
    name: str
    desc: str
    lat: float
    lng: float
    event_id: str
