"""Participant Schemas — a Participant links one User to one Event."""

from eventgraph.schemas.common import CreateInput, RecordOutput, UpdateInput


class CreateParticipantInput(CreateInput):
    user_id: str
    event_id: str


class UpdateParticipantInput(UpdateInput):
    user_id: str | None = None
    event_id: str | None = None


class Participant(RecordOutput):
    id: str
    user_id: str
    event_id: str
