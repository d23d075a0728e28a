"""User Schemas."""

from eventgraph.schemas.common import CreateInput, RecordOutput, UpdateInput


class CreateUserInput(CreateInput):
    username: str
    email: str


class UpdateUserInput(UpdateInput):
    username: str | None = None
    email: str | None = None


class User(RecordOutput):
    id: str
    username: str
    email: str
