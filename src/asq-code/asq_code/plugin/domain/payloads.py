"""Hook payloads for the document-parsed and connection hooks."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ParsedDocument(BaseModel):
    """A presentation document passing through the document-parsed hook."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    presentation_id: str
    html: str


class ConnectionInfo(BaseModel):
    """A presenter or viewer connection.

    ``session_id`` is absent when the presentation is not running live.
    ``whitelist_id`` identifies the learner behind a viewer connection.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    socket_id: str
    presentation_id: str
    session_id: str | None = None
    whitelist_id: str | None = None
