"""PluginConfig — explicit configuration for the code question plugin."""

from pydantic import BaseModel, Field

DEFAULT_TAG_NAME = "asq-code-q"
DEFAULT_EVENT_NAME = "asq:question_type"
DEFAULT_CONTROLLER_ROLE = "ctrl"


class PluginConfig(BaseModel, frozen=True):
    """Root configuration for one plugin instance.

    ``tag_name`` is both the custom element name the extractor looks for and the
    question type stamped on persisted questions and submissions.
    """

    tag_name: str = Field(default=DEFAULT_TAG_NAME, min_length=1)
    event_name: str = Field(default=DEFAULT_EVENT_NAME, min_length=1)
    controller_role: str = Field(default=DEFAULT_CONTROLLER_ROLE, min_length=1)
