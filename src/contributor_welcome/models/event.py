"""Push event webhook payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from contributor_welcome.exceptions import MalformedEventError


class CommitAuthor(BaseModel):
    """Author block of a push event commit."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = None
    email: str | None = None
    username: str | None = None  # GitHub login, absent for unlinked emails


class PushCommit(BaseModel):
    """Commit as delivered in a push event payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)
    url: str = ""

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n")[0]


class RepositoryOwner(BaseModel):
    """Repository owner (user or organization)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    login: str

    @model_validator(mode="before")
    @classmethod
    def _login_from_name(cls, data: Any) -> Any:
        # Older push payloads only carry "name" for the owner
        if isinstance(data, dict) and "login" not in data and data.get("name"):
            return {**data, "login": data["name"]}
        return data


class PushRepository(BaseModel):
    """Repository a push event belongs to."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    owner: RepositoryOwner
    full_name: str | None = None
    default_branch: str | None = None


class PushEvent(BaseModel):
    """GitHub push webhook payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ref: str
    commits: list[PushCommit] = Field(default_factory=list)
    repository: PushRepository

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "PushEvent":
        """Create from a raw webhook payload.

        Raises:
            MalformedEventError: If required fields are missing or mistyped
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedEventError(f"Invalid push event payload: {e}") from e

    @property
    def head_commit(self) -> PushCommit | None:
        """First commit of the push, if any."""
        return self.commits[0] if self.commits else None
