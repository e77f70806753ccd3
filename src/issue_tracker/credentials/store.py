"""Per-user credential persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from issue_tracker.errors import ConfigIOError

logger = logging.getLogger(__name__)


class CredentialRecord(BaseModel):
    """Durable GitHub credentials. An empty string means "unset"."""

    github_access_token: str = Field(default="")
    user_name: str = Field(default="")

    model_config = ConfigDict(extra="ignore", strict=True)

    def __repr__(self) -> str:
        token = "***" if self.github_access_token else "''"
        return f"CredentialRecord(github_access_token={token}, user_name={self.user_name!r})"


class CredentialStore:
    """JSON-file backed store for the credential record."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Location of the credential file; never touches the filesystem."""

        return self._path

    def load(self) -> CredentialRecord:
        if not self._path.exists():
            logger.debug("No credential file found, using defaults", extra={"path": str(self._path)})
            return CredentialRecord()

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(
                f"Failed to read config file {self._path}: {e}", path=self._path
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigIOError(
                f"Config file {self._path} is not valid JSON: {e}", path=self._path
            ) from e

        if not isinstance(raw, dict):
            raise ConfigIOError(
                f"Config file {self._path} must contain a JSON object", path=self._path
            )

        try:
            record = CredentialRecord.model_validate(raw)
        except ValidationError as e:
            raise ConfigIOError(
                f"Config file {self._path} has invalid values: {e}", path=self._path
            ) from e

        logger.debug("Credential file loaded", extra={"path": str(self._path)})
        return record

    def store(self, record: CredentialRecord) -> None:
        payload = record.model_dump(mode="json")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise ConfigIOError(
                f"Failed to write config file {self._path}: {e}", path=self._path
            ) from e

        logger.info("Credential file saved", extra={"path": str(self._path)})
