"""Resume checkpoint loading and persistence."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml

from .errors import ResumeLoadError

LOGGER = logging.getLogger(__name__)

DEFAULT_RESUME_FILE = "resume.cfg"

_KNOWN_KEYS = {"resume_from", "index"}


def _freeze(value: Any) -> Any:
    """Return a read-only copy of a parsed YAML value.

    Args:
        value (Any): Parsed YAML value.

    Returns:
        Any: Value with mappings, lists and sets replaced by read-only types.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Return a plain YAML-serializable copy of a frozen value.

    Args:
        value (Any): Value produced by ``_freeze``.

    Returns:
        Any: Value with read-only types replaced by dicts, lists and sets.
    """
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, frozenset):
        return {_thaw(item) for item in value}
    return value


@dataclass(frozen=True)
class ResumeCheckpoint:
    """Persisted scan progress.

    The resolution engine owns the meaning of these values; this module only
    moves them between disk and memory as one unit.

    Attributes:
        resume_from (str): Last item processed before the scan stopped.
        index (int): Number of items already processed.
        extra (Mapping[str, Any]): Additional keys written by the engine, stored read-only.
    """

    resume_from: str = ""
    index: int = 0
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Store a read-only copy of the extra keys."""
        object.__setattr__(self, "extra", _freeze(self.extra))

    def is_empty(self) -> bool:
        """Return whether this is a fresh-scan checkpoint.

        Returns:
            bool: True when no progress is recorded.
        """
        return not self.resume_from and self.index == 0 and not self.extra

    def to_mapping(self) -> Dict[str, Any]:
        """Serialize the checkpoint into a plain mapping.

        Returns:
            Dict[str, Any]: Mapping suitable for YAML output.
        """
        data: Dict[str, Any] = _thaw(self.extra)
        data["resume_from"] = self.resume_from
        data["index"] = self.index
        return data

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ResumeCheckpoint":
        """Build a checkpoint from a parsed mapping.

        Args:
            data (Dict[str, Any]): Parsed checkpoint mapping.

        Returns:
            ResumeCheckpoint: Checkpoint instance.

        Raises:
            ValueError: If a known key has the wrong type.
        """
        resume_from = data.get("resume_from", "")
        index = data.get("index", 0)
        if resume_from is None:
            resume_from = ""
        if not isinstance(resume_from, str):
            raise ValueError("resume_from must be a string")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError("index must be a non-negative integer")
        extra = {key: value for key, value in data.items() if key not in _KNOWN_KEYS}
        return cls(resume_from=resume_from, index=index, extra=extra)


class ResumeStateManager:
    """Decide whether a checkpoint is loaded or saved, and do the file I/O."""

    def __init__(self, resume: bool, path: Path | str = DEFAULT_RESUME_FILE) -> None:
        """Initialize the manager.

        Args:
            resume (bool): Whether the user asked to resume a scan.
            path (Path | str): Checkpoint file location.
        """
        self.resume = resume
        self.path = Path(path)

    def should_load(self) -> bool:
        """Return whether a checkpoint should be loaded.

        Returns:
            bool: True if resume was requested and the checkpoint file exists.
        """
        return self.resume and self.path.is_file()

    def should_save(self) -> bool:
        """Return whether scan progress should be persisted.

        Progress is always offered for saving, even when resume was not requested.

        Returns:
            bool: Always True.
        """
        return True

    def load(self) -> ResumeCheckpoint:
        """Deserialize the checkpoint file.

        Returns:
            ResumeCheckpoint: Loaded checkpoint; empty when the file has no content.

        Raises:
            ResumeLoadError: If the file cannot be read or is malformed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResumeLoadError(self.path, str(exc)) from exc
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ResumeLoadError(self.path, f"invalid YAML: {exc}") from exc
        if data is None:
            LOGGER.debug("Resume file %s is empty", self.path)
            return ResumeCheckpoint()
        if not isinstance(data, dict):
            raise ResumeLoadError(self.path, "content is not a mapping")
        try:
            checkpoint = ResumeCheckpoint.from_mapping(data)
        except ValueError as exc:
            raise ResumeLoadError(self.path, str(exc)) from exc
        LOGGER.debug("Loaded resume file %s (index %d)", self.path, checkpoint.index)
        return checkpoint

    def load_or_default(self) -> ResumeCheckpoint:
        """Load the checkpoint when resuming, otherwise return an empty one.

        Returns:
            ResumeCheckpoint: Loaded or empty checkpoint.

        Raises:
            ResumeLoadError: If an existing checkpoint file is malformed.
        """
        if not self.should_load():
            LOGGER.debug(
                "Not loading resume file %s (resume=%s, exists=%s)",
                self.path,
                self.resume,
                self.path.is_file(),
            )
            return ResumeCheckpoint()
        return self.load()

    def save(self, checkpoint: ResumeCheckpoint) -> None:
        """Write a checkpoint to disk, replacing any previous file.

        Args:
            checkpoint (ResumeCheckpoint): Progress to persist.
        """
        rendered = yaml.safe_dump(checkpoint.to_mapping(), sort_keys=False)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(rendered)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Saved resume file %s", self.path)

    def clear(self) -> None:
        """Remove the checkpoint file after a completed scan."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        LOGGER.debug("Removed resume file %s", self.path)


__all__ = ["DEFAULT_RESUME_FILE", "ResumeCheckpoint", "ResumeStateManager"]
