"""Configuration management.

``Settings`` is a **metaclass-based singleton**: the first call to
``Settings.load()`` creates the instance; every later call returns
the same object.  Use ``update()`` to change values at runtime, or
``reload()`` to re-read everything from disk.

User-editable configuration lives under ``.metadata/``:

* ``engine.yaml`` – analysis engine endpoint, agent id, API key, timeout

On first run, missing files are copied from ``.metadata.example/``.
Environment variables ``LITREVIEW_ENGINE_URL``, ``LITREVIEW_AGENT_ID`` and
``LITREVIEW_API_KEY`` override the YAML values.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_ENGINE_URL = "http://127.0.0.1:3000/api/agent"
DEFAULT_AGENT_ID = "6901b293cb70cd01d3072e42"


# ---------------------------------------------------------------------------
# Engine dataclass
# ---------------------------------------------------------------------------

@dataclass
class EngineConfig:
    """Connection details for the literature-analysis engine."""

    base_url: str = DEFAULT_ENGINE_URL
    agent_id: str = DEFAULT_AGENT_ID
    api_key: Optional[str] = None
    # None → wait for the engine indefinitely
    timeout: Optional[float] = None


# ---------------------------------------------------------------------------
# Singleton metaclass
# ---------------------------------------------------------------------------

class _SettingsMeta(type):
    """Metaclass that enforces a process-wide singleton for *Settings*.

    * First ``Settings(...)`` creates and caches the instance.
    * Later ``Settings(...)`` calls return the cached instance (args ignored).
    """

    _instances: dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


# ---------------------------------------------------------------------------
# Settings dataclass (singleton)
# ---------------------------------------------------------------------------

@dataclass
class Settings(metaclass=_SettingsMeta):
    """Application settings: singleton with runtime-mutable fields.

    Usage::

        settings = Settings.load()               # first call → create
        settings = Settings.load()               # later → same object
        settings.update(export_dir=Path(...))    # runtime change
        settings = Settings.reload()             # re-read from disk
    """

    metadata_dir: Path = Path(".metadata")
    export_dir: Path = Path("exports")
    engine: EngineConfig = field(default_factory=EngineConfig)

    # ── Runtime helpers ───────────────────────────────────────────────

    def update(self, **kwargs: Any) -> None:
        """Mutate settings fields at runtime.

        >>> Settings.load().update(export_dir=Path("/tmp/exports"))
        """
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Settings has no field '{key}'")
            setattr(self, key, value)

    # ── Factory / lifecycle ───────────────────────────────────────────

    @classmethod
    def load(cls, base_dir: Optional[Path] = None) -> "Settings":
        """Load or return the singleton Settings instance.

        On first call the singleton is created; subsequent calls return
        the cached instance.  Pass *base_dir* to override the project
        root (defaults to the repository root one level above ``litreview/``).
        """
        if cls in _SettingsMeta._instances:
            return _SettingsMeta._instances[cls]  # type: ignore[return-value]

        if base_dir is None:
            base_dir = Path(__file__).resolve().parent.parent

        metadata_dir = base_dir / ".metadata"
        cls._ensure_default_files(base_dir, metadata_dir)

        engine = _load_engine(metadata_dir / "engine.yaml")
        _apply_env_overrides(engine)

        return cls(
            metadata_dir=metadata_dir,
            export_dir=base_dir / "exports",
            engine=engine,
        )

    @classmethod
    def reload(cls, base_dir: Optional[Path] = None) -> "Settings":
        """Discard the current singleton and re-load from disk."""
        cls.reset()
        return cls.load(base_dir)

    @classmethod
    def reset(cls) -> None:
        """Discard the singleton so the next ``load()`` re-creates it."""
        _SettingsMeta._instances.pop(cls, None)

    # ── Private ───────────────────────────────────────────────────────

    @staticmethod
    def _ensure_default_files(base_dir: Path, metadata_dir: Path) -> None:
        """Copy ``.metadata.example/`` templates when real files are missing."""
        metadata_dir.mkdir(parents=True, exist_ok=True)

        example_dir = base_dir / ".metadata.example"
        if not example_dir.exists():
            return

        for example_file in example_dir.iterdir():
            if example_file.is_file():
                target = metadata_dir / example_file.name
                if not target.exists():
                    shutil.copy2(example_file, target)
                    logger.info("Created .metadata/%s from template", example_file.name)


# ---------------------------------------------------------------------------
# YAML loaders
# ---------------------------------------------------------------------------

def _load_engine(path: Path) -> EngineConfig:
    """Load engine settings from ``engine.yaml`` (defaults when missing)."""
    engine = EngineConfig()
    if not path.exists():
        return engine
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return engine
    if not isinstance(data, dict):
        return engine

    if data.get("base_url"):
        engine.base_url = str(data["base_url"])
    if data.get("agent_id"):
        engine.agent_id = str(data["agent_id"])
    if data.get("api_key"):
        engine.api_key = str(data["api_key"])
    timeout = data.get("timeout")
    if timeout is not None:
        try:
            engine.timeout = float(timeout)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid engine timeout %r", timeout)
    return engine


def _apply_env_overrides(engine: EngineConfig) -> None:
    """Let environment variables take precedence over ``engine.yaml``."""
    url = os.environ.get("LITREVIEW_ENGINE_URL")
    if url:
        engine.base_url = url
    agent_id = os.environ.get("LITREVIEW_AGENT_ID")
    if agent_id:
        engine.agent_id = agent_id
    api_key = os.environ.get("LITREVIEW_API_KEY")
    if api_key:
        engine.api_key = api_key


def save_engine(path: Path, engine: EngineConfig) -> None:
    """Persist engine settings to ``engine.yaml``."""
    data: dict[str, Any] = {
        "base_url": engine.base_url,
        "agent_id": engine.agent_id,
        "api_key": engine.api_key or "",
        "timeout": engine.timeout,
    }
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Literature analysis engine\n")
        f.write("# timeout: seconds, or null to wait indefinitely\n\n")
        yaml.dump(
            data,
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
