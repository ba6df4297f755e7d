"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

Commands log through ``logging.getLogger(__name__)``; once :func:`init_logging`
has run, those records are rendered by lib_log_rich.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from buildkit import __init__conf__


class LoggingConfigModel(BaseModel):
    """``[lib_log_rich]`` with the two keys buildkit defaults itself.

    Any other key (``console_level``, ``queue_enabled``, ...) is passed to
    ``lib_log_rich.runtime.RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel.model_validate({"console_level": "DEBUG"}).model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(
            service=self.service or __init__conf__.name,
            environment=self.environment,
            **self.model_dump(exclude={"service", "environment"}, exclude_none=True),
        )


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: Any = config.get("lib_log_rich", default=None)
    data = dict(section) if isinstance(section, Mapping) else {}
    return LoggingConfigModel.model_validate(data).to_runtime_config()


def init_logging(config: Config) -> None:
    """Start lib_log_rich and route stdlib logging into it.

    ``LOG_*`` variables from ``.env`` files are honoured. The runtime is
    process-wide, so calls after the first one do nothing.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
