from __future__ import annotations
from pydantic import BaseModel
from typing import Literal, Optional
import os, yaml
from dotenv import load_dotenv

class ConsoleCfg(BaseModel):
    enabled: bool = False                      # appended as the lowest-priority provider
    stream: Literal["stdout", "stderr"] = "stdout"
    colors: Optional[bool] = None              # None: only when the stream is a tty
    timestamp_format: Optional[str] = None     # strftime pattern, ISO-8601 when unset

class LoguruCfg(BaseModel):
    enabled: bool = True
    scope_key: str = "source_context"

class LibLogConfig(BaseModel):
    console: ConsoleCfg = ConsoleCfg()
    loguru: LoguruCfg = LoguruCfg()

def load_config(path: str | None = None) -> LibLogConfig:
    load_dotenv(override=False)
    import pathlib
    path = path or os.getenv("LIBLOG_CONFIG")
    raw: dict = {}
    if path:
        p = pathlib.Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    console_cfg = raw.get("console") or {}
    loguru_cfg = raw.get("loguru") or {}

    def coalesce(yaml_val, env_val):
        return env_val if (yaml_val in (None, "") and env_val not in (None, "")) else yaml_val

    env_console  = os.getenv("LIBLOG_CONSOLE_ENABLED")
    env_stream   = os.getenv("LIBLOG_CONSOLE_STREAM")
    env_colors   = os.getenv("LIBLOG_CONSOLE_COLORS")
    env_loguru   = os.getenv("LIBLOG_LOGURU_ENABLED")

    console_cfg["enabled"] = coalesce(console_cfg.get("enabled"), env_console)
    console_cfg["stream"]  = coalesce(console_cfg.get("stream"),  env_stream)
    console_cfg["colors"]  = coalesce(console_cfg.get("colors"),  env_colors)
    loguru_cfg["enabled"]  = coalesce(loguru_cfg.get("enabled"),  env_loguru)

    raw["console"] = {k: v for k, v in console_cfg.items() if v is not None}
    raw["loguru"] = {k: v for k, v in loguru_cfg.items() if v is not None}
    return LibLogConfig.model_validate(raw)
