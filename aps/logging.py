"""
Logging for the Archery Pop platform.

Two channels:
- Log lines: get_logger(module) returns a logger printing
  "[module] LEVEL: message" to stderr, filtered per module.
- Records: emit_record(module, record) hands a JSON-serializable dict to the
  sink registered for that module (FileSink writes JSONL, NullSink drops it).

Levels come from APS_LOG_LEVEL (default INFO) and APS_LOG_<MODULE>
(e.g. APS_LOG_TARGET_POOL=DEBUG), or from configure_logging(). Record sinks
are switched on per module with APS_LOGGING_<MODULE>_ENABLED=true; files go
to APS_LOG_DIR or <user data dir>/logs.

Usage:
    log = get_logger('session')
    log.info("%s -> %s", old, new)

    register_sink('session', create_sink_for_module('session'))
    emit_record('session', {'type': 'game_over', 'score': 120})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},     # module -> LogLevel
    'log_dir': None,         # None = APS_LOG_DIR or the platform default
    'modules': {},           # module -> settings from APS_LOGGING_*
}


def _parse_level(name: str) -> LogLevel:
    """Level by name (WARN accepted); unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _parse_setting(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def _load_env_config() -> None:
    for key, value in os.environ.items():
        if key == 'APS_LOG_LEVEL':
            _config['default_level'] = _parse_level(value)
        elif key.startswith('APS_LOGGING_'):
            # APS_LOGGING_SESSION_ENABLED=true -> modules['session']['enabled'] = True
            module, _, setting = key[len('APS_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_setting(value)
        elif key.startswith('APS_LOG_') and key != 'APS_LOG_DIR':
            _config['module_levels'][key[len('APS_LOG_'):].lower()] = _parse_level(value)


_load_env_config()


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Set levels programmatically (the runner's --log-level).

    Args:
        level: Default level for every module
        modules: Per-module overrides, e.g. {'target_pool': 'DEBUG'}
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def get_user_data_dir() -> Path:
    """Per-user data directory (Application Support, %APPDATA% or XDG)."""
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'APS'
    if sys.platform == 'win32':
        return Path(os.environ.get('APPDATA', str(Path.home()))) / 'APS'
    return Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'aps'


def get_log_dir() -> Path:
    configured = _config['log_dir'] or os.environ.get('APS_LOG_DIR')
    if configured:
        return Path(configured).expanduser()
    return get_user_data_dir() / 'logs'


def get_module_config(module: str) -> Dict[str, Any]:
    """Settings collected from APS_LOGGING_<MODULE>_* (empty if none)."""
    return _config['modules'].get(module.lower(), {})


# =============================================================================
# Log lines
# =============================================================================

class APSLogger:
    """Per-module logger writing to stderr."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}", file=sys.stderr)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> APSLogger:
    """Cached logger for a module name such as 'session' or 'highscore'."""
    return APSLogger(module)


# =============================================================================
# Records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """
    One JSONL file per module: <log dir>/<session_name>_<module>.jsonl.

    Each file opens with a header record and is closed with a footer record.
    Records without a 'wall_time' get one stamped on.

    Args:
        log_dir: Output directory (default: get_log_dir(), created on first write)
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _open(self, module: str):
        handle = self._files.get(module)
        if handle is None:
            directory = self._log_dir or get_log_dir()
            directory.mkdir(parents=True, exist_ok=True)
            handle = open(directory / f"{self._session_name}_{module}.jsonl", 'a')
            self._files[module] = handle
            self._write(handle, {'type': 'header', 'module': module,
                                 'session_name': self._session_name})
        return handle

    @staticmethod
    def _write(handle, record: Dict[str, Any]) -> None:
        handle.write(json.dumps({'wall_time': time.time(), **record}) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        self._write(self._open(module), record)

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {'type': 'footer', 'module': module})
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Sink for modules with none registered (None to disable)."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a record to the module's sink.

    Returns:
        False when no sink is registered for the module
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink is not None:
        _default_sink.close()
        _default_sink = None


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """
    FileSink if APS_LOGGING_<MODULE>_ENABLED is set, otherwise NullSink.

    APS_LOGGING_<MODULE>_DIR overrides the output directory.
    """
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)
