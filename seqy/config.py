import logging
from dataclasses import dataclass, fields, replace, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class SeqConfig:
    """package-wide defaults"""
    always_copy: bool = True  # default for collect()
    log_level: int = logging.DEBUG  # level of memoization log records

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_active = SeqConfig()


def get_config() -> SeqConfig:
    """get the active configuration"""
    return _active


def configure(**changes: Any) -> SeqConfig:
    """
    replace the active configuration with the given fields changed.
    returns the previous configuration so it can be restored with
    configure(**previous.as_dict()).
    """
    global _active
    known = {f.name for f in fields(SeqConfig)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown config option(s): {', '.join(sorted(unknown))}")
    previous = _active
    _active = replace(_active, **changes)
    return previous
