"""
Conversion settings.

Defaults give 500 ticks per quarter note at a fixed 120 BPM. A YAML file
can override any field:

    ticks_per_beat: 480
    quarter_note_seconds: 0.5
"""

import copy
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import mido
import yaml

logger = logging.getLogger(__name__)

DEFAULT_TICKS_PER_BEAT = 500
DEFAULT_TEMPO = 500000  # us per quarter note (120 BPM)


@dataclass
class ConvertConfig:
    """Settings for SMUS to MIDI conversion."""

    ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT
    tempo: int = DEFAULT_TEMPO
    quarter_note_seconds: float = 0.5
    output_suffix: str = ".mid"

    @property
    def quarter_ticks(self) -> int:
        """Ticks for one SMUS quarter note at the fixed output tempo."""
        return int(mido.second2tick(self.quarter_note_seconds, self.ticks_per_beat, self.tempo))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> ConvertConfig:
    """
    Load settings from an optional YAML file plus keyword overrides.

    Args:
        path: YAML file (missing file means defaults)
        **overrides: Field values applied last; None values are skipped

    Returns:
        Merged ConvertConfig
    """
    data = ConvertConfig().to_dict()

    if path is not None:
        path = Path(path)
        if path.exists():
            user = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if not isinstance(user, dict):
                raise ValueError(f"Config file must contain a mapping: {path}")
            data = _deep_merge(data, user)
        else:
            logger.warning("Config file not found, using defaults: %s", path)

    data = _deep_merge(data, {k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(ConvertConfig)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown config key '%s'", key)

    return ConvertConfig(**{k: v for k, v in data.items() if k in known})
