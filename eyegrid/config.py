from dataclasses import dataclass, field, fields, replace
from pathlib import Path
import yaml


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a valid eye field."""


@dataclass
class CanvasConfig:
    width: int = 800
    height: int = 600
    fps_target: int = 60
    resizable: bool = True


@dataclass
class FieldConfig:
    num_pairs: int = 20
    eye_size_min: float = 40.0
    eye_size_max: float = 80.0
    pupil_ratio: float = 0.4
    eye_spacing: float = 90.0
    separation_factor: float = 2.0
    max_placement_attempts: int = 1000

    @property
    def margin(self) -> float:
        return self.eye_size_max / 2

    @property
    def min_separation(self) -> float:
        return self.eye_size_max * self.separation_factor


@dataclass
class BlinkConfig:
    interval: float = 3.0
    chance: float = 0.3
    decay_step: float = 0.1


@dataclass
class GazeConfig:
    hue_distance: tuple = (0.0, 500.0)
    hue_range: tuple = (0.0, 360.0)
    saturation_distance: tuple = (0.0, 300.0)
    saturation_range: tuple = (100.0, 50.0)
    brightness_distance: tuple = (0.0, 200.0)
    brightness_range: tuple = (100.0, 70.0)
    pupil_offset_ratio: float = 0.25


@dataclass
class AgentConfig:
    size: float = 60.0
    speed: float = 4.0
    mouth_min: float = 0.1
    mouth_max: float = 0.5
    mouth_rate: float = 0.2
    color: tuple = (255, 255, 0)


@dataclass
class DebugConfig:
    web_port: int = 8080


@dataclass
class Config:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    eyes: FieldConfig = field(default_factory=FieldConfig)
    blink: BlinkConfig = field(default_factory=BlinkConfig)
    gaze: GazeConfig = field(default_factory=GazeConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    log_level: str = "INFO"


def _merge(section, data: dict):
    """Return a copy of a config section with keys from data applied.

    Unknown keys are ignored; list values are converted to tuples where the
    default is a tuple (YAML has no tuple type).
    """
    updates = {}
    for f in fields(section):
        if f.name not in data:
            continue
        value = data[f.name]
        if isinstance(getattr(section, f.name), tuple):
            value = tuple(value)
        updates[f.name] = value
    return replace(section, **updates)


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "canvas" in data:
        config.canvas = _merge(config.canvas, data["canvas"])

    if "eyes" in data:
        config.eyes = _merge(config.eyes, data["eyes"])

    if "blink" in data:
        config.blink = _merge(config.blink, data["blink"])

    if "gaze" in data:
        config.gaze = _merge(config.gaze, data["gaze"])

    if "agent" in data:
        config.agent = _merge(config.agent, data["agent"])

    if "debug" in data:
        config.debug = DebugConfig(
            web_port=data["debug"].get("web_port", config.debug.web_port),
        )

    if "logging" in data:
        config.log_level = data["logging"].get("level", config.log_level)

    validate_config(config)
    return config


def validate_canvas(width: float, height: float, field_cfg: FieldConfig):
    """Reject canvases that cannot hold a single pair inside the margins."""
    if width <= 0 or height <= 0:
        raise ConfigError(f"canvas must have a positive size, got {width}x{height}")
    margin = field_cfg.margin
    if width - margin - field_cfg.eye_spacing < margin:
        raise ConfigError(
            f"canvas width {width} is too narrow for an eye pair "
            f"(needs at least {2 * margin + field_cfg.eye_spacing})"
        )
    if height - margin < margin:
        raise ConfigError(
            f"canvas height {height} is too short for an eye pair "
            f"(needs at least {2 * margin})"
        )


def validate_config(config: Config):
    """Raise ConfigError if any section violates a precondition."""
    fc = config.eyes
    if fc.num_pairs <= 0:
        raise ConfigError(f"eyes.num_pairs must be positive, got {fc.num_pairs}")
    if fc.eye_size_min <= 0 or fc.eye_size_min > fc.eye_size_max:
        raise ConfigError(
            f"eyes size range is invalid: {fc.eye_size_min}..{fc.eye_size_max}"
        )
    if fc.max_placement_attempts <= 0:
        raise ConfigError("eyes.max_placement_attempts must be positive")
    validate_canvas(config.canvas.width, config.canvas.height, fc)

    if config.canvas.fps_target <= 0:
        raise ConfigError("canvas.fps_target must be positive")

    bc = config.blink
    if not 0.0 <= bc.chance <= 1.0:
        raise ConfigError(f"blink.chance must be within [0, 1], got {bc.chance}")
    if bc.decay_step <= 0:
        raise ConfigError("blink.decay_step must be positive")

    gc = config.gaze
    for name in ("hue_distance", "saturation_distance", "brightness_distance"):
        lo, hi = getattr(gc, name)
        if lo == hi:
            raise ConfigError(f"gaze.{name} must span a non-empty range")

    ac = config.agent
    if ac.size <= 0 or ac.speed <= 0:
        raise ConfigError("agent.size and agent.speed must be positive")
