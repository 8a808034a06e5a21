import json
import math
import numbers
from dataclasses import dataclass, fields

from stereo.errors import InvalidConfig

# option names as exposed to callers -> dataclass fields
_OPTION_NAMES = {
    "blockSize": "block_size",
    "maxDisparity": "max_disparity",
    "smoothing": "smoothing",
    "normalize": "normalize",
    "centerBias": "center_bias",
    "edgeWeight": "edge_weight",
}

@dataclass(frozen=True)
class DepthConfig:
    """
    Fully resolved options for one depth computation.
    Nothing here has a default: the caller decides every value.
    """
    block_size: int
    max_disparity: int
    smoothing: bool
    normalize: bool
    center_bias: float
    edge_weight: float

    def validate(self) -> "DepthConfig":
        if not _is_int(self.block_size) or self.block_size <= 0 or self.block_size % 2 == 0:
            raise InvalidConfig(f"blockSize must be a positive odd integer, got {self.block_size!r}")
        if not _is_int(self.max_disparity) or self.max_disparity < 0:
            raise InvalidConfig(f"maxDisparity must be a non-negative integer, got {self.max_disparity!r}")
        for name in ("smoothing", "normalize"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfig(f"{name} must be a boolean, got {getattr(self, name)!r}")
        for name, value in (("centerBias", self.center_bias), ("edgeWeight", self.edge_weight)):
            if not _is_real(value) or not 0.0 <= value <= 1.0:
                raise InvalidConfig(f"{name} must be a real number in [0, 1], got {value!r}")
        return self


def _is_int(v) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)

def _is_real(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


def config_from_dict(d: dict) -> DepthConfig:
    """
    Build and validate a DepthConfig from a mapping.
    Keys may be the camelCase option names (blockSize, ...) or the field names.
    """
    if not isinstance(d, dict):
        raise InvalidConfig("config must be a JSON object")

    field_names = {f.name for f in fields(DepthConfig)}
    values = {}
    for key, value in d.items():
        name = _OPTION_NAMES.get(key, key)
        if name not in field_names:
            raise InvalidConfig(f"unknown option: {key}")
        if name in values:
            raise InvalidConfig(f"option given twice: {key}")
        values[name] = value

    missing = sorted(field_names - set(values))
    if missing:
        raise InvalidConfig(f"missing options: {', '.join(missing)}")
    return DepthConfig(**values).validate()


def load_depth_config(json_path: str) -> DepthConfig:
    with open(json_path, "r", encoding="utf-8") as f:
        try:
            j = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfig(f"{json_path}: {e}") from e
    return config_from_dict(j)
