"""Configuration helpers for the PBKDF2 hasher."""

import json
import os
from dataclasses import asdict, dataclass
from typing import Dict, Optional


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Convert an environment string to int, returning None on failure."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class Config:
    """Hasher settings. Validation happens when a PBKDF2Hasher is built."""

    salt_size: int = 16
    iteration_count: int = 10_000
    algorithm: str = "sha1"  # sha1 | sha256 | sha384 | sha512 | md5


def load_config_from_env_and_args(args: object = None, config_path: Optional[str] = None) -> Config:
    """
    Merge args + env + config.json (if present) into a Config instance.

    Priority: args > environment > config.json > defaults.
    """

    def load_file(path: str) -> Dict[str, object]:
        if not os.path.exists(path):
            return {}
        try:
            with open(path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def pick(*candidates):
        for candidate in candidates:
            if candidate is not None:
                return candidate
        return None

    def as_int(value: object) -> Optional[int]:
        return _parse_int(str(value)) if value is not None else None

    def file_int(key: str) -> Optional[int]:
        return as_int(file_cfg.get(key))

    file_cfg = load_file(config_path or "config.json")

    salt_size = pick(
        as_int(getattr(args, "salt_size", None)),
        _parse_int(os.getenv("PBKDF2_SALT_SIZE")),
        file_int("salt_size"),
        Config.salt_size,
    )
    iteration_count = pick(
        as_int(getattr(args, "iteration_count", None)),
        _parse_int(os.getenv("PBKDF2_ITERATION_COUNT")),
        file_int("iteration_count"),
        Config.iteration_count,
    )
    algorithm = pick(
        getattr(args, "algorithm", None),
        os.getenv("PBKDF2_ALGORITHM"),
        file_cfg.get("algorithm"),
        Config.algorithm,
    )

    return Config(
        salt_size=int(salt_size),
        iteration_count=int(iteration_count),
        algorithm=str(getattr(algorithm, "value", algorithm)).strip().lower(),
    )


def export_config(config: Config, path: str = "config.json") -> None:
    """
    Persist hasher settings to a JSON file.
    """
    data = asdict(config)
    with open(path, "w", encoding="utf-8") as fp:
        json.dump(data, fp, ensure_ascii=False, indent=2)
