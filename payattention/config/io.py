import yaml
from pathlib import Path


def get_config_dir() -> Path:
    return Path.home() / ".config" / "payattention"


def config_path() -> Path:
    return get_config_dir() / "config.yaml"


def read_yaml(path: Path) -> dict:
    # 읽기 전용: 확장은 설정 파일을 쓰지 않는다
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return data
