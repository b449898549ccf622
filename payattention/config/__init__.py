import logging
from pathlib import Path
from typing import Optional

from .io import config_path, read_yaml
from .merge import merge_layers, env_layer
from .schema import ExtensionConfig

logger = logging.getLogger(__name__)


def load_effective_config(path: Optional[Path] = None, overrides: Optional[dict] = None,
                          environ=None) -> ExtensionConfig:
    path = config_path() if path is None else path
    file_cfg = read_yaml(path)

    # 최종 병합: 파일 < ENV < overrides
    merged = merge_layers(file_cfg, env_layer(environ), overrides or {})
    model = ExtensionConfig(**merged)
    logger.debug("effective config: %s", model.model_dump())
    return model
