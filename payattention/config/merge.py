import os

ENV_PREFIX = "PAYATTENTION_"

# 타입 변환용 테이블
INT_KEYS = {"CONFIG_VERSION"}
BOOL_KEYS = {"FOCUS_NEW_WINDOWS"}


def _to_bool(s: str) -> bool:
    return str(s).strip().lower() in ("1","true","yes","on","y","t")


def env_layer(environ=None) -> dict:
    """
    환경변수로 덮어쓰는 레이어.
    - 키 이름은 PAYATTENTION_ + ExtensionConfig 키 (예: PAYATTENTION_LOG_LEVEL)
    - 값 타입은 INT_KEYS/BOOL_KEYS에 맞춰 변환
    """
    environ = os.environ if environ is None else environ
    out: dict = {}
    # 화이트리스트: 스키마 키만 허용
    keys = {"CONFIG_VERSION", "URGENT_STYLE_CLASS", "FOCUS_NEW_WINDOWS", "LOG_LEVEL"}
    for k in keys:
        raw = environ.get(ENV_PREFIX + k)
        if raw is None:
            continue
        if k in INT_KEYS:
            try: out[k] = int(raw)
            except ValueError: pass
        elif k in BOOL_KEYS:
            out[k] = _to_bool(raw)
        else:
            out[k] = raw
    return out


def merge_layers(*layers: dict) -> dict:
    """
    왼쪽부터 오른쪽으로 순차 병합, 오른쪽이 우선.
    예) merge_layers(file, env, overrides) → overrides가 최종 승자
    """
    result: dict = {}
    for layer in layers:
        if not layer: continue
        result.update(layer)
    return result
