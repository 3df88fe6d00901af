from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'areas': 0,
        'rooms': 0,
        'paths': 0,
        'inter_area_paths': 0,
        'tiles': 0,
        'components': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
