from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'attempts': 0,
        'rejected_attempts': 0,
        'rooms_target': 0,
        'rooms_placed': 0,
        'room_attempts': 0,
        'doors_placed': 0,
        'doors_dropped': 0,
        'doors_demoted': 0,
        'boundary_walls': 0,
        'enclosure_walls': 0,
        'enclosure_sweeps': 0,
        'pillars_placed': 0,
        'corridor_style': None,
        'corridor_pairs': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'tiles_door': 0,
        'tiles_void': 0,
        'runtime_ms': 0,
        'phase_ms': {},
    }
