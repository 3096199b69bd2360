# config/field_standards.py
"""냉매·용도별 현장 운전 기준값"""

FIELD_STANDARDS = {
    "R-22": {
        "냉장": {
            "storage_temp": 0,
            "evap_temp": -15,
            "low_p_range": (1.9, 2.1),
            "low_p_target": 2.0
        },
        "냉동": {
            "storage_temp": -20,
            "evap_temp": -27,
            "low_p_range": (0.8, 1.2),
            "low_p_target": 1.0
        },
        "초저온": {
            "storage_temp": -35,
            "evap_temp": -45,
            "low_p_range": (0.1, 0.3),
            "low_p_target": 0.2
        }
    },

    "R-404A": {
        "냉장": {
            "storage_temp": 0,
            "evap_temp": -10,
            "low_p_range": (3.0, 3.8),
            "low_p_target": 3.4
        },
        "냉동": {
            "storage_temp": -20,
            "evap_temp": -30,
            "low_p_range": (0.8, 1.3),
            "low_p_target": 1.0
        },
        "초저온": {
            "storage_temp": -35,
            "evap_temp": -45,
            "low_p_range": (-0.2, 0.2),
            "low_p_target": 0.0
        }
    },

    "R-134a": {
        "냉장": {
            "storage_temp": 3,
            "evap_temp": -10,
            "low_p_range": (0.9, 1.2),
            "low_p_target": 1.0
        },
        "냉동": {
            "storage_temp": -18,
            "evap_temp": -30,
            "low_p_range": (-0.2, 0.3),
            "low_p_target": 0.0
        }
    }
}

# 해당 행이 없을 때 사용하는 보수적 기준 (R-22 냉장과 동일)
DEFAULT_FIELD_STANDARD = {
    "storage_temp": 0,
    "evap_temp": -15,
    "low_p_range": (1.9, 2.1),
    "low_p_target": 2.0
}

# 냉매별 선택 가능한 용도 라벨
FACILITY_OPTIONS = {
    "R-134a": ["냉장 (테이블냉장고)", "냉동 (테이블냉동고)"],
    "default": ["냉장 (0°C)", "냉동 (-20°C)", "초저온 (-35°C)"]
}
