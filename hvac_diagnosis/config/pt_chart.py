# config/pt_chart.py
"""냉매별 P-T 차트 (포화온도 °C → 포화압력 kg/cm²G) 및 냉매 정보"""

PT_CHART = {
    "R-22": {
        -45: -0.19,  # 진공 구간 (게이지 음압)
        -40: 0.04,
        -35: 0.32,
        -30: 0.64,
        -25: 1.02,
        -20: 1.47,
        -15: 1.99,
        -10: 2.59,
        -5: 3.27,
        0: 4.04,
        5: 4.92,
        10: 5.91,
        15: 7.02,
        20: 8.25,
        25: 9.61,
        30: 11.12,
        35: 12.78,
        40: 14.60,
        45: 16.60,
        50: 18.78,
        55: 21.15,
        60: 23.72
    },

    "R-404A": {
        -45: 0.02,
        -40: 0.30,
        -35: 0.63,
        -30: 1.03,
        -25: 1.49,
        -20: 2.02,
        -15: 2.65,
        -10: 3.36,
        -5: 4.17,
        0: 5.09,
        5: 6.12,
        10: 7.28,
        15: 8.58,
        20: 10.02,
        25: 11.62,
        30: 13.39,
        35: 15.33,
        40: 17.47,
        45: 19.82,
        50: 22.36
    },

    "R-134a": {
        -25: 0.49,
        -20: 0.69,
        -15: 0.88,
        -10: 1.01,
        -5: 1.24,
        0: 1.48,
        5: 1.72,
        10: 2.01,
        15: 2.33,
        20: 2.67,
        25: 3.04,
        30: 3.43,
        35: 3.86,
        40: 4.32,
        45: 4.79,
        50: 5.31,
        55: 5.87,
        60: 6.48
    }
}

# 냉매 정보
REFRIGERANT_INFO = {
    "R-22": {
        "name": "HCFC-22",
        "oil": "광유(Mineral)",
        "note": "2030년 퇴출",
        "charge_method": "액상 충전"
    },
    "R-404A": {
        "name": "HFC 혼합",
        "oil": "POE",
        "note": "저온용",
        "charge_method": "액상 충전 필수"
    },
    "R-134a": {
        "name": "HFC-134a",
        "oil": "POE",
        "note": "테이블 냉장/냉동용",
        "charge_method": "액상 충전"
    }
}
