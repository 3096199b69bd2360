"""
hvac_diagnosis.config.constants
────────────────────────────────────────────
진단 계산·판정에 공통으로 쓰이는 현장 경험치 상수 모음
(값 자체가 판정 기준이므로 임의로 조정하지 말 것)
"""

# ── 압력 단위 ────────────────────────────────
ATMOSPHERIC_OFFSET: float = 1.033          # kg/cm² (게이지 → 절대압)
MIN_ABSOLUTE_LOW_PRESSURE: float = 0.1     # 압축비 계산 하한 (절대압)
COMPRESSION_RATIO_SENTINEL: float = 99.9   # 하한 이하일 때 반환값

# ── 응축 목표 ────────────────────────────────
CONDENSING_OFFSET: float = 15.0            # 응축온도 = 외기 + 15°C

# ── 압력 패턴 판정 밴드 (kg/cm²) ─────────────
LOW_BAND_MARGIN: float = 0.2               # 저압 범위 이탈 여유
LOW_HIGH_COMPRESSOR_MARGIN: float = 0.3    # 압축기 효율 저하 판정용 여유
HIGH_DEV_UNDERCHARGE: float = -1.5         # 냉매 부족: 고압 편차 < -1.5
HIGH_DEV_NORMAL_FLOOR: float = -1.0        # 팽창장치 이상: 고압 편차 >= -1
HIGH_DEV_CONDENSING: float = 2.0           # 응축 불량: 고압 편차 > 2
HIGH_DEV_CONDENSING_CRITICAL: float = 4.0  # 응축 불량 위험: 고압 편차 > 4
HIGH_DEV_COMPRESSOR: float = 0.0           # 압축기 효율 저하: 고압 편차 < 0

# ── 과열도 밴드 (°C) ─────────────────────────
SUPERHEAT_MIN: float = 3.0
SUPERHEAT_MAX: float = 15.0
