# config/workflows.py
"""증상 ID별 권장 점검 워크플로우 (공구, 부품, 점검 순서)"""

WORKFLOW_RECOMMENDATIONS = [
    {
        "symptom_ids": ["temp-not-cooling", "no-sound", "power-on-not-running"],
        "required_tools": ["멀티미터", "압력 게이지", "온도계", "기본 공구 세트"],
        "optional_parts": ["냉매 (R-404A/R-22)", "압축기", "팬 모터", "온도 센서"],
        "check_sequence": [
            {"order": 1, "title": "전원 점검", "description": "전압, 차단기 상태 확인",
             "caution_note": "전기 작업 시 안전 주의"},
            {"order": 2, "title": "압축기 점검", "description": "작동 소리, 발열 상태 확인"},
            {"order": 3, "title": "냉매 압력 측정", "description": "고압/저압 게이지 연결",
             "caution_note": "냉매 취급 시 보호장비 착용"},
            {"order": 4, "title": "증발기/응축기 점검", "description": "성에, 먼지, 팬 작동 확인"}
        ],
        "estimated_duration": {"min": 60, "max": 180},
        "difficulty": "expert"
    },
    {
        "symptom_ids": ["excessive-frost", "ice-buildup"],
        "required_tools": ["멀티미터", "온도계", "드라이버 세트"],
        "optional_parts": ["제상 타이머", "제상 히터", "온도 센서"],
        "check_sequence": [
            {"order": 1, "title": "제상 타이머 확인", "description": "설정값 및 작동 상태 점검"},
            {"order": 2, "title": "제상 히터 점검", "description": "저항값 측정 및 연결 상태 확인"},
            {"order": 3, "title": "배수 라인 점검", "description": "막힘 여부 확인"}
        ],
        "estimated_duration": {"min": 45, "max": 120},
        "difficulty": "medium"
    },
    {
        "symptom_ids": ["water-leak", "floor-water"],
        "required_tools": ["배수 청소 도구", "드라이버 세트", "손전등"],
        "optional_parts": ["배수 호스", "배수 펌프", "배수 팬"],
        "check_sequence": [
            {"order": 1, "title": "누수 위치 확인", "description": "정확한 누수 지점 파악"},
            {"order": 2, "title": "배수 라인 점검", "description": "막힘 또는 손상 확인"},
            {"order": 3, "title": "배수 팬 점검", "description": "상태 및 수위 확인"}
        ],
        "estimated_duration": {"min": 30, "max": 90},
        "difficulty": "easy"
    },
    {
        "symptom_ids": ["door-not-closing", "physical-damage"],
        "required_tools": ["드라이버 세트", "렌치", "수평계"],
        "optional_parts": ["도어 가스켓", "경첩", "도어 래치"],
        "check_sequence": [
            {"order": 1, "title": "가스켓 점검", "description": "손상, 변형, 오염 확인"},
            {"order": 2, "title": "도어 정렬 확인", "description": "수평/수직 상태 점검"},
            {"order": 3, "title": "경첩/래치 점검", "description": "헐거움 또는 손상 확인"}
        ],
        "estimated_duration": {"min": 20, "max": 90},
        "difficulty": "easy"
    },
    {
        "symptom_ids": ["no-power"],
        "required_tools": ["멀티미터", "드라이버 세트"],
        "optional_parts": ["퓨즈", "전원 케이블", "제어보드"],
        "check_sequence": [
            {"order": 1, "title": "전원 공급 확인", "description": "차단기, 콘센트 전압 측정"},
            {"order": 2, "title": "전원부 점검", "description": "퓨즈, 터미널 상태 확인"},
            {"order": 3, "title": "제어보드 점검", "description": "표시등, 이상 여부 확인"}
        ],
        "estimated_duration": {"min": 30, "max": 120},
        "difficulty": "medium"
    },
    {
        "symptom_ids": ["strange-noise", "too-loud"],
        "required_tools": ["청음봉", "드라이버 세트", "윤활유"],
        "optional_parts": ["팬 모터", "베어링", "마운팅 고무"],
        "check_sequence": [
            {"order": 1, "title": "소음 위치 파악", "description": "압축기, 팬, 배관 등 확인"},
            {"order": 2, "title": "팬 점검", "description": "블레이드 손상, 베어링 마모 확인"},
            {"order": 3, "title": "고정부 점검", "description": "볼트 풀림, 진동 확인"}
        ],
        "estimated_duration": {"min": 30, "max": 90},
        "difficulty": "medium"
    }
]

DIFFICULTY_LABELS = {
    "easy": "쉬움",
    "medium": "보통",
    "hard": "어려움",
    "expert": "전문가"
}
