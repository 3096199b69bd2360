# config/customer_diagnosis.py
"""고객 자가 진단 데이터 (증상 분류, 세부 질문, 답변 기반 판정 규칙)"""

SYMPTOM_CATEGORIES = [
    {
        "id": "power-operation",
        "name": "전원/작동",
        "symptoms": [
            {"id": "no-power", "name": "전원이 안 들어옴",
             "description": "전원 표시등이 꺼져있거나 디스플레이가 작동하지 않음", "severity": "critical"},
            {"id": "power-on-not-running", "name": "전원은 들어오나 작동 안함",
             "description": "전원 표시등은 켜져있으나 냉각이 되지 않음", "severity": "high"},
            {"id": "intermittent-operation", "name": "간헐적으로 작동/정지",
             "description": "작동과 정지를 반복함", "severity": "medium"}
        ]
    },
    {
        "id": "temperature",
        "name": "온도",
        "symptoms": [
            {"id": "temp-not-cooling", "name": "온도가 안 내려감",
             "description": "설정 온도보다 높게 유지됨", "severity": "high"},
            {"id": "temp-too-cold", "name": "온도가 너무 내려감",
             "description": "설정 온도보다 과도하게 낮음", "severity": "medium"},
            {"id": "temp-display-error", "name": "온도 표시 이상",
             "description": "온도계가 이상한 값을 표시하거나 에러 코드 표시", "severity": "medium"},
            {"id": "temp-fluctuation", "name": "온도 변동이 심함",
             "description": "온도가 계속 오르락내리락 함", "severity": "medium"}
        ]
    },
    {
        "id": "sound",
        "name": "소리",
        "symptoms": [
            {"id": "strange-noise", "name": "이상한 소리가 남",
             "description": "평소와 다른 소리 (덜컹거림, 쇳소리, 삑삑거림 등)", "severity": "medium"},
            {"id": "no-sound", "name": "소리가 안 남",
             "description": "압축기 소리가 전혀 들리지 않음", "severity": "high"},
            {"id": "too-loud", "name": "너무 시끄러움",
             "description": "평소보다 소음이 과도하게 큼", "severity": "low"}
        ]
    },
    {
        "id": "frost-ice",
        "name": "성에/결빙",
        "symptoms": [
            {"id": "excessive-frost", "name": "성에가 많이 낌",
             "description": "증발기나 벽면에 성에가 과도하게 생김", "severity": "medium"},
            {"id": "ice-buildup", "name": "얼음이 얼어붙음",
             "description": "두꺼운 얼음층이 생김", "severity": "high"}
        ]
    },
    {
        "id": "leak-moisture",
        "name": "누수/습기",
        "symptoms": [
            {"id": "water-leak", "name": "물이 샘",
             "description": "설비 내부나 외부에서 물이 샘", "severity": "high"},
            {"id": "floor-water", "name": "바닥에 물이 고임",
             "description": "바닥에 물웅덩이가 생김", "severity": "medium"},
            {"id": "excessive-condensation", "name": "결로가 심함",
             "description": "외부 표면에 물방울이 많이 맺힘", "severity": "low"}
        ]
    },
    {
        "id": "exterior",
        "name": "외관",
        "symptoms": [
            {"id": "door-not-closing", "name": "문이 안 닫힘",
             "description": "문이 제대로 닫히지 않거나 밀폐가 안됨", "severity": "high"},
            {"id": "light-issue", "name": "조명이 안 들어옴",
             "description": "내부 조명이 작동하지 않음", "severity": "low"},
            {"id": "physical-damage", "name": "외관 손상",
             "description": "문짝, 가스켓, 패널 등의 물리적 손상", "severity": "medium"}
        ]
    }
]

# 질문 ID → (증상 ID, 질문, 선택 유형, 답변 값 목록)
DETAIL_QUESTIONS = [
    {"id": "temp-not-cooling-q1", "symptom_id": "temp-not-cooling", "question": "현재 온도가 몇 도인가요?",
     "type": "single", "values": ["0-5", "5-10", "10-15", "15+"]},
    {"id": "temp-not-cooling-q2", "symptom_id": "temp-not-cooling", "question": "언제부터 증상이 시작되었나요?",
     "type": "single", "values": ["today", "2-3days", "week", "longer"]},
    {"id": "temp-not-cooling-q3", "symptom_id": "temp-not-cooling", "question": "압축기(모터) 소리가 들리나요?",
     "type": "single", "values": ["yes", "intermittent", "no", "unknown"]},
    {"id": "no-power-q1", "symptom_id": "no-power", "question": "차단기는 정상인가요?",
     "type": "single", "values": ["on", "off", "unknown"]},
    {"id": "no-power-q2", "symptom_id": "no-power", "question": "같은 회로의 다른 기기는 작동하나요?",
     "type": "single", "values": ["yes", "no", "unknown"]},
    {"id": "excessive-frost-q1", "symptom_id": "excessive-frost", "question": "성에가 어디에 주로 생기나요?",
     "type": "multiple", "values": ["evaporator", "walls", "door", "ceiling"]},
    {"id": "excessive-frost-q2", "symptom_id": "excessive-frost", "question": "제상(디프로스트) 기능이 작동하나요?",
     "type": "single", "values": ["yes", "no", "unknown"]},
    {"id": "water-leak-q1", "symptom_id": "water-leak", "question": "물이 어디서 새나요?",
     "type": "single", "values": ["inside", "outside", "bottom", "door"]},
    {"id": "water-leak-q2", "symptom_id": "water-leak", "question": "물의 양이 어느 정도인가요?",
     "type": "single", "values": ["drip", "puddle", "continuous"]},
    {"id": "strange-noise-q1", "symptom_id": "strange-noise", "question": "어떤 종류의 소리인가요?",
     "type": "single", "values": ["rattling", "squealing", "grinding", "humming"]},
    {"id": "door-not-closing-q1", "symptom_id": "door-not-closing", "question": "문의 상태는 어떤가요?",
     "type": "multiple", "values": ["warped", "gasket", "hinge", "latch"]}
]

# 규칙은 순서대로 평가되고 처음 일치한 규칙의 min/max 결과를 사용한다.
# match 가 "first" 면 첫 번째 답변만, "any" 면 답변 전체에서 값을 찾는다.
CUSTOMER_DIAGNOSIS_RULES = [
    {
        "symptom_ids": ["temp-not-cooling"],
        "question_id": "temp-not-cooling-q3",
        "values": ["no"],
        "match": "first",
        "min": {"cause": "압축기 과열 보호 작동", "action": "30분 후 재시작 시도",
                "estimated_time": "30분~1시간", "urgency": "medium", "self_fixable": True},
        "max": {"cause": "압축기 고장 또는 냉매 누출", "action": "전문가 점검 필요 (압축기 교체 가능성)",
                "estimated_time": "2~6시간", "urgency": "critical", "self_fixable": False}
    },
    {
        "symptom_ids": ["temp-not-cooling"],
        "question_id": "temp-not-cooling-q1",
        "values": ["15+", "10-15"],
        "match": "first",
        "min": {"cause": "냉매 부족 또는 필터 막힘", "action": "필터 청소 후 관찰",
                "estimated_time": "1~2시간", "urgency": "high", "self_fixable": False},
        "max": {"cause": "냉매 누출 또는 시스템 문제", "action": "누출 탐지 및 수리, 냉매 재충전",
                "estimated_time": "3~6시간", "urgency": "critical", "self_fixable": False}
    },
    {
        "symptom_ids": ["no-power"],
        "question_id": "no-power-q1",
        "values": ["off"],
        "match": "first",
        "min": {"cause": "과부하로 차단기 작동", "action": "차단기 올리고 재시작",
                "estimated_time": "5분", "urgency": "low", "self_fixable": True},
        "max": {"cause": "전기 회로 문제 또는 단락", "action": "전기 기사 점검 필요",
                "estimated_time": "1~3시간", "urgency": "high", "self_fixable": False}
    },
    {
        "symptom_ids": ["excessive-frost", "ice-buildup"],
        "question_id": "excessive-frost-q2",
        "values": ["no"],
        "match": "first",
        "min": {"cause": "제상 타이머 설정 문제", "action": "제상 타이머 재설정",
                "estimated_time": "30분", "urgency": "medium", "self_fixable": False},
        "max": {"cause": "제상 히터 또는 센서 고장", "action": "제상 시스템 부품 교체",
                "estimated_time": "2~4시간", "urgency": "high", "self_fixable": False}
    },
    {
        "symptom_ids": ["water-leak", "floor-water"],
        "question_id": "water-leak-q1",
        "values": ["bottom"],
        "match": "first",
        "min": {"cause": "배수구 막힘", "action": "배수구 청소",
                "estimated_time": "30분", "urgency": "low", "self_fixable": True},
        "max": {"cause": "배수 펌프 고장 또는 배관 파손", "action": "펌프/배관 교체",
                "estimated_time": "2~3시간", "urgency": "high", "self_fixable": False}
    },
    {
        "symptom_ids": ["door-not-closing"],
        "question_id": "door-not-closing-q1",
        "values": ["gasket"],
        "match": "any",
        "min": {"cause": "가스켓 오염 또는 경미한 변형", "action": "가스켓 청소 또는 드라이어로 복원",
                "estimated_time": "20분", "urgency": "low", "self_fixable": True},
        "max": {"cause": "가스켓 완전 손상", "action": "가스켓 교체",
                "estimated_time": "1~2시간", "urgency": "medium", "self_fixable": False}
    },
    {
        "symptom_ids": ["strange-noise"],
        "question_id": "strange-noise-q1",
        "values": ["grinding"],
        "match": "first",
        "min": {"cause": "팬 블레이드에 이물질", "action": "팬 청소",
                "estimated_time": "30분", "urgency": "medium", "self_fixable": False},
        "max": {"cause": "압축기 베어링 손상", "action": "압축기 교체 필요",
                "estimated_time": "4~8시간", "urgency": "critical", "self_fixable": False}
    }
]

# 일치하는 규칙이 없을 때의 기본 판정 (max 의 urgency 는 증상 심각도 최댓값으로 대체)
DEFAULT_CUSTOMER_DIAGNOSIS = {
    "min": {"cause": "일시적인 문제 또는 설정 오류", "action": "설정 확인 후 재시작 시도",
            "estimated_time": "10~30분", "urgency": "low", "self_fixable": True},
    "max": {"cause": "부품 고장 또는 시스템 문제", "action": "전문가 점검 필요",
            "estimated_time": "1~4시간", "urgency": "high", "self_fixable": False}
}

DIAGNOSIS_CODE_CHARS = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
DIAGNOSIS_CODE_LENGTH = 6
