# config/fault_patterns.py
"""고장 패턴 사전 - 압력/증상 조합별 원인, 동반 증상, 조치, 주의사항"""

FAULT_PATTERNS = {
    "low_low": {
        "causes": [
            "냉매 누설로 인한 충전량 부족",
            "초기 충전량 부족",
            "서비스 밸브/플레어 접속부 누설"
        ],
        "symptoms": ["액면계 거품", "증발기 일부만 성에", "냉각 시간 증가"],
        "actions": [
            "1. 누설 탐지기로 용접부·플레어·밸브 점검",
            "2. 누설 부위 수리 후 질소 기밀 시험",
            "3. 진공 작업 후 규정량 액상 충전",
            "4. 과냉도·액면계로 충전량 확인"
        ],
        "caution": "누설 수리 없이 냉매만 보충하면 재발합니다. 혼합냉매는 반드시 액상 충전하세요."
    },

    "low_normal": {
        "causes": [
            "팽창밸브(TXV) 감온통 이탈 또는 가스 누설",
            "드라이어/스트레이너 막힘",
            "증발기 팬 정지 또는 착상 과다"
        ],
        "symptoms": ["드라이어 전후 온도차", "증발기 과다 착상", "흡입배관 성에"],
        "actions": [
            "1. 드라이어 전후 온도차 측정 (2°C 이상이면 막힘)",
            "2. 팽창밸브 감온통 부착 상태·보온 확인",
            "3. 증발기 팬 작동 및 제상 상태 점검",
            "4. 필요 시 드라이어 또는 팽창밸브 교체"
        ],
        "caution": "저압만 보고 냉매를 추가 충전하면 고압 상승과 과충전을 유발합니다."
    },

    "high_high": {
        "causes": [
            "응축기 핀 오염 또는 막힘",
            "응축기 팬 모터 고장",
            "비응축 가스(공기) 혼입",
            "냉매 과충전"
        ],
        "symptoms": ["토출배관 과열", "고압 차단기 트립", "압축기 운전 전류 상승"],
        "actions": [
            "1. 응축기 핀 세척 및 주변 통풍 확보",
            "2. 응축기 팬 회전 방향·속도 확인",
            "3. 정지 상태 압력으로 비응축 가스 여부 판단",
            "4. 과충전 시 냉매 회수 후 규정량 재충전"
        ],
        "caution": "고압이 계속 상승하면 즉시 운전을 정지하세요. 고압 차단기를 임의로 단락하지 마세요."
    },

    "high_low": {
        "causes": [
            "압축기 밸브 플레이트 손상",
            "피스톤 링/스크롤 마모",
            "고저압 바이패스(내부 누설)"
        ],
        "symptoms": ["압축기 소음", "운전 전류 저하", "냉각 능력 저하"],
        "actions": [
            "1. 압축기 운전 전류를 정격과 비교",
            "2. 저압측 서비스 밸브 차단 후 펌프다운 시험",
            "3. 압축비 확인 (정상 대비 현저히 낮음)",
            "4. 효율 저하 확인 시 압축기 교체 검토"
        ],
        "caution": "압축기 교체 시 오일 산성도를 확인하고 드라이어를 함께 교체하세요."
    },

    "low_superheat": {
        "causes": [
            "팽창밸브 과다 개방 또는 감온통 이탈",
            "증발기 팬 정지·풍량 부족",
            "냉매 과충전"
        ],
        "symptoms": ["흡입배관 결로/성에", "압축기 헤드 냉각", "압축기 타격음"],
        "actions": [
            "1. 즉시 팽창밸브 과열도 조정 (시계방향으로 조임)",
            "2. 감온통 부착 위치·보온 상태 확인",
            "3. 증발기 팬 및 필터 점검",
            "4. 과충전 여부 확인 후 냉매 회수"
        ],
        "caution": "액압축은 압축기 밸브 파손의 주원인입니다. 원인 해소 전까지 장시간 운전을 금지하세요."
    },

    "high_superheat": {
        "causes": [
            "냉매 부족",
            "팽창밸브 개도 부족 또는 막힘",
            "드라이어 막힘"
        ],
        "symptoms": ["토출온도 상승", "압축기 과열", "냉각 불량"],
        "actions": [
            "1. 냉매 충전량 확인 (액면계, 과냉도)",
            "2. 팽창밸브 과열도 조정 (반시계방향으로 풀기)",
            "3. 드라이어 전후 온도차 확인"
        ],
        "caution": "과열도 과다 상태가 지속되면 압축기 권선 과열과 오일 탄화가 발생합니다."
    },

    "hunting": {
        "causes": [
            "팽창밸브 용량 과대",
            "감온통 부착 불량",
            "부하 변동이 큰 운전 조건"
        ],
        "symptoms": ["저압 게이지 바늘 주기적 흔들림", "과열도 불안정"],
        "actions": [
            "1. 감온통 부착 위치(흡입관 수평부 4~5시 방향) 확인",
            "2. 과열도를 약간 높게 재조정",
            "3. 팽창밸브 오리피스 용량 확인"
        ],
        "caution": "헌팅 중에는 순간 과열도가 0에 가까워질 수 있어 액백에 주의하세요."
    },

    "compressor_noise": {
        "causes": [
            "액압축(액백)",
            "베어링 마모",
            "마운팅 고무 열화·고정 볼트 풀림",
            "오일 부족"
        ],
        "symptoms": ["금속성 타격음", "진동 증가", "운전 전류 변동"],
        "actions": [
            "1. 즉시 운전 정지 후 원인 확인",
            "2. 과열도 측정으로 액압축 여부 판단",
            "3. 오일 레벨 및 마운팅 상태 점검",
            "4. 베어링 손상 시 압축기 교체"
        ],
        "caution": "이상 소음 상태로 운전을 계속하면 압축기 소손으로 이어집니다."
    }
}

# 패턴 표시명
PATTERN_LABELS = {
    "low_low": "저압 낮음 + 고압 낮음",
    "low_normal": "저압 낮음 + 고압 정상",
    "high_high": "저압 높음 + 고압 높음",
    "high_low": "저압 높음 + 고압 낮음",
    "low_superheat": "과열도 부족 (3°C 미만)",
    "high_superheat": "과열도 과다 (15°C 초과)",
    "hunting": "헌팅 (바늘 흔들림)",
    "compressor_noise": "압축기 이상 소음"
}

# 진단 이슈 문구
ISSUE_MESSAGES = {
    "low_low": "🔴 냉매 부족 (Undercharge)",
    "low_normal": "🟠 팽창장치/증발기 이상",
    "high_high": "🔴 응축 불량",
    "high_low": "🔴 압축기 효율 저하",
    "low_superheat": "🔴 과열도 부족 → 액압축 위험!",
    "high_superheat": "🟠 과열도 과다",
    "hunting": "🟡 TXV 헌팅",
    "compressor_noise": "🔴 압축기 이상 소음 - 즉시 점검!",
    "normal": "✅ 시스템 정상"
}

DEFAULT_ACTIONS = ["정기 점검 주기 준수"]

# 게이지 점검 시 체크 가능한 증상
SYMPTOM_OPTIONS = ["헌팅", "배관 성에", "액면계 거품", "압축기 소음"]
