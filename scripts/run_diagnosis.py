#!/usr/bin/env python3
"""냉동 사이클 진단 실행 스크립트 (설치 없이 저장소에서 바로 실행)"""

import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hvac_diagnosis.cli import main


if __name__ == "__main__":
    sys.exit(main())
