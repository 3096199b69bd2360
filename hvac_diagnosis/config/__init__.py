"""Configuration modules, settings and static reference tables."""

from .settings import (
    settings,
    Settings,
    APP_CONFIG,
    REPORT_CONFIG
)

from .pt_chart import (
    PT_CHART,
    REFRIGERANT_INFO
)

from .field_standards import (
    FIELD_STANDARDS,
    DEFAULT_FIELD_STANDARD,
    FACILITY_OPTIONS
)

from .fault_patterns import (
    FAULT_PATTERNS,
    PATTERN_LABELS,
    ISSUE_MESSAGES,
    DEFAULT_ACTIONS,
    SYMPTOM_OPTIONS
)

from .workflows import (
    WORKFLOW_RECOMMENDATIONS,
    DIFFICULTY_LABELS
)

from .customer_diagnosis import (
    SYMPTOM_CATEGORIES,
    DETAIL_QUESTIONS,
    CUSTOMER_DIAGNOSIS_RULES,
    DEFAULT_CUSTOMER_DIAGNOSIS
)

__all__ = [
    # Settings
    'settings',
    'Settings',
    'APP_CONFIG',
    'REPORT_CONFIG',

    # P-T Chart
    'PT_CHART',
    'REFRIGERANT_INFO',

    # Field Standards
    'FIELD_STANDARDS',
    'DEFAULT_FIELD_STANDARD',
    'FACILITY_OPTIONS',

    # Fault Patterns
    'FAULT_PATTERNS',
    'PATTERN_LABELS',
    'ISSUE_MESSAGES',
    'DEFAULT_ACTIONS',
    'SYMPTOM_OPTIONS',

    # Workflows
    'WORKFLOW_RECOMMENDATIONS',
    'DIFFICULTY_LABELS',

    # Customer self-diagnosis
    'SYMPTOM_CATEGORIES',
    'DETAIL_QUESTIONS',
    'CUSTOMER_DIAGNOSIS_RULES',
    'DEFAULT_CUSTOMER_DIAGNOSIS'
]
