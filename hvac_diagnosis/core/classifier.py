"""
Fault Classifier
================

압력 편차·과열도·증상 체크리스트로 고장 패턴과 심각도를 판정한다.

• 규칙은 DEFAULT_RULES 순서대로 평가되며 각 규칙은 None(의견 없음) 또는 RuleOutcome 을 반환
• 결과는 max_severity 로 접어 심각도가 한 번의 판정 안에서 절대 낮아지지 않는다
• 패턴 키는 마지막으로 일치한 규칙의 것을 사용하고, 이슈 문구는 규칙 순서대로 쌓인다
"""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from hvac_diagnosis.config.constants import (
    HIGH_DEV_COMPRESSOR,
    HIGH_DEV_CONDENSING,
    HIGH_DEV_CONDENSING_CRITICAL,
    HIGH_DEV_NORMAL_FLOOR,
    HIGH_DEV_UNDERCHARGE,
    LOW_BAND_MARGIN,
    LOW_HIGH_COMPRESSOR_MARGIN,
    SUPERHEAT_MAX,
    SUPERHEAT_MIN
)
from hvac_diagnosis.config.fault_patterns import DEFAULT_ACTIONS, FAULT_PATTERNS, ISSUE_MESSAGES
from hvac_diagnosis.core.metrics import round1, round2
from hvac_diagnosis.core.pt_chart import RefrigerantLike
from hvac_diagnosis.models.diagnosis_models import (
    DiagnosisResult,
    FaultPattern,
    FieldStandard,
    PatternKey,
    Severity,
    Symptom,
    max_severity
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """규칙 평가 입력"""
    low_p: float
    high_p: float
    low_min: float
    low_max: float
    diff_low: float
    diff_high: float
    superheat: Optional[float] = None
    subcooling: Optional[float] = None
    compression_ratio: Optional[float] = None
    symptoms: FrozenSet[str] = frozenset()

    def has_symptom(self, symptom: Symptom) -> bool:
        return symptom.value in self.symptoms


@dataclass(frozen=True)
class RuleOutcome:
    pattern_key: PatternKey
    issue: str
    severity: Optional[Severity] = None  # None 이면 심각도에 관여하지 않음


@dataclass(frozen=True)
class _Verdict:
    severity: Severity = Severity.NORMAL
    pattern_key: Optional[PatternKey] = None
    issues: Tuple[str, ...] = field(default_factory=tuple)


Rule = Callable[[RuleContext], Optional[RuleOutcome]]


def _outcome(key: PatternKey, severity: Optional[Severity]) -> RuleOutcome:
    return RuleOutcome(pattern_key=key, issue=ISSUE_MESSAGES[key.value], severity=severity)


def pressure_pattern_rule(ctx: RuleContext) -> Optional[RuleOutcome]:
    """저압/고압 편차 조합 - 우선순위 순으로 하나만 일치"""
    if ctx.low_p < ctx.low_min - LOW_BAND_MARGIN and ctx.diff_high < HIGH_DEV_UNDERCHARGE:
        severity = Severity.CRITICAL if ctx.has_symptom(Symptom.SIGHT_GLASS_BUBBLES) else Severity.WARNING
        return _outcome(PatternKey.LOW_LOW, severity)

    if ctx.low_p < ctx.low_min - LOW_BAND_MARGIN and ctx.diff_high >= HIGH_DEV_NORMAL_FLOOR:
        return _outcome(PatternKey.LOW_NORMAL, Severity.WARNING)

    if ctx.low_p > ctx.low_max + LOW_BAND_MARGIN and ctx.diff_high > HIGH_DEV_CONDENSING:
        severity = Severity.CRITICAL if ctx.diff_high > HIGH_DEV_CONDENSING_CRITICAL else Severity.WARNING
        return _outcome(PatternKey.HIGH_HIGH, severity)

    if ctx.low_p > ctx.low_max + LOW_HIGH_COMPRESSOR_MARGIN and ctx.diff_high < HIGH_DEV_COMPRESSOR:
        severity = Severity.CRITICAL if ctx.has_symptom(Symptom.COMPRESSOR_NOISE) else Severity.WARNING
        return _outcome(PatternKey.HIGH_LOW, severity)

    return None


def superheat_rule(ctx: RuleContext) -> Optional[RuleOutcome]:
    """과열도 부족은 위험(액압축), 과다는 최소 경고"""
    if ctx.superheat is None:
        return None
    if ctx.superheat < SUPERHEAT_MIN:
        return _outcome(PatternKey.LOW_SUPERHEAT, Severity.CRITICAL)
    if ctx.superheat > SUPERHEAT_MAX:
        return _outcome(PatternKey.HIGH_SUPERHEAT, Severity.WARNING)
    return None


def hunting_rule(ctx: RuleContext) -> Optional[RuleOutcome]:
    if ctx.has_symptom(Symptom.HUNTING):
        return _outcome(PatternKey.HUNTING, None)
    return None


def compressor_noise_rule(ctx: RuleContext) -> Optional[RuleOutcome]:
    if ctx.has_symptom(Symptom.COMPRESSOR_NOISE):
        return _outcome(PatternKey.COMPRESSOR_NOISE, Severity.CRITICAL)
    return None


DEFAULT_RULES: Tuple[Rule, ...] = (
    pressure_pattern_rule,
    superheat_rule,
    hunting_rule,
    compressor_noise_rule,
)


def _fold(verdict: _Verdict, outcome: Optional[RuleOutcome]) -> _Verdict:
    if outcome is None:
        return verdict
    return _Verdict(
        severity=max_severity(verdict.severity, outcome.severity),
        pattern_key=outcome.pattern_key,
        issues=verdict.issues + (outcome.issue,)
    )


def _symptom_values(symptoms: Iterable) -> FrozenSet[str]:
    # 문자열은 글자 단위로 순회되어 증상이 조용히 무시되므로 거부한다
    if isinstance(symptoms, str):
        raise TypeError(f"symptoms 는 문자열이 아닌 목록이어야 합니다: {symptoms!r}")
    return frozenset(s.value if isinstance(s, Symptom) else str(s) for s in symptoms)


class FaultClassifier:
    def __init__(
        self,
        fault_patterns: Mapping[str, Mapping] = FAULT_PATTERNS,
        rules: Sequence[Rule] = DEFAULT_RULES,
        default_actions: Sequence[str] = DEFAULT_ACTIONS
    ):
        self.fault_patterns = {
            PatternKey(key): FaultPattern(**entry) for key, entry in fault_patterns.items()
        }
        self.rules = tuple(rules)
        self.default_actions = list(default_actions)

    def pattern(self, key: Optional[PatternKey]) -> Optional[FaultPattern]:
        if key is None:
            return None
        return self.fault_patterns.get(key)

    def classify(
        self,
        refrigerant: RefrigerantLike,
        low_p: float,
        high_p: float,
        standard: FieldStandard,
        target_high_p: float,
        superheat: Optional[float] = None,
        subcooling: Optional[float] = None,
        compression_ratio: Optional[float] = None,
        symptoms: Iterable = ()
    ) -> DiagnosisResult:
        low_min, low_max = standard.low_p_range
        diff_low = low_p - standard.low_p_target
        diff_high = high_p - target_high_p

        ctx = RuleContext(
            low_p=low_p,
            high_p=high_p,
            low_min=low_min,
            low_max=low_max,
            diff_low=diff_low,
            diff_high=diff_high,
            superheat=superheat,
            subcooling=subcooling,
            compression_ratio=compression_ratio,
            symptoms=_symptom_values(symptoms)
        )

        verdict = reduce(_fold, (rule(ctx) for rule in self.rules), _Verdict())

        issues: List[str] = list(verdict.issues)
        if not issues:
            issues.append(ISSUE_MESSAGES["normal"])
            actions = list(self.default_actions)
        else:
            pattern = self.pattern(verdict.pattern_key)
            actions = list(pattern.actions) if pattern else []

        logger.debug(
            f"{refrigerant} 진단: 저압 {low_p} (편차 {diff_low:+.2f}), 고압 {high_p} (편차 {diff_high:+.1f}) "
            f"→ {verdict.severity.value} / {verdict.pattern_key.value if verdict.pattern_key else '-'}"
        )

        return DiagnosisResult(
            issues=issues,
            actions=actions,
            severity=verdict.severity,
            pattern_key=verdict.pattern_key,
            diff_low=round2(diff_low),
            diff_high=round1(diff_high),
            low_range=(low_min, low_max),
            low_target=standard.low_p_target
        )


# 전역 인스턴스
fault_classifier = FaultClassifier()


def classify(refrigerant: RefrigerantLike, low_p: float, high_p: float, standard: FieldStandard,
             target_high_p: float, superheat: Optional[float] = None, subcooling: Optional[float] = None,
             compression_ratio: Optional[float] = None, symptoms: Iterable = ()) -> DiagnosisResult:
    return fault_classifier.classify(
        refrigerant, low_p, high_p, standard, target_high_p,
        superheat, subcooling, compression_ratio, symptoms
    )
