# analyzer.py
"""Password strength analysis engine: checks, score, crack time and feedback."""
import getpass
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

# ---------------- CONFIG / THRESHOLDS ----------------
MIN_LENGTH = 8
STRONG_LENGTH = 12
MEDIUM_SCORE = 50                  # score >= this is at least "medium"
STRONG_SCORE = 75                  # score >= this is "strong"
GUESSES_PER_SECOND = 10_000_000_000
MAX_LOG10_SECONDS = 300            # beyond this the power is not materialised

SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

COMMON_PATTERNS = (
    "password", "123456", "qwerty", "abc123", "letmein",
    "111111", "123123", "admin", "welcome", "monkey",
    "1234", "pass", "test", "guest", "master",
)

# class size added to the charset when the class appears at least once
LOWER_SIZE, UPPER_SIZE, DIGIT_SIZE, SYMBOL_SIZE = 26, 26, 10, 32
DEFAULT_CHARSET = 26

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 12 * MONTH

WEAK, MEDIUM, STRONG = "weak", "medium", "strong"

EXPLANATIONS = {
    WEAK: (
        "Your password meets only {passed} of {total} security checks. "
        "Weak passwords can be cracked in minutes or seconds by automated tools. "
        'Hackers use "dictionary attacks" that try millions of common passwords and patterns.'
    ),
    MEDIUM: (
        "Your password meets {passed} of {total} security checks. "
        "It's better than average, but could still be vulnerable to determined attackers. "
        "Adding more variety will make it much stronger."
    ),
    STRONG: (
        "Excellent! Your password meets {passed} of {total} security checks. "
        "It uses a good mix of characters and length, making it very difficult "
        "for attackers to guess or crack using automated tools."
    ),
}

# ---------------- BASIC HELPERS ----------------
def has_upper(p: str) -> bool: return re.search(r"[A-Z]", p) is not None
def has_lower(p: str) -> bool: return re.search(r"[a-z]", p) is not None
def has_digit(p: str) -> bool: return re.search(r"[0-9]", p) is not None
def has_symbol(p: str) -> bool: return any(c in SYMBOLS for c in p)

def has_common_pattern(p: str) -> bool:
    s = p.lower()
    return any(pattern in s for pattern in COMMON_PATTERNS)

def round_half_up(v: float) -> int:
    # Python's round() is banker's rounding; the buckets want .5 to go up
    return int(math.floor(v + 0.5))

# ---------------- DATA ----------------
@dataclass(frozen=True)
class Criterion:
    id: str
    label: str
    passed: bool
    description: str


@dataclass(frozen=True)
class AnalysisReport:
    strength: str
    score: int
    checks: Tuple[Criterion, ...]
    crack_time: str
    suggestions: Tuple[str, ...]
    explanation: str

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.checks if c.passed)


@dataclass(frozen=True)
class CheckRule:
    id: str
    label: str
    description: str
    suggestion: str
    predicate: Callable[[str], bool]


# Order matters: it drives display order and suggestion order.
CHECK_RULES: Tuple[CheckRule, ...] = (
    CheckRule("length", "At least 8 characters",
              "Longer passwords are harder to guess",
              "Add more characters to reach at least 8",
              lambda p: len(p) >= MIN_LENGTH),
    CheckRule("length-strong", "At least 12 characters",
              "Very long passwords are extremely secure",
              "Try to use 12 or more characters for maximum security",
              lambda p: len(p) >= STRONG_LENGTH),
    CheckRule("uppercase", "Contains uppercase letter",
              "Mix of upper and lowercase increases complexity",
              "Add an uppercase letter (A-Z)",
              has_upper),
    CheckRule("lowercase", "Contains lowercase letter",
              "Lowercase letters are essential",
              "Add a lowercase letter (a-z)",
              has_lower),
    CheckRule("number", "Contains a number",
              "Numbers add another layer of complexity",
              "Include at least one number (0-9)",
              has_digit),
    CheckRule("symbol", "Contains a symbol",
              "Symbols like !@#$% make passwords much stronger",
              "Add a special character like !@#$%^&*",
              has_symbol),
    CheckRule("no-common", "Avoids common patterns",
              'Avoid "123", "abc", "password", etc.',
              "Avoid common words and patterns",
              lambda p: not has_common_pattern(p)),
)

SUGGESTIONS: Dict[str, str] = {rule.id: rule.suggestion for rule in CHECK_RULES}

# ---------------- CRITERION EVALUATOR ----------------
def evaluate_checks(password: str) -> Tuple[Criterion, ...]:
    return tuple(
        Criterion(id=rule.id, label=rule.label, passed=bool(rule.predicate(password)),
                  description=rule.description)
        for rule in CHECK_RULES
    )

# ---------------- SCORER ----------------
def score_checks(checks: Sequence[Criterion]) -> int:
    if not checks:
        return 0
    passed = sum(1 for c in checks if c.passed)
    return round_half_up(passed / len(checks) * 100)

def strength_for(score: int) -> str:
    if score < MEDIUM_SCORE: return WEAK
    if score < STRONG_SCORE: return MEDIUM
    return STRONG

# ---------------- CRACK-TIME ESTIMATOR ----------------
def charset_size(password: str) -> int:
    size = 0
    if has_lower(password): size += LOWER_SIZE
    if has_upper(password): size += UPPER_SIZE
    if has_digit(password): size += DIGIT_SIZE
    if has_symbol(password): size += SYMBOL_SIZE
    return size or DEFAULT_CHARSET

def crack_seconds(password: str) -> float:
    """Seconds to exhaust charset_size ** len(password) at GUESSES_PER_SECOND.

    Returns ``math.inf`` when the result would not fit a float.
    """
    if not password:
        return 0.0
    size = charset_size(password)
    log10_seconds = len(password) * math.log10(size) - math.log10(GUESSES_PER_SECOND)
    if log10_seconds > MAX_LOG10_SECONDS:
        return math.inf
    return size ** len(password) / GUESSES_PER_SECOND

def format_duration(seconds: float) -> str:
    if seconds < 1:
        return "Less than a second"
    if seconds < MINUTE:
        return f"{round_half_up(seconds)} seconds"
    if seconds < HOUR:
        return f"{round_half_up(seconds / MINUTE)} minutes"
    if seconds < DAY:
        return f"{round_half_up(seconds / HOUR)} hours"
    if seconds < MONTH:
        return f"{round_half_up(seconds / DAY)} days"
    if seconds < YEAR:
        return f"{round_half_up(seconds / MONTH)} months"

    years = seconds / YEAR
    if years < 1_000:
        return f"{round_half_up(years)} years"
    if years < 1_000_000:
        return f"{round_half_up(years / 1_000)}K years"
    if years < 1_000_000_000:
        return f"{round_half_up(years / 1_000_000)}M years"
    if years < 1_000_000_000_000:
        return f"{round_half_up(years / 1_000_000_000)}B years"
    return "Centuries"

def estimate_crack_time(password: str) -> str:
    if not password:
        return "Instantly"
    return format_duration(crack_seconds(password))

# ---------------- FEEDBACK ----------------
def build_suggestions(checks: Sequence[Criterion]) -> Tuple[str, ...]:
    return tuple(SUGGESTIONS[c.id] for c in checks if not c.passed and c.id in SUGGESTIONS)

def build_explanation(strength: str, passed: int, total: int) -> str:
    return EXPLANATIONS[strength].format(passed=passed, total=total)

# ---------------- CORE ANALYSIS ----------------
def analyze_password(password: str) -> AnalysisReport:
    checks = evaluate_checks(password)
    score = score_checks(checks)
    strength = strength_for(score)
    passed = sum(1 for c in checks if c.passed)

    return AnalysisReport(
        strength=strength,
        score=score,
        checks=checks,
        crack_time=estimate_crack_time(password),
        suggestions=build_suggestions(checks),
        explanation=build_explanation(strength, passed, len(checks)),
    )

# ---------------- CLI ----------------
def main(password: Optional[str] = None) -> None:
    if password is None:
        password = getpass.getpass("Enter your password (hidden): ")
    report = analyze_password(password)

    print(f"\nStrength: {report.strength} ({report.score}/100)")
    print(f"Estimated crack time: {report.crack_time}")
    for c in report.checks:
        print(f"  [{'x' if c.passed else ' '}] {c.label}")
    if report.suggestions:
        print("\nSuggestions:")
        for s in report.suggestions:
            print(" -", s)
    else:
        print("\nAll checks passed.")
    print("\n" + report.explanation)

if __name__ == "__main__":
    main()


# ---------------- End of file ----------------
