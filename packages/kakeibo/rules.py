"""Fixed spending categories and the ordered rule chain that assigns them.

Rules are evaluated top to bottom against a row's merchant name and cleaned
usage amount; the first rule whose predicate holds decides the category. A
row matched by no rule falls into :data:`CATCH_ALL`.

Evaluation order and display order differ: Suica is tested before
subscriptions, but results list subscriptions first (see
:data:`CATEGORY_ORDER`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

CONVENIENCE_STORE = "コンビニ"
POVO = "povo"
SUBSCRIPTION = "サブスク"
SUICA = "Suica"
SMALL_JCB_PAYMENT = "少額決済(JCB)"
CATCH_ALL = "その他"

CATEGORY_ORDER: tuple[str, ...] = (
    CONVENIENCE_STORE,
    POVO,
    SUBSCRIPTION,
    SUICA,
    SMALL_JCB_PAYMENT,
    CATCH_ALL,
)

# Half-width katakana, as the card issuer prints them.
CONVENIENCE_STORES: tuple[str, ...] = ("ｾﾌﾞﾝ-ｲﾚﾌﾞﾝ", "ﾌｱﾐﾘｰﾏｰﾄ", "ﾛｰｿﾝ")

SUBSCRIPTIONS: tuple[str, ...] = (
    "chocoZAP",
    "ﾁｮｺｻﾞｯﾌﾟ",
    "CLAUDE.AI",
    "ADOBESYS",
    "SCRIBD.C",
    "ﾕｰﾈｸｽﾄ",
    "AMAZON WEB SERVICES",
    "GOOGLE WORKSPACE",
    "NETFLIX",
    "SPOTIFY",
)

SUICA_MARKER = "Ｓｕｉｃａ"
JCB_MARKER = "ＪＣＢ"
SMALL_JCB_LIMIT = 1200


@dataclass(frozen=True, slots=True)
class Rule:
    """A single ``(category, predicate)`` entry of the rule chain."""

    category: str
    predicate: Callable[[str, int], bool]
    description: str

    def matches(self, merchant: str, amount: int) -> bool:
        return self.predicate(merchant, amount)


def _is_convenience_store(merchant: str, amount: int) -> bool:
    return any(store in merchant for store in CONVENIENCE_STORES)


def _is_povo(merchant: str, amount: int) -> bool:
    return "povo" in merchant.lower()


def _is_suica(merchant: str, amount: int) -> bool:
    return SUICA_MARKER in merchant


def _is_subscription(merchant: str, amount: int) -> bool:
    upper = merchant.upper()
    return any(sub.upper() in upper for sub in SUBSCRIPTIONS)


def _is_small_jcb_payment(merchant: str, amount: int) -> bool:
    return JCB_MARKER in merchant and amount <= SMALL_JCB_LIMIT


# Ordering matters: earlier matches win. Descriptions are shown by ``kakeibo rules``.
RULES: tuple[Rule, ...] = (
    Rule(
        CONVENIENCE_STORE,
        _is_convenience_store,
        "「セブン-イレブン」「ファミリーマート」「ローソン」が店名に含まれる利用。",
    ),
    Rule(POVO, _is_povo, "「povo」が店名に含まれる利用（大文字・小文字を区別しない）。"),
    Rule(SUICA, _is_suica, f"「{SUICA_MARKER}」が店名に含まれる利用。"),
    Rule(
        SUBSCRIPTION,
        _is_subscription,
        "事前定義されたリスト（chocoZAP, CLAUDE.AI, Adobe等）に合致する利用。",
    ),
    Rule(
        SMALL_JCB_PAYMENT,
        _is_small_jcb_payment,
        f"上記以外で{SMALL_JCB_LIMIT}円以下の「{JCB_MARKER}」利用。",
    ),
)

CATCH_ALL_DESCRIPTION = (
    "上記のいずれにも当てはまらない利用。"
    "合計金額はCSVの9列目（「X月支払金額」）を使用します。"
)


def match_rule(merchant: str, amount: int) -> Rule | None:
    """Return the first rule matching ``merchant``/``amount``.

    ``None`` means no rule applies and the row belongs to :data:`CATCH_ALL`.
    """

    for rule in RULES:
        if rule.matches(merchant, amount):
            return rule
    return None


def categorize(merchant: str, amount: int) -> str:
    """Return the category name for a valid row's merchant and amount."""

    rule = match_rule(merchant, amount)
    return rule.category if rule is not None else CATCH_ALL


__all__ = [
    "CONVENIENCE_STORE",
    "POVO",
    "SUBSCRIPTION",
    "SUICA",
    "SMALL_JCB_PAYMENT",
    "CATCH_ALL",
    "CATCH_ALL_DESCRIPTION",
    "CATEGORY_ORDER",
    "CONVENIENCE_STORES",
    "SUBSCRIPTIONS",
    "SMALL_JCB_LIMIT",
    "Rule",
    "RULES",
    "match_rule",
    "categorize",
]
