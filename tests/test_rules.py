import pytest

from kakeibo.rules import (
    CATCH_ALL,
    CATEGORY_ORDER,
    RULES,
    SUBSCRIPTIONS,
    categorize,
    match_rule,
)


@pytest.mark.parametrize(
    ("merchant", "amount", "expected"),
    [
        ("ｾﾌﾞﾝ-ｲﾚﾌﾞﾝ ASAKUSA", 1500, "コンビニ"),
        ("ﾌｱﾐﾘｰﾏｰﾄ ｼﾌﾞﾔ", 300, "コンビニ"),
        ("ﾛｰｿﾝ ｳｴﾉ", 200, "コンビニ"),
        ("POVO2.0 CHARGE", 3000, "povo"),
        ("povo", 330, "povo"),
        ("モバイルＳｕｉｃａ", 5000, "Suica"),
        ("CLAUDE.AI SUBSCRIPTION", 3000, "サブスク"),
        ("claude.ai subscription", 3000, "サブスク"),
        ("CHOCOZAP", 3278, "サブスク"),
        ("ﾁｮｺｻﾞｯﾌﾟ", 3278, "サブスク"),
        ("ADOBESYSTEMS", 1078, "サブスク"),
        ("Netflix.com", 1490, "サブスク"),
        ("ﾕｰﾈｸｽﾄ", 2189, "サブスク"),
        ("AMAZON WEB SERVICES", 12, "サブスク"),
        ("ＪＣＢ 定期利用", 900, "少額決済(JCB)"),
        ("ＪＣＢ 定期利用", 1200, "少額決済(JCB)"),
        ("ＪＣＢ 定期利用", 1201, CATCH_ALL),
        ("JCB 定期利用", 900, CATCH_ALL),  # half-width marker does not count
        ("SUICA", 500, CATCH_ALL),  # half-width Suica does not count
        ("ｱﾏｿﾞﾝ", 900, CATCH_ALL),
    ],
)
def test_categorize(merchant, amount, expected):
    assert categorize(merchant, amount) == expected


def test_earlier_rule_wins_on_overlap():
    # Convenience store brand and a subscription name in one merchant string.
    assert categorize("ﾛｰｿﾝ NETFLIX ｶｰﾄﾞ", 1500) == "コンビニ"
    # povo is tested before Suica and subscriptions.
    assert categorize("POVO Ｓｕｉｃａ SPOTIFY", 100) == "povo"
    # Suica is tested before subscriptions.
    assert categorize("Ｓｕｉｃａ SPOTIFY", 100) == "Suica"
    # Subscriptions are tested before small JCB payments.
    assert categorize("ＪＣＢ SPOTIFY", 980) == "サブスク"


def test_match_rule_returns_none_for_catch_all():
    assert match_rule("ﾏﾂﾓﾄｷﾖｼ", 100) is None


def test_rule_table_covers_every_category_but_catch_all():
    assert [r.category for r in RULES] == ["コンビニ", "povo", "Suica", "サブスク", "少額決済(JCB)"]
    assert set(CATEGORY_ORDER) == {r.category for r in RULES} | {CATCH_ALL}


@pytest.mark.parametrize("sub", SUBSCRIPTIONS)
def test_each_subscription_entry_matches_itself(sub):
    assert categorize(f"XX {sub} XX", 100) == "サブスク"
