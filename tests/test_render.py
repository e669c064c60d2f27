from conftest import make_row
from rich.console import Console

from kakeibo.classify import classify_transactions
from kakeibo.render import (
    build_table,
    format_yen,
    payment_column_label,
    render_categories,
    render_rules,
)
from kakeibo.rules import CATEGORY_ORDER


def _console() -> Console:
    return Console(record=True, width=160, color_system=None)


def test_format_yen():
    assert format_yen(1234567) == "1,234,567 円"
    assert format_yen(-500) == "-500 円"


def test_render_tables_show_totals_and_catch_all_column():
    result = classify_transactions(
        [
            make_row("2024/08/01", "ﾛｰｿﾝ [ｳｴﾉ]", "1,000"),
            make_row("2024/08/02", "ﾏﾂﾓﾄｷﾖｼ", "2,000", payment="1,500"),
        ]
    )
    console = _console()

    render_categories(result, console)
    text = console.export_text()

    assert "コンビニ  1,000 円" in text
    assert "その他  1,500 円" in text
    assert "ﾛｰｿﾝ [ｳｴﾉ]" in text
    assert "8月支払金額" in text
    assert "2,000 円" in text


def test_render_summary_only():
    result = classify_transactions([make_row(merchant="POVO2.0", amount="3,000")])
    console = _console()

    render_categories(result, console, show_items=False)

    assert "povo  3,000 円  (1件)" in console.export_text()


def test_render_empty_result():
    console = _console()
    render_categories(classify_transactions([]), console)
    assert "No transactions matched." in console.export_text()


def test_payment_column_label_defaults():
    assert payment_column_label(classify_transactions([])) == "8月支払金額"
    short = classify_transactions(
        [{"利用日": "2024/05/10", "利用店名・商品名": "ﾛｰｿﾝ", "利用金額": "1"}]
    )
    assert payment_column_label(short) == "8月支払金額"


def test_extra_column_header_is_not_markup():
    console = _console()
    console.print(build_table("その他", 0, [], extra_column="[bold]8月支払金額"))
    assert "[bold]8月支払金額" in console.export_text()


def test_render_rules_lists_every_category_and_payment_column():
    console = _console()

    render_rules(console)
    text = console.export_text()

    assert "計算方法について" in text
    for name in CATEGORY_ORDER:
        assert name in text
    assert "9列目" in text
    assert "X月支払金額" in text
    assert "外部にデータが送信されることはありません" in text
