from geekdemy.models import LineItem, ProgrammeKind, discount_rate, programme_kind, unit_price


def test_catalog_prices_and_rates() -> None:
    assert unit_price(ProgrammeKind.CERTIFICATION) == 3000
    assert unit_price(ProgrammeKind.DEGREE) == 5000
    assert unit_price(ProgrammeKind.DIPLOMA) == 2500
    assert discount_rate(ProgrammeKind.CERTIFICATION) == 0.02
    assert discount_rate(ProgrammeKind.DEGREE) == 0.03
    assert discount_rate(ProgrammeKind.DIPLOMA) == 0.01


def test_unknown_kind_is_free_and_undiscounted() -> None:
    assert unit_price(ProgrammeKind.UNKNOWN) == 0
    assert discount_rate(ProgrammeKind.UNKNOWN) == 0


def test_programme_kind_lookup_is_exact() -> None:
    assert programme_kind("DEGREE") is ProgrammeKind.DEGREE
    assert programme_kind("degree") is ProgrammeKind.UNKNOWN
    assert programme_kind("MASTERS") is ProgrammeKind.UNKNOWN


def test_line_item_cost() -> None:
    item = LineItem(ProgrammeKind.DIPLOMA, 3)
    assert item.single_cost == 2500
    assert item.cost == 7500
    assert item.discountable is True


def test_line_item_keeps_degenerate_quantities() -> None:
    assert LineItem(ProgrammeKind.DEGREE, 0).cost == 0
    assert LineItem(ProgrammeKind.DEGREE, -1).cost == -5000
    assert LineItem(ProgrammeKind.UNKNOWN, 7).discountable is False
