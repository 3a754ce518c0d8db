import pytest

from store_registry.models import Store


def make_store(hours="24/7", phones=()):
    store = Store("Corner", "1 Main St", "Grocery", hours)
    for phone in phones:
        store.add_phone(phone)
    return store


def test_new_store_has_no_phones():
    store = Store("", "", "", "")
    assert store.phones == []
    assert not store.has_short_phone_number()
    assert not store.has_domestic_mobile_number()


def test_add_phone_keeps_order_and_duplicates():
    store = make_store(phones=["111", "222", "111"])
    assert store.phones == ["111", "222", "111"]


def test_works_continuously_true():
    assert make_store(hours="24/7").works_continuously()


@pytest.mark.parametrize("hours", ["9-5", "", "24/6", " 24/7"])
def test_works_continuously_false(hours):
    assert not make_store(hours=hours).works_continuously()


def test_has_short_phone_number():
    assert make_store(phones=["123"]).has_short_phone_number()
    assert make_store(phones=["12345", "1234"]).has_short_phone_number()
    assert not make_store(phones=["12345"]).has_short_phone_number()


def test_has_domestic_mobile_number():
    assert make_store(phones=["380991234567"]).has_domestic_mobile_number()
    assert make_store(phones=["491234567", "380"]).has_domestic_mobile_number()
    assert not make_store(phones=["491234567"]).has_domestic_mobile_number()
    assert not make_store(phones=["+380991234567"]).has_domestic_mobile_number()


def test_is_featured_requires_all_three_conditions():
    assert make_store(phones=["1234", "380501112233"]).is_featured()
    assert not make_store(hours="9-18", phones=["1234", "380501112233"]).is_featured()
    assert not make_store(phones=["380501112233"]).is_featured()
    assert not make_store(phones=["1234", "491234567"]).is_featured()


def test_matches_name_ignores_case():
    store = Store("Corner Shop", "a", "b", "c")
    assert store.matches_name("corner shop")
    assert store.matches_name("CORNER SHOP")
    assert not store.matches_name("Corner")


def test_render_lists_fields_in_order():
    store = make_store(phones=["1234", "380501112233"])
    text = store.render()
    assert text == (
        "Store(name='Corner', address='1 Main St', phones=[1234, 380501112233], "
        "specialization='Grocery', working_hours='24/7')"
    )
    assert str(store) == text
    positions = [text.index(k) for k in ("name=", "address=", "phones=", "specialization=", "working_hours=")]
    assert positions == sorted(positions)
