from models.card import Card, CardStore
from config.env import settings

def test_create_appends_default_card():
    """Test that new cards get the default text and the next id."""
    store = CardStore()
    card = store.create()
    assert card.id == 1
    assert card.title == settings.editor.default_card_title
    assert card.rows == settings.editor.default_card_rows
    assert store.cards == [card]
    assert store.card_id_counter == 1

def test_ids_are_never_reused():
    """Test that deleting a card does not give its id back."""
    store = CardStore()
    first, second, third = store.create(), store.create(), store.create()
    store.remove(second.id)
    fourth = store.create()
    assert [card.id for card in store.cards] == [1, 3, 4]
    assert fourth.id == 4

def test_remove_missing_card_is_noop():
    store = CardStore()
    store.create()
    assert store.remove(42) is False
    assert len(store) == 1

def test_set_title_keeps_raw_text():
    """Test that edits are stored verbatim and normalized only when read as lines."""
    store = CardStore()
    card = store.create()
    assert store.set_title(card.id, "Line one  \n\n   \nLine two ")
    assert card.title == "Line one  \n\n   \nLine two "
    assert card.title_lines == ["Line one", "Line two"]

def test_set_rows_unknown_card():
    store = CardStore()
    assert store.set_rows(7, "x") is False

def test_replace_all_sets_counter():
    store = CardStore()
    store.create()
    store.replace_all([Card(id=1, title="T", rows="R"), Card(id=2, title="U", rows="")], max_id=2)
    assert [card.title for card in store.cards] == ["T", "U"]
    assert store.card_id_counter == 2
    assert store.create().id == 3

def test_replace_all_negative_max_id():
    store = CardStore()
    store.replace_all([], max_id=-5)
    assert store.card_id_counter == 0

def test_clear_resets_counter():
    store = CardStore()
    store.create()
    store.create()
    store.clear()
    assert store.cards == []
    assert store.card_id_counter == 0
    assert store.create().id == 1

def test_independent_stores():
    """Test that two stores never share cards or counters."""
    first, second = CardStore(), CardStore()
    first.create()
    first.create()
    assert second.create().id == 1
    assert len(first) == 2

def test_empty_lines_view():
    card = Card(id=1, title="", rows="   \n")
    assert card.title_lines == []
    assert card.row_lines == []

def test_legacy_record_lists_are_joined():
    """Test that array-valued titles and rows load as line-delimited text."""
    card = Card.from_record({"id": 3, "title": ["First", "Second"], "rows": ["r1", "r2", "r3"]})
    assert card.title == "First\nSecond"
    assert card.rows == "r1\nr2\nr3"
    assert card.title == Card.from_record({"id": 3, "title": "First\nSecond"}).title

def test_records_round_trip(abcd_store):
    restored = CardStore.from_records(abcd_store.to_records(), abcd_store.card_id_counter)
    assert restored == abcd_store

def test_from_records_counter_covers_highest_id():
    store = CardStore.from_records([{"id": 5, "title": "X", "rows": ""}], card_id_counter=2)
    assert store.card_id_counter == 5
