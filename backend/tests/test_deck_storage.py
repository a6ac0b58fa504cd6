from models.card import Card, CardStore
from models.stored_deck import StoredDeck
from services.deck_storage import DeckStorageService

def test_save_and_load(test_db, abcd_store):
    service = DeckStorageService(test_db)
    service.save("specs", abcd_store)

    loaded = service.load("specs")
    assert loaded == abcd_store
    assert loaded is not abcd_store

def test_save_overwrites_existing_deck(test_db, abcd_store):
    service = DeckStorageService(test_db)
    service.save("specs", abcd_store)
    abcd_store.remove(1)
    service.save("specs", abcd_store)

    assert test_db.query(StoredDeck).count() == 1
    loaded = service.load("specs")
    assert [card.id for card in loaded.cards] == [2, 3, 4]
    assert loaded.card_id_counter == 4

def test_load_missing_deck(test_db):
    assert DeckStorageService(test_db).load("nothing") is None

def test_load_legacy_array_format(test_db):
    """Test that decks saved with titles and rows as arrays load as text."""
    test_db.add(StoredDeck(
        name="legacy",
        cards=[{"id": 2, "title": ["Line A", "Line B"], "rows": ["r1", "r2"]}],
        card_id_counter=5
    ))
    test_db.commit()

    loaded = DeckStorageService(test_db).load("legacy")
    assert loaded.cards == [Card(id=2, title="Line A\nLine B", rows="r1\nr2")]
    assert loaded.card_id_counter == 5

def test_load_malformed_deck_gives_empty_store(test_db):
    test_db.add(StoredDeck(name="broken", cards=[{"title": "no id"}], card_id_counter=3))
    test_db.commit()

    loaded = DeckStorageService(test_db).load("broken")
    assert loaded == CardStore()

def test_delete(test_db, abcd_store):
    service = DeckStorageService(test_db)
    service.save("specs", abcd_store)
    assert service.delete("specs") is True
    assert service.delete("specs") is False
    assert service.load("specs") is None

def test_session_restores_saved_deck(client):
    first = client.post("/api/sessions/", json={"name": "shared"}).json()
    session_id = first["session_id"]
    client.patch(f"/api/sessions/{session_id}/cards/1", json={"title": "Saved title"})
    client.post(f"/api/sessions/{session_id}/cards")
    response = client.post(f"/api/sessions/{session_id}/save")
    assert response.status_code == 200
    assert response.json() == {"message": "Data saved successfully!", "name": "shared", "card_count": 2}

    second = client.post("/api/sessions/", json={"name": "shared"}).json()
    assert second["session_id"] != session_id
    assert [card["title"] for card in second["cards"]] == ["Saved title", "New Card Title"]
    assert second["card_id_counter"] == 2

def test_load_discards_unsaved_changes(client):
    session_id = client.post("/api/sessions/", json={"name": "reload"}).json()["session_id"]
    client.post(f"/api/sessions/{session_id}/save")
    client.post(f"/api/sessions/{session_id}/cards")
    client.post(f"/api/sessions/{session_id}/cards")

    response = client.post(f"/api/sessions/{session_id}/load")
    assert response.status_code == 200
    assert len(response.json()["cards"]) == 1
    assert response.json()["card_id_counter"] == 1

def test_load_without_saved_deck(client):
    session_id = client.post("/api/sessions/", json={"name": "never-saved"}).json()["session_id"]
    assert client.post(f"/api/sessions/{session_id}/load").status_code == 404

def test_load_stale_counter_does_not_reuse_ids(test_db):
    """Test that a counter below the stored ids is raised to the highest id."""
    test_db.add(StoredDeck(
        name="stale",
        cards=[{"id": 1, "title": "A", "rows": ""}, {"id": 2, "title": "B", "rows": ""}],
        card_id_counter=0
    ))
    test_db.commit()

    loaded = DeckStorageService(test_db).load("stale")
    assert loaded.card_id_counter == 2
    assert loaded.create().id == 3
