import pytest

from errors import NotFoundError, PersistenceFailure
from models import Base


def _add(store, name, **fields):
    return store.create(file_name=f"{name}.pdf", raw_text=f"{name}\nSkills: Go", candidate_name=name, **fields)


def test_create_assigns_id_and_no_score(store):
    row = _add(store, "ann", skills=["Go"])
    assert row.id and len(row.id) == 32
    assert row.created_at is not None
    assert row.match_score is None and row.justification is None

    fetched = store.get(row.id)
    assert fetched.candidate_name == "ann"
    assert fetched.skills == ["Go"]


def test_skills_are_capped(store):
    row = _add(store, "ann", skills=[f"s{i}" for i in range(60)])
    assert len(store.get(row.id).skills) == 50


def test_list_all_orders_by_score_then_recency(store):
    a = _add(store, "a")
    _add(store, "b")
    c = _add(store, "c")
    _add(store, "d")
    store.update_score(a.id, 80, "a ok")
    store.update_score(c.id, 90, "c ok")

    assert [r.candidate_name for r in store.list_all()] == ["c", "a", "d", "b"]


def test_shortlist_threshold(store):
    a = _add(store, "a")
    b = _add(store, "b")
    _add(store, "c")
    store.update_score(a.id, 70, "edge")
    store.update_score(b.id, 69, "just below")

    assert [r.id for r in store.list_shortlisted(70)] == [a.id]
    assert {r.id for r in store.list_shortlisted(0)} == {a.id, b.id}


def test_rescore_overwrites(store):
    row = _add(store, "a")
    store.update_score(row.id, 40, "first", role_applied="Engineer")
    store.update_score(row.id, 75, "second")

    fetched = store.get(row.id)
    assert fetched.match_score == 75
    assert fetched.justification == "second"
    assert fetched.role_applied is None


def test_delete_is_terminal(store):
    row = _add(store, "a")
    store.delete(row.id)

    with pytest.raises(NotFoundError):
        store.get(row.id)
    with pytest.raises(NotFoundError):
        store.delete(row.id)
    with pytest.raises(NotFoundError):
        store.update_score(row.id, 10, "late")


def test_driver_errors_become_persistence_failure(store):
    Base.metadata.drop_all(store.engine)

    with pytest.raises(PersistenceFailure) as exc:
        _add(store, "a")
    assert exc.value.message == "Database error"
    assert exc.value.status_code == 500
