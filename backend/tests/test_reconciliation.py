"""Tests for rebuilding membership sets from join records."""
from civiconnect.models.event import Event
from civiconnect.models.user import User
from civiconnect.reconcile import main as reconcile_main
from civiconnect.services.reconciliation_service import reconcile_memberships
from tests.conftest import create_test_event, create_test_user


def _joined_pair(client):
    create_test_user(client, email="alice@example.com")
    event_id = create_test_event(client)
    resp = client.post("/joined-events", json={"eventId": event_id, "currentUser": "alice@example.com"})
    assert resp.status_code == 200
    return event_id


class TestReconcileMemberships:

    def test_consistent_store_needs_no_fixes(self, client, db):
        _joined_pair(client)
        result = reconcile_memberships(db)
        assert result == {"users_fixed": 0, "events_fixed": 0, "dry_run": False}

    def test_repairs_drifted_sets(self, client, db):
        event_id = _joined_pair(client)
        user = db.query(User).one()
        event = db.query(Event).one()
        user.joined_event_ids = []
        event.registered_users = ["alice@example.com", "stale@example.com"]
        db.commit()

        result = reconcile_memberships(db)
        assert result["users_fixed"] == 1
        assert result["events_fixed"] == 1

        db.expire_all()
        assert db.query(User).one().joined_event_ids == [event_id]
        assert db.query(Event).one().registered_users == ["alice@example.com"]

    def test_dry_run_reports_without_writing(self, client, db):
        _joined_pair(client)
        db.query(User).one().joined_event_ids = []
        db.commit()

        result = reconcile_memberships(db, dry_run=True)
        assert result["users_fixed"] == 1

        db.expire_all()
        assert db.query(User).one().joined_event_ids == []

    def test_is_idempotent(self, client, db):
        _joined_pair(client)
        db.query(Event).one().registered_users = []
        db.commit()
        assert reconcile_memberships(db)["events_fixed"] == 1
        assert reconcile_memberships(db)["events_fixed"] == 0


class TestReconcileCommand:

    def test_dry_run_exit_code(self, session_factory, monkeypatch):
        monkeypatch.setattr("civiconnect.reconcile.SessionLocal", session_factory)
        assert reconcile_main(["--dry-run"]) == 0
