"""Tests for the database observer."""

from __future__ import annotations

import pytest

from observer_demo import Database, InterestedParty, Observer


@pytest.fixture
def db() -> Database:
    return Database()


def test_registered_listener_is_notified(db: Database):
    party = InterestedParty()
    db.register_listener(party)

    db.update_data()
    db.update_data()

    assert party.notification_count == 2
    assert party.notifications == ["Received notification", "Received notification"]


def test_register_is_idempotent(db: Database):
    party = InterestedParty()
    db.register_listener(party)
    db.register_listener(party)

    db.update_data()

    assert party.notification_count == 1


def test_unregistered_listener_is_not_notified(db: Database):
    party = InterestedParty()
    db.register_listener(party)
    db.unregister_listener(party)

    db.update_data()

    assert party.notification_count == 0


def test_unregister_unknown_listener_is_ignored(db: Database):
    db.unregister_listener(InterestedParty())
    assert db.observers == []


def test_listeners_notified_in_registration_order(db: Database):
    order = []

    class Recorder(Observer):

        def __init__(self, name):
            self.name = name

        def update(self):
            order.append(self.name)

    db.register_listener(Recorder("first"))
    db.register_listener(Recorder("second"))
    db.update_data()

    assert order == ["first", "second"]
