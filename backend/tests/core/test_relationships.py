"""Relationship Resolver — foreign-key traversal and dangling references.

Tests cover:
    - Event → user / location, User → events, Event → participants
    - Location → events, Participant → user / event
    - Dangling keys resolve to None, not an error
    - Order follows the target store
    - Deleting a parent leaves children with dangling keys (no cascade)
    - traverse holds the guard across parent lookup and relation scan
"""

import threading

from eventgraph.core import relationships
from eventgraph.core.domain_types import EntityKind


def test_meetup_scenario(graph, alice, park, meetup):
    assert graph.event_user(meetup) == alice
    assert graph.event_location(meetup) == park
    assert graph.user_events(alice) == [meetup]


def test_user_with_no_events(graph, alice):
    assert graph.user_events(alice) == []


def test_user_events_in_event_store_order(graph, alice):
    bob = graph.users.create({"username": "bob", "email": "b@x.com"})
    first = graph.events.create({"title": "1", "user_id": alice["id"], "location_id": "l"})
    graph.events.create({"title": "2", "user_id": bob["id"], "location_id": "l"})
    third = graph.events.create({"title": "3", "user_id": alice["id"], "location_id": "l"})
    assert graph.user_events(alice) == [first, third]


def test_dangling_location_is_absent(graph, alice):
    event = graph.events.create({
        "title": "Lost", "desc": "", "date": "2024-01-01", "from": "1", "to": "2",
        "user_id": alice["id"], "location_id": "no-such-location",
    })
    assert graph.event_location(event) is None
    assert graph.event_user(event) == alice


def test_deleted_user_leaves_dangling_event(graph, alice, meetup):
    graph.users.delete(alice["id"])
    assert graph.event_user(meetup) is None
    assert graph.events.get(meetup["id"]) == meetup


def test_event_participants(graph, alice, meetup):
    bob = graph.users.create({"username": "bob", "email": "b@x.com"})
    p1 = graph.participants.create({"user_id": alice["id"], "event_id": meetup["id"]})
    graph.participants.create({"user_id": bob["id"], "event_id": "elsewhere"})
    p3 = graph.participants.create({"user_id": bob["id"], "event_id": meetup["id"]})
    assert graph.event_participants(meetup) == [p1, p3]


def test_participant_user_and_event(graph, alice, meetup):
    participant = graph.participants.create(
        {"user_id": alice["id"], "event_id": meetup["id"]},
    )
    assert graph.participant_user(participant) == alice
    assert graph.participant_event(participant) == meetup


def test_participant_with_dangling_keys(graph):
    participant = graph.participants.create({"user_id": "ghost", "event_id": "gone"})
    assert graph.participant_user(participant) is None
    assert graph.participant_event(participant) is None


def test_location_events(graph, park, meetup):
    assert graph.location_events(park) == [meetup]


def test_missing_foreign_key_field_is_absent(graph):
    event = graph.events.create({"title": "bare"})
    assert relationships.event_user(graph.state, event) is None
    assert relationships.event_location(graph.state, event) is None


def test_relations_see_updates(graph, alice, park, meetup):
    other = graph.locations.create(
        {"name": "Hall", "desc": "", "lat": 1.0, "lng": 1.0, "event_id": meetup["id"]},
    )
    updated = graph.events.update(meetup["id"], {"location_id": other["id"]})
    assert graph.event_location(updated) == other
    assert graph.location_events(park) == []


def test_traverse_unknown_parent_is_none(graph):
    assert graph.traverse(EntityKind.EVENT, "missing", graph.event_user) is None


def test_traverse_resolves_known_parent(graph, alice, meetup):
    assert graph.traverse(EntityKind.USER, alice["id"], graph.user_events) == [meetup]


def test_traverse_blocks_deletes_until_relation_is_resolved(graph, alice, meetup):
    seen = []

    def resolve_while_deleting(event):
        deleter = threading.Thread(target=graph.events.delete, args=(event["id"],))
        deleter.start()
        deleter.join(timeout=0.2)
        seen.append(deleter.is_alive())
        seen.append(graph.events.get(event["id"]) is not None)
        return graph.event_user(event), deleter

    user, deleter = graph.traverse(EntityKind.EVENT, meetup["id"], resolve_while_deleting)
    deleter.join()

    assert seen == [True, True]
    assert user == alice
    assert graph.events.get(meetup["id"]) is None
