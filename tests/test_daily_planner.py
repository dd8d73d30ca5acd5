from planning.daily_planner import ordered_events_for_date, plan_day


def test_stable_sort_keeps_unparseable_in_insertion_order(store, day):
    a = store.add_event(day, "A", "10:00")
    b = store.add_event(day, "B", "bad")
    c = store.add_event(day, "C", "09:00")
    d = store.add_event(day, "D", "bad")

    ordered = ordered_events_for_date(store, day)
    assert [e.title for e in ordered] == ["C", "A", "B", "D"]
    assert ordered[2] is b and ordered[3] is d
    assert ordered[0] is c and ordered[1] is a


def test_equal_times_keep_insertion_order(store, day):
    first = store.add_event(day, "first", "9:00-10:00")
    second = store.add_event(day, "second", "09:00")
    assert ordered_events_for_date(store, day) == [first, second]


def test_ordering_does_not_reorder_the_store(store, day):
    store.add_event(day, "late", "20:00")
    store.add_event(day, "early", "07:00")
    ordered_events_for_date(store, day)
    assert [e.title for e in store.events_for_date(day)] == ["late", "early"]


def test_ordering_is_idempotent(store, day):
    for title, t in [("x", "All Day"), ("y", "13:00"), ("z", "8:15"), ("w", "lunch")]:
        store.add_event(day, title, t)
    assert ordered_events_for_date(store, day) == ordered_events_for_date(store, day)


def test_empty_day(store, day):
    assert ordered_events_for_date(store, day) == []


def test_plan_day_heading_and_rows(store, day):
    store.add_event(day, "Futsal", "20:00-22:00")
    store.add_event(day, "Lecture", "08:00-09:00")
    store.add_event(day, "Someday", "All Day")

    plan = plan_day(store, day)
    assert plan["date"] == "2025-11-07"
    assert plan["weekday"] == "FRIDAY"
    assert plan["heading"] == "7 NOV 25"
    assert [e["title"] for e in plan["events"]] == ["Lecture", "Futsal", "Someday"]
    assert [e["start"] for e in plan["events"]] == ["08:00", "20:00", "unparseable"]
