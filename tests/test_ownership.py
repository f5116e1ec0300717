import threading

import pytest

from ninja_writer import AddOnlyList, BorrowError, NinjaDocument, Ownership, RuleRef, StatementKindError
from ninja_writer.ownership import CooperativeGuard, LockGuard


def test_add_only_list_appends_in_order():
    items = AddOnlyList()
    assert items.add("a") == 0
    assert items.add("b") == 1
    items.extend(["c", "d"])
    assert list(items) == ["a", "b", "c", "d"]
    assert items[2] == "c"
    assert len(items) == 4
    assert items.snapshot() == ("a", "b", "c", "d")


def test_empty_list_is_falsy():
    assert not AddOnlyList()
    assert AddOnlyList(["x"])


def test_failing_iterable_leaves_list_usable():
    items = AddOnlyList(["a"])

    def broken():
        yield "b"
        raise ValueError("boom")

    with pytest.raises(ValueError):
        items.extend(broken())
    items.add("c")
    assert list(items) == ["a", "c"]


def test_adopt_switches_ownership():
    items = AddOnlyList(["a"])
    assert items.adopt(Ownership.SINGLE) is items
    shared = items.adopt(Ownership.SHARED)
    assert shared.ownership is Ownership.SHARED
    assert list(shared) == ["a"]


def test_cooperative_guard_refuses_overlap():
    guard = CooperativeGuard()
    with guard.write():
        with pytest.raises(BorrowError):
            with guard.write():
                pass
        with pytest.raises(BorrowError):
            with guard.read():
                pass
    with guard.write():
        pass


def test_lock_guard_refuses_reentrant_access():
    guard = LockGuard(blocking=True)
    with guard.write():
        with pytest.raises(BorrowError):
            with guard.read():
                pass
    with guard.read():
        pass


def test_non_blocking_guard_refuses_concurrent_writer():
    guard = LockGuard(blocking=False)
    held = threading.Event()
    release = threading.Event()

    def hold():
        with guard.write():
            held.set()
            release.wait(5)

    holder = threading.Thread(target=hold)
    holder.start()
    assert held.wait(5)
    try:
        with pytest.raises(BorrowError):
            with guard.write():
                pass
    finally:
        release.set()
        holder.join()
    with guard.write():
        pass


def test_shared_statements_adopt_document_ownership():
    ninja = NinjaDocument({"thread_safe": True})
    rule = ninja.rule("cc", "gcc")
    build = rule.build(["a.o"])
    assert ninja.statements.ownership is Ownership.SHARED
    assert rule.variables.ownership is Ownership.SHARED
    assert build.node.dependencies.ownership is Ownership.SHARED


def test_wrong_statement_kind_is_rejected():
    ninja = NinjaDocument()
    ninja.comment("not a rule")
    handle = RuleRef(ninja.statements, 0)
    with pytest.raises(StatementKindError):
        handle.description("boom")


def test_lock_guard_allows_concurrent_readers():
    guard = LockGuard(blocking=False)
    reading = threading.Barrier(2, timeout=5)

    def read():
        with guard.read():
            reading.wait()

    reader = threading.Thread(target=read)
    reader.start()
    with guard.read():
        reading.wait()
    reader.join()


def test_writer_waits_for_reader_instead_of_raising():
    guard = LockGuard(blocking=False)
    held = threading.Event()
    release = threading.Event()
    written = threading.Event()

    def hold():
        with guard.read():
            held.set()
            release.wait(5)

    def write():
        with guard.write():
            written.set()

    reader = threading.Thread(target=hold)
    reader.start()
    assert held.wait(5)
    writer = threading.Thread(target=write)
    writer.start()
    assert not written.wait(0.1)
    release.set()
    reader.join()
    writer.join()
    assert written.is_set()


def test_attach_while_another_thread_renders():
    ninja = NinjaDocument({"thread_safe": True})
    cc = ninja.rule("cc", "gcc -c $in -o $out")
    build = cc.build(["a.o"])
    dependencies = build.node.dependencies
    held = threading.Event()
    release = threading.Event()

    def render_slowly():
        # holds the list the way render() does while it copies it
        with dependencies._guard.read():
            held.set()
            release.wait(5)

    renderer = threading.Thread(target=render_slowly)
    renderer.start()
    assert held.wait(5)
    attached = threading.Event()

    def attach():
        build.with_(["a.c"])
        attached.set()

    attacher = threading.Thread(target=attach)
    attacher.start()
    assert not attached.wait(0.1)
    release.set()
    renderer.join()
    attacher.join()
    assert attached.is_set()
    assert "build a.o: cc a.c\n" in ninja.render()


def test_render_and_attach_from_different_threads():
    ninja = NinjaDocument({"thread_safe": True})
    cc = ninja.rule("cc", "gcc -c $in -o $out")
    count = 200
    errors = []

    def render():
        try:
            for _ in range(count):
                ninja.render()
        except Exception as exc:
            errors.append(exc)

    renderer = threading.Thread(target=render)
    renderer.start()
    for index in range(count):
        cc.build([f"{index}.o"]).with_([f"{index}.c"])
    renderer.join()

    assert errors == []
    assert f"build {count - 1}.o: cc {count - 1}.c\n" in ninja.render()
