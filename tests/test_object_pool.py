import logging

import pytest

from poolkit.object_pool import (
    ObjectPool,
    PoolFullError,
    SharedObject,
    SharedObjectPool,
)


class Widget:
    pass


def test_shared_object_methods_print(capsys):
    obj = SharedObject()
    obj.method_a()
    obj.method_b()
    obj.reset()
    assert capsys.readouterr().out == "MethodA\nMethodB\nResetting the state\n"


def test_new_shared_object_is_used():
    assert SharedObject().used is True


def test_shared_pool_creates_when_all_in_use():
    pool = SharedObjectPool()
    first = pool.acquire()
    second = pool.acquire()
    assert first is not second
    assert len(pool) == 2


def test_shared_pool_reuses_and_resets(capsys):
    pool = SharedObjectPool()
    first = pool.acquire()
    pool.acquire()
    pool.release(first)
    assert first.used is False
    capsys.readouterr()
    third = pool.acquire()
    assert third is first
    assert third.used is True
    assert capsys.readouterr().out == "Resetting the state\n"
    assert len(pool) == 2


def test_shared_pool_logs(caplog):
    caplog.set_level(logging.INFO, logger="poolkit.object_pool")
    pool = SharedObjectPool()
    obj = pool.acquire()
    pool.release(obj)
    pool.acquire()
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "[POOL] Creating a new object",
        "[POOL] Returning an existing object",
    ]


def test_object_pool_reuses_released_object():
    pool = ObjectPool(Widget)
    p1 = pool.acquire()
    pool.acquire()
    p3 = pool.acquire()
    pool.release(p1)
    p4 = pool.acquire()
    assert p4 is p1
    assert p4 is not p3
    assert len(pool) == 3


def test_unbounded_pool_keeps_growing():
    pool = ObjectPool(Widget)
    objects = {id(pool.acquire()) for _ in range(50)}
    assert len(objects) == 50
    assert len(pool) == 50


def test_bounded_pool_raises_when_full():
    pool = ObjectPool(Widget, max_size=2)
    first = pool.acquire()
    pool.acquire()
    with pytest.raises(PoolFullError):
        pool.acquire()
    pool.release(first)
    assert pool.acquire() is first


def test_release_of_unknown_object_is_ignored():
    pool = ObjectPool(Widget, max_size=1)
    pool.acquire()
    pool.release(Widget())
    with pytest.raises(PoolFullError):
        pool.acquire()


def test_destroy_disposes_every_object_and_empties_pool():
    disposed = []
    pool = ObjectPool(Widget, disposer=disposed.append)
    a = pool.acquire()
    b = pool.acquire()
    pool.release(a)
    pool.destroy()
    assert disposed == [a, b]
    assert len(pool) == 0
    assert pool.acquire() not in (a, b)


def test_destroy_warns_for_objects_in_use(caplog):
    caplog.set_level(logging.INFO, logger="poolkit.object_pool")
    pool = ObjectPool(Widget)
    a = pool.acquire()
    pool.acquire()
    pool.release(a)
    pool.destroy()
    warnings = [
        r.getMessage() for r in caplog.records if r.levelno == logging.WARNING
    ]
    assert warnings == ["WARNING! Deleting an object still in use"]


def test_destroy_without_disposer_empties_pool():
    pool = ObjectPool(Widget)
    pool.acquire()
    pool.destroy()
    assert len(pool) == 0