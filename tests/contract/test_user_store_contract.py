from dataclasses import replace

import pytest

from passkeep.domain.users import User

pytestmark = pytest.mark.asyncio


async def test_get_by_id_of_never_saved_id_returns_none(store):
    assert await store.get_by_id(404) is None


async def test_save_then_get_returns_equal_but_distinct_user(store):
    user = User(user_id=1, password_hash="digest-1")

    await store.save(user)
    found = await store.get_by_id(1)

    assert found == user
    assert found is not user


async def test_each_get_returns_a_fresh_instance(store):
    await store.save(User(user_id=1, password_hash="digest-1"))

    first = await store.get_by_id(1)
    second = await store.get_by_id(1)

    assert first == second
    assert first is not second


async def test_save_existing_id_replaces_digest(store):
    await store.save(User(user_id=7, password_hash="old"))
    await store.save(User(user_id=7, password_hash="new"))

    found = await store.get_by_id(7)

    assert found == User(user_id=7, password_hash="new")


async def test_changed_copy_is_invisible_until_saved(store):
    await store.save(User(user_id=5, password_hash="stored"))

    fetched = await store.get_by_id(5)
    changed = replace(fetched, password_hash="changed")

    assert (await store.get_by_id(5)).password_hash == "stored"

    await store.save(changed)

    assert (await store.get_by_id(5)).password_hash == "changed"


async def test_users_are_kept_apart(store):
    await store.save(User(user_id=1, password_hash="a"))
    await store.save(User(user_id=2, password_hash="b"))
    await store.save(User(user_id=1, password_hash="c"))

    assert await store.get_by_id(1) == User(user_id=1, password_hash="c")
    assert await store.get_by_id(2) == User(user_id=2, password_hash="b")
