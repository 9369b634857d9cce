import pytest

from board_server.errors import IncorrectPasswordError, ReplyNotFoundError, ThreadNotFoundError
from board_server.services import replies, threads
from board_server.services.replies import TOMBSTONE
from board_server.stores.fallback import FallbackThreadStore
from board_server.stores.memory import MemoryThreadStore


async def _thread_id(store, board: str = "b1") -> str:
    created = await threads.create_thread(store, board, "hello", "p1")
    return str(created.id)


@pytest.mark.asyncio
async def test_create_reply_appends_and_bumps(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)
    before = await memory_store.get_thread(thread_id)

    reply = await replies.create_reply(memory_store, "b1", thread_id, "first", "r1")

    after = await memory_store.get_thread(thread_id)
    assert before is not None and after is not None
    assert reply.id is not None
    assert reply.reported is False
    assert [r.text for r in after.replies] == ["first"]
    assert after.bumped_on >= before.bumped_on
    assert after.bumped_on >= after.created_on
    assert after.created_on == before.created_on


@pytest.mark.asyncio
async def test_create_reply_on_unknown_thread(memory_store: MemoryThreadStore) -> None:
    with pytest.raises(ThreadNotFoundError):
        await replies.create_reply(memory_store, "b1", "404", "text", "pw")


@pytest.mark.asyncio
async def test_get_thread_shows_every_reply(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)
    for i in range(5):
        await replies.create_reply(memory_store, "b1", thread_id, f"reply {i}", "pw")

    view = await replies.get_thread_with_replies(memory_store, thread_id)

    assert [reply.text for reply in view.replies] == [f"reply {i}" for i in range(5)]
    listed = await threads.list_threads(memory_store, "b1")
    assert listed[0].replycount == 5
    assert len(listed[0].replies) == 3


@pytest.mark.asyncio
async def test_reply_lifecycle(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)
    reply = await replies.create_reply(memory_store, "b1", thread_id, "original", "r1")
    reply_id = str(reply.id)

    assert await replies.report_reply(memory_store, thread_id, reply_id) == "reported"
    stored = await memory_store.get_thread(thread_id)
    assert stored is not None and stored.replies[0].reported is True

    with pytest.raises(IncorrectPasswordError):
        await replies.delete_reply(memory_store, thread_id, reply_id, "wrong")
    stored = await memory_store.get_thread(thread_id)
    assert stored is not None and stored.replies[0].text == "original"

    assert await replies.delete_reply(memory_store, thread_id, reply_id, "r1") == "success"
    assert await replies.delete_reply(memory_store, thread_id, reply_id, "r1") == "success"

    stored = await memory_store.get_thread(thread_id)
    assert stored is not None
    assert len(stored.replies) == 1
    tombstoned = stored.replies[0]
    assert tombstoned.text == TOMBSTONE
    assert tombstoned.reported is True
    assert tombstoned.created_on == reply.created_on


@pytest.mark.asyncio
async def test_tombstoned_reply_can_still_be_reported(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)
    reply = await replies.create_reply(memory_store, "b1", thread_id, "text", "r1")
    await replies.delete_reply(memory_store, thread_id, str(reply.id), "r1")

    assert await replies.report_reply(memory_store, thread_id, str(reply.id)) == "reported"


@pytest.mark.asyncio
async def test_unknown_reply(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)

    with pytest.raises(ReplyNotFoundError):
        await replies.report_reply(memory_store, thread_id, "404")
    with pytest.raises(ReplyNotFoundError):
        await replies.delete_reply(memory_store, thread_id, "404", "pw")
    with pytest.raises(ThreadNotFoundError):
        await replies.report_reply(memory_store, "404", "1")
    with pytest.raises(ThreadNotFoundError):
        await replies.delete_reply(memory_store, "404", "1", "pw")


@pytest.mark.asyncio
async def test_reply_ids_are_unique_within_thread(memory_store: MemoryThreadStore) -> None:
    thread_id = await _thread_id(memory_store)
    first = await replies.create_reply(memory_store, "b1", thread_id, "a", "pw")
    second = await replies.create_reply(memory_store, "b1", thread_id, "b", "pw")

    assert first.id != second.id


@pytest.mark.asyncio
async def test_mirror_thread_is_missing_once_primary_recovers(
    fallback_store: FallbackThreadStore, flaky_primary
) -> None:
    flaky_primary.down = True
    thread_id = await _thread_id(fallback_store)
    await replies.create_reply(fallback_store, "b1", thread_id, "during outage", "pw")
    flaky_primary.down = False

    with pytest.raises(ThreadNotFoundError):
        await replies.create_reply(fallback_store, "b1", thread_id, "after recovery", "pw")

    mirrored = await fallback_store.mirror.get_thread(thread_id)
    assert mirrored is not None
    assert [reply.text for reply in mirrored.replies] == ["during outage"]
