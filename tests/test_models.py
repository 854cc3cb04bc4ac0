import pytest

from tunelib.models import (
    Album,
    Artist,
    Database,
    DragQueue,
    GeneralData,
    Queue,
    QueueAdd,
    QueueDuration,
    QueueFolder,
    QueueLoop,
    Song,
    SongEntry,
)


def test_queue_song_builds_song_entry():
    q = Queue.song(7)
    assert q.content == SongEntry(7)


def test_queue_folder_holds_content_in_order():
    a, b = Queue.song(1), Queue.song(2)
    q = Queue.folder("in loop", [a, b])
    assert isinstance(q.content, QueueFolder)
    assert q.content.name == "in loop"
    assert list(q.content) == [a, b]
    assert q.content.index == 0
    assert q.content.order is None


def test_queue_folder_copies_given_list():
    items = [Queue.song(1)]
    q = Queue.folder("x", items)
    items.append(Queue.song(2))
    assert len(q.content) == 1


def test_folder_iteration_follows_shuffle_order():
    a, b, c = Queue.song(1), Queue.song(2), Queue.song(3)
    folder = QueueFolder(name="f", content=[a, b, c], order=[2, 0, 1])
    assert list(folder) == [c, a, b]


def test_queue_loop():
    inner = Queue.folder("in loop")
    q = Queue.loop(2, inner)
    assert q.content == QueueLoop(total=2, done=0, inner=inner)


def test_database_get_song():
    song = Song(id=3, title="t", artist=1, album=None, duration_millis=1000)
    db = Database(songs={3: song})
    assert db.get_song(3) is song
    assert db.get_song(4) is None


def test_database_defaults_to_empty_queue():
    db = Database()
    assert isinstance(db.queue.content, QueueFolder)
    assert list(db.queue.content) == []
    assert db.playing is False


def test_general_data_tags_independent():
    a = Album(id=1, name="a", artist=1)
    b = Artist(id=1, name="b")
    a.general.tags.append("Fav")
    assert b.general.tags == []
    assert a.general == GeneralData(tags=["Fav"])


def test_drag_queue_requires_exactly_one():
    with pytest.raises(ValueError):
        DragQueue()
    with pytest.raises(ValueError):
        DragQueue(queue=Queue.song(1), path=[0])
    assert DragQueue(path=[1, 2]).path == [1, 2]


def test_actions_compare_by_value():
    assert QueueAdd([], [Queue.song(1)]) == QueueAdd([], [Queue.song(1)])
    assert QueueAdd([], [Queue.song(1)]) != QueueAdd([0], [Queue.song(1)])


def test_queue_duration_defaults():
    d = QueueDuration()
    assert (d.infinite, d.millis, d.random_counter) == (False, 0, 0)