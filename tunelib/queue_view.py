"""Queue display rows, labels and drag-and-drop handling for the play queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Literal, Optional, Union

from tunelib.models import (
    Action,
    AlbumId,
    ArtistId,
    Database,
    DragAlbum,
    DragArtist,
    Dragging,
    DragQueue,
    DragQueues,
    DragSong,
    Queue,
    QueueAdd,
    QueueDuration,
    QueueFolder,
    QueueGoto,
    QueueInsert,
    QueueLoop,
    QueueMove,
    QueueMoveInto,
    QueueShuffle,
    QueueUnshuffle,
    Song,
    SongEntry,
)

RowKind = Literal["song", "folder", "loop", "end"]
Resolver = Callable[[Database], list[Action]]


@dataclass
class QueueRow:
    """One line of the queue view.

    ``insert_at`` is set for ``end`` rows: the parent path and the index a
    drop onto that row inserts at.
    """

    kind: RowKind
    path: list[int]
    depth: float
    height: float
    current: bool
    label: str
    detail: str = ""
    subtitle: str = ""
    item: Union[Song, QueueFolder, Queue, None] = None
    insert_at: Optional[tuple[list[int], int]] = None

    def goto(self) -> QueueGoto:
        """The action a plain click on this row sends."""
        return QueueGoto(list(self.path))


def format_queue_duration(duration: QueueDuration) -> str:
    """Render a queue duration such as ``1:02:03`` or ``04:05 + 2 random songs``."""
    if duration.infinite:
        return "∞"
    seconds = duration.millis // 1000
    minutes = seconds // 60
    h = minutes // 60
    m = minutes % 60
    s = seconds % 60
    time = f"{h}:{m:02}:{s:02}" if h > 0 else f"{m:02}:{s:02}"
    r = duration.random_counter
    if r == 0:
        return time
    if duration.millis > 0:
        return f"{time} + {r} random songs"
    return f"{r} random songs"


def loop_label_text(queue: Queue) -> str:
    content = queue.content
    if not isinstance(content, QueueLoop):
        return "[???]"
    if content.total == 0:
        return "repeat forever"
    if content.total == 1:
        return "repeat 1 time"
    return f"repeat {content.total} times"


def folder_label_text(folder: QueueFolder, path: list[int]) -> str:
    name = "Queue" if not path and not folder.name else folder.name
    shuffled = " [shuffled]" if folder.order is not None else ""
    return f"{name}  ({len(folder.content)}){shuffled}"


def song_subtitle(song: Song, db: Database) -> str:
    """Describe who made a song and which album it is on."""
    artist = db.artists.get(song.artist)
    album = db.albums.get(song.album) if song.album is not None else None
    if artist is None and album is None:
        return ""
    if album is None:
        return f"by {artist.name}"
    if artist is None:
        album_artist = db.artists.get(album.artist)
        if album_artist is not None:
            return f"on {album.name} by {album_artist.name}"
        return f"on {album.name}"
    return f"by {artist.name} on {album.name}"


def _song_duration_text(song: Song) -> str:
    seconds = song.duration_millis // 1000
    return f"  {seconds // 60}:{seconds % 60:02}"


def _indent_end_target(path: list[int]) -> tuple[list[int], int]:
    if path:
        return list(path[:-1]), path[-1] + 1
    return [], 1


def _rows(
    queue: Queue,
    db: Database,
    depth: float,
    depth_inc_by: float,
    line_height: float,
    path: list[int],
    current: bool,
    skip_folder: bool,
) -> Iterator[QueueRow]:
    content = queue.content
    if isinstance(content, SongEntry):
        song = db.songs.get(content.song_id)
        if song is not None:
            yield QueueRow(
                kind="song",
                path=path,
                depth=depth,
                height=line_height * 1.75,
                current=current,
                label=song.title,
                detail=_song_duration_text(song),
                subtitle=song_subtitle(song, db),
                item=song,
            )
    elif isinstance(content, QueueFolder):
        if not skip_folder:
            yield QueueRow(
                kind="folder",
                path=list(path),
                depth=depth,
                height=line_height * 0.8,
                current=current,
                label=folder_label_text(content, path),
                item=content,
            )
        for i, inner in enumerate(content):
            yield from _rows(
                inner,
                db,
                depth + depth_inc_by,
                depth_inc_by,
                line_height,
                [*path, i],
                current and content.index == i,
                False,
            )
        if not skip_folder:
            yield QueueRow(
                kind="end",
                path=list(path),
                depth=depth,
                height=line_height * 0.4,
                current=current,
                label="",
                insert_at=_indent_end_target(path),
            )
    elif isinstance(content, QueueLoop):
        yield QueueRow(
            kind="loop",
            path=list(path),
            depth=depth,
            height=line_height * 0.8,
            current=current,
            label=loop_label_text(queue),
            item=queue,
        )
        yield from _rows(
            content.inner,
            db,
            depth,
            depth_inc_by,
            line_height,
            [*path, 0],
            current,
            True,
        )
        yield QueueRow(
            kind="end",
            path=list(path),
            depth=depth,
            height=line_height * 0.4,
            current=current,
            label="",
            insert_at=_indent_end_target(path),
        )


def queue_rows(
    queue: Queue, db: Database, line_height: float, depth_inc_by: float = 0.02
) -> list[QueueRow]:
    """Flatten the queue into display rows; the root folder itself is not shown."""
    return list(_rows(queue, db, 0.0, depth_inc_by, line_height, [], True, True))


def album_queue(album_id: AlbumId, db: Database) -> Optional[Queue]:
    album = db.albums.get(album_id)
    if album is None:
        return None
    return Queue.folder(album.name, [Queue.song(s) for s in album.songs])


def artist_queue(artist_id: ArtistId, db: Database) -> Optional[Queue]:
    artist = db.artists.get(artist_id)
    if artist is None:
        return None
    content = [Queue.song(s) for s in artist.singles]
    content.extend(q for q in (album_queue(a, db) for a in artist.albums) if q is not None)
    return Queue.folder(artist.name, content)


def dragged_add_to_queue(
    dragged: Dragging,
    data: Any,
    f_queues: Callable[[Any, list[Queue]], Action],
    f_queue_by_path: Callable[[Any, list[int]], Action],
) -> Resolver:
    """Turn a drop into a function that, given the database, yields the actions to send."""

    def resolve(db: Database) -> list[Action]:
        if isinstance(dragged, DragArtist):
            q = artist_queue(dragged.artist_id, db)
            return [] if q is None else [f_queues(data, [q])]
        if isinstance(dragged, DragAlbum):
            q = album_queue(dragged.album_id, db)
            return [] if q is None else [f_queues(data, [q])]
        if isinstance(dragged, DragSong):
            return [f_queues(data, [Queue.song(dragged.song_id)])]
        if isinstance(dragged, DragQueue):
            if dragged.queue is not None:
                return [f_queues(data, [dragged.queue])]
            return [f_queue_by_path(data, list(dragged.path))]
        if isinstance(dragged, DragQueues):
            return [f_queues(data, list(dragged.queues))]
        raise TypeError(f"cannot drop {type(dragged).__name__} on the queue")

    return resolve


def drop_on_song(dragged: Dragging, path: list[int], insert_below: bool) -> Resolver:
    """Insert above or below the song at ``path``."""

    def add(p: list[int], queues: list[Queue]) -> Action:
        if p:
            j = p[-1]
            return QueueInsert(list(p[:-1]), j + 1 if insert_below else j, queues)
        return QueueAdd([], queues)

    def move(p: list[int], source: list[int]) -> Action:
        target = list(p)
        if insert_below and target:
            target[-1] += 1
        return QueueMove(source, target)

    return dragged_add_to_queue(dragged, list(path), add, move)


def drop_on_folder(dragged: Dragging, path: list[int], insert_into: bool) -> Resolver:
    """Add into the folder at ``path``, or insert just before it."""
    if insert_into:
        return dragged_add_to_queue(
            dragged,
            list(path),
            lambda p, q: QueueAdd(list(p), q),
            lambda p, src: QueueMoveInto(src, list(p)),
        )

    def insert(p: list[int], queues: list[Queue]) -> Action:
        if p:
            return QueueInsert(list(p[:-1]), p[-1], queues)
        return QueueInsert([], 0, queues)

    return dragged_add_to_queue(
        dragged, list(path), insert, lambda p, src: QueueMove(src, list(p))
    )


def drop_on_indent_end(dragged: Dragging, path: list[int], index: int) -> Resolver:
    """Insert at ``index`` inside the element at ``path``."""
    return dragged_add_to_queue(
        dragged,
        (list(path), index),
        lambda d, q: QueueInsert(list(d[0]), d[1], q),
        lambda d, src: QueueMove(src, [*d[0], d[1]]),
    )


def drop_on_loop(dragged: Dragging, path: list[int]) -> Resolver:
    """Add into the element the loop at ``path`` repeats."""
    return dragged_add_to_queue(
        dragged,
        [*path, 0],
        lambda p, q: QueueAdd(list(p), q),
        lambda p, src: QueueMoveInto(src, list(p)),
    )


def drop_on_empty_space(dragged: Dragging) -> Resolver:
    """Append to the end of the whole queue."""
    return dragged_add_to_queue(
        dragged,
        None,
        lambda _, q: QueueAdd([], q),
        lambda _, src: QueueMoveInto(src, []),
    )


def folder_right_click(folder: QueueFolder, path: list[int]) -> Union[QueueShuffle, QueueUnshuffle]:
    """Toggle shuffling of the folder at ``path``."""
    if folder.order is not None:
        return QueueUnshuffle(list(path))
    return QueueShuffle(list(path))


def loop_wheel(queue: Queue, diff: float) -> str:
    """Adjust a loop's repeat count by scrolling and return its new label."""
    content = queue.content
    if isinstance(content, QueueLoop):
        if diff > 0:
            content.total += 1
        elif diff < 0 and content.total > 0:
            content.total -= 1
    return loop_label_text(queue)