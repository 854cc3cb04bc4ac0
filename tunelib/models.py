"""Library and queue data types shared by the browser and the queue view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

SongId = int
AlbumId = int
ArtistId = int
CoverId = int


@dataclass
class GeneralData:
    """Free-form data attached to songs, albums and artists."""

    tags: list[str] = field(default_factory=list)


@dataclass
class Song:
    id: SongId
    title: str
    artist: ArtistId
    album: Optional[AlbumId] = None
    duration_millis: int = 0
    cover: Optional[CoverId] = None
    general: GeneralData = field(default_factory=GeneralData)


@dataclass
class Album:
    id: AlbumId
    name: str
    artist: ArtistId
    songs: list[SongId] = field(default_factory=list)
    cover: Optional[CoverId] = None
    general: GeneralData = field(default_factory=GeneralData)


@dataclass
class Artist:
    id: ArtistId
    name: str
    albums: list[AlbumId] = field(default_factory=list)
    singles: list[SongId] = field(default_factory=list)
    cover: Optional[CoverId] = None
    general: GeneralData = field(default_factory=GeneralData)


@dataclass
class SongEntry:
    """A single song inside a queue."""

    song_id: SongId


@dataclass
class QueueFolder:
    """An ordered group of queue elements; ``order`` is set when shuffled."""

    name: str = ""
    content: list[Queue] = field(default_factory=list)
    index: int = 0
    order: Optional[list[int]] = None

    def __iter__(self) -> Iterator[Queue]:
        """Yield the elements in play order (the shuffle order, if any)."""
        if self.order is None:
            yield from self.content
        else:
            for i in self.order:
                if 0 <= i < len(self.content):
                    yield self.content[i]

    def __len__(self) -> int:
        return len(self.content)


@dataclass
class QueueLoop:
    """Repeats ``inner`` ``total`` times; a total of 0 repeats forever."""

    total: int
    done: int
    inner: Queue


QueueContent = Union[SongEntry, QueueFolder, QueueLoop]


@dataclass
class Queue:
    content: QueueContent

    @classmethod
    def song(cls, song_id: SongId) -> Queue:
        return cls(SongEntry(song_id))

    @classmethod
    def folder(cls, name: str, content: Optional[list[Queue]] = None) -> Queue:
        return cls(QueueFolder(name=name, content=list(content or [])))

    @classmethod
    def loop(cls, total: int, inner: Queue) -> Queue:
        return cls(QueueLoop(total=total, done=0, inner=inner))


@dataclass
class QueueDuration:
    """Length of a queue: infinite, or millis plus songs of unknown length."""

    infinite: bool = False
    millis: int = 0
    random_counter: int = 0


@dataclass
class Database:
    songs: dict[SongId, Song] = field(default_factory=dict)
    albums: dict[AlbumId, Album] = field(default_factory=dict)
    artists: dict[ArtistId, Artist] = field(default_factory=dict)
    queue: Queue = field(default_factory=lambda: Queue.folder(""))
    playing: bool = False

    def get_song(self, song_id: SongId) -> Optional[Song]:
        return self.songs.get(song_id)


# Server actions produced by queue interactions.


@dataclass
class QueueAdd:
    path: list[int]
    queues: list[Queue]


@dataclass
class QueueInsert:
    path: list[int]
    index: int
    queues: list[Queue]


@dataclass
class QueueMove:
    source: list[int]
    target: list[int]


@dataclass
class QueueMoveInto:
    source: list[int]
    target: list[int]


@dataclass
class QueueGoto:
    path: list[int]


@dataclass
class QueueShuffle:
    path: list[int]


@dataclass
class QueueUnshuffle:
    path: list[int]


Action = Union[
    QueueAdd, QueueInsert, QueueMove, QueueMoveInto, QueueGoto, QueueShuffle, QueueUnshuffle
]


# Things that can be dragged onto the queue.


@dataclass
class DragArtist:
    artist_id: ArtistId


@dataclass
class DragAlbum:
    album_id: AlbumId


@dataclass
class DragSong:
    song_id: SongId


@dataclass
class DragQueue:
    """A dragged queue element: a copy (``queue``) or a reference by ``path``."""

    queue: Optional[Queue] = None
    path: Optional[list[int]] = None

    def __post_init__(self) -> None:
        if (self.queue is None) == (self.path is None):
            raise ValueError("DragQueue needs exactly one of queue or path")


@dataclass
class DragQueues:
    queues: list[Queue]


Dragging = Union[DragArtist, DragAlbum, DragSong, DragQueue, DragQueues]