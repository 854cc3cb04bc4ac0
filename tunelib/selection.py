"""The set of artists, albums and songs picked in the library browser."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from tunelib.models import AlbumId, ArtistId, Database, Queue, SongId

LibraryEntry = tuple[ArtistId, list[SongId], list[tuple[AlbumId, list[SongId]]]]

UNKNOWN_ALBUM = "< unknown album >"
UNKNOWN_ARTIST = "< unknown artist >"


class Selection:
    """Thread-safe selection of artists, albums and songs with a change flag."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._artists: set[ArtistId] = set()
        self._albums: set[AlbumId] = set()
        self._songs: set[SongId] = set()
        self._changed = False

    def clear(self) -> None:
        self.set_to((), (), ())

    def set_to(
        self,
        artists: Iterable[ArtistId],
        albums: Iterable[AlbumId],
        songs: Iterable[SongId],
    ) -> None:
        with self._lock:
            self._artists = set(artists)
            self._albums = set(albums)
            self._songs = set(songs)
            self._changed = True

    def contains_artist(self, artist_id: ArtistId) -> bool:
        with self._lock:
            return artist_id in self._artists

    def contains_album(self, album_id: AlbumId) -> bool:
        with self._lock:
            return album_id in self._albums

    def contains_song(self, song_id: SongId) -> bool:
        with self._lock:
            return song_id in self._songs

    @staticmethod
    def _insert(target: set[int], item: int) -> bool:
        if item in target:
            return False
        target.add(item)
        return True

    @staticmethod
    def _remove(target: set[int], item: int) -> bool:
        if item not in target:
            return False
        target.discard(item)
        return True

    def insert_artist(self, artist_id: ArtistId) -> bool:
        """Add an artist; True if it was not selected before."""
        with self._lock:
            self._changed = True
            return self._insert(self._artists, artist_id)

    def insert_album(self, album_id: AlbumId) -> bool:
        """Add an album; True if it was not selected before."""
        with self._lock:
            self._changed = True
            return self._insert(self._albums, album_id)

    def insert_song(self, song_id: SongId) -> bool:
        """Add a song; True if it was not selected before."""
        with self._lock:
            self._changed = True
            return self._insert(self._songs, song_id)

    def remove_artist(self, artist_id: ArtistId) -> bool:
        """Drop an artist; True if it was selected."""
        with self._lock:
            self._changed = True
            return self._remove(self._artists, artist_id)

    def remove_album(self, album_id: AlbumId) -> bool:
        """Drop an album; True if it was selected."""
        with self._lock:
            self._changed = True
            return self._remove(self._albums, album_id)

    def remove_song(self, song_id: SongId) -> bool:
        """Drop a song; True if it was selected."""
        with self._lock:
            self._changed = True
            return self._remove(self._songs, song_id)

    def counts(self) -> tuple[int, int, int]:
        """Number of selected artists, albums and songs."""
        with self._lock:
            return len(self._artists), len(self._albums), len(self._songs)

    def take_changed(self) -> bool:
        """Return whether the selection changed since the last call, and reset the flag."""
        with self._lock:
            changed = self._changed
            self._changed = False
            return changed

    def as_queue(self, library_sorted: Iterable[LibraryEntry], db: Database) -> list[Queue]:
        """Build queue elements for the selection, in library order.

        Selected artists and albums become folders holding their selected
        songs (and, for artists, their selected albums); other selected songs
        are placed directly in the enclosing list.
        """
        with self._lock:
            sel_artists = set(self._artists)
            sel_albums = set(self._albums)
            sel_songs = set(self._songs)
        out: list[Queue] = []
        for artist_id, singles, albums in library_sorted:
            artist_selected = artist_id in sel_artists
            local_artist: list[Queue] = [] if artist_selected else out
            local_artist.extend(Queue.song(s) for s in singles if s in sel_songs)
            for album_id, songs in albums:
                album_selected = album_id in sel_albums
                local_album: list[Queue] = [] if album_selected else local_artist
                local_album.extend(Queue.song(s) for s in songs if s in sel_songs)
                if album_selected:
                    album = db.albums.get(album_id)
                    name = album.name if album is not None else UNKNOWN_ALBUM
                    local_artist.append(Queue.folder(name, local_album))
            if artist_selected:
                artist = db.artists.get(artist_id)
                name = artist.name if artist is not None else UNKNOWN_ARTIST
                out.append(Queue.folder(name, local_artist))
        return out


def _count(n: int, word: str) -> str:
    return f"1 {word}" if n == 1 else f"{n} {word}s"


def selection_summary(artists: int, albums: int, songs: int) -> Optional[str]:
    """Describe how much is selected, or None if nothing is."""
    parts = []
    if songs:
        parts.append(_count(songs, "song"))
    if albums:
        parts.append(_count(albums, "album"))
    if artists:
        if artists > 1 and albums > 1 and songs == 1:
            parts.append(f"{artists} artist")
        else:
            parts.append(_count(artists, "artist"))
    if not parts:
        return None
    if len(parts) == 1:
        return f"{parts[0]} selected"
    return f"{', '.join(parts[:-1])} and {parts[-1]} selected"