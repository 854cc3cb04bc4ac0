"""Library browser: sorted library, regex search with scoring, tag filters and selection."""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Literal, NamedTuple, Optional

from tunelib.filters import Filter
from tunelib.models import Album, AlbumId, Artist, ArtistId, Database, Song, SongId
from tunelib.search import compile_search, score_item
from tunelib.selection import LibraryEntry, Selection, selection_summary

_log = logging.getLogger(__name__)

RowKind = Literal["artist", "album", "song"]


class FilteredAlbum(NamedTuple):
    album_id: AlbumId
    songs: list[tuple[SongId, float]]
    score: float


class FilteredArtist(NamedTuple):
    artist_id: ArtistId
    singles: list[tuple[SongId, float]]
    albums: list[FilteredAlbum]
    score: float


@dataclass
class LibraryRow:
    """One line of the library list."""

    kind: RowKind
    id: int
    label: str
    detail: str
    height: float
    selected: bool = False


def build_library(db: Database) -> list[LibraryEntry]:
    """List every artist (sorted by name) with its singles and its albums' songs."""
    library: list[LibraryEntry] = []
    for artist_id, artist in sorted(db.artists.items(), key=lambda item: item[1].name):
        albums: list[tuple[AlbumId, list[SongId]]] = []
        for album_id in artist.albums:
            album = db.albums.get(album_id)
            if album is None:
                _log.warning("No album with id %s found in db!", album_id)
                albums.append((album_id, []))
            else:
                albums.append((album_id, list(album.songs)))
        library.append((artist_id, list(artist.singles), albums))
    return library


def _by_score_desc(items: Iterable) -> list:
    return sorted(items, key=lambda item: item[-1], reverse=True)


def _score_songs(
    song_ids: Iterable[SongId], db: Database, filter_song: Callable[[Song], float]
) -> list[tuple[SongId, float]]:
    scored = []
    for song_id in song_ids:
        song = db.songs.get(song_id)
        if song is None:
            continue
        score = filter_song(song)
        if score > 0.0:
            scored.append((song_id, score))
    return _by_score_desc(scored)


def filter_library(
    library: Iterable[LibraryEntry],
    db: Database,
    filter_artist: Callable[[Artist], float],
    filter_album: Callable[[Album], float],
    filter_song: Callable[[Song], float],
) -> list[FilteredArtist]:
    """Score and filter the library.

    A filter result of 0.0 hides an entry, 1.0 is neutral and anything higher
    ranks it better. An album's score is its own times its best song's; an
    artist's is its own times the best of its singles and albums. Every level
    is sorted by score, highest first, keeping library order among equals.
    """
    result: list[FilteredArtist] = []
    for artist_id, singles, albums in library:
        artist = db.artists.get(artist_id)
        if artist is None:
            continue
        artist_score = filter_artist(artist)
        if artist_score <= 0.0:
            continue
        single_scores = _score_songs(singles, db, filter_song)
        best = max((score for _, score in single_scores), default=0.0)
        album_scores: list[FilteredAlbum] = []
        for album_id, songs in albums:
            album = db.albums.get(album_id)
            if album is None:
                continue
            album_score = filter_album(album)
            if album_score <= 0.0:
                continue
            song_scores = _score_songs(songs, db, filter_song)
            album_score *= max((score for _, score in song_scores), default=0.0)
            if album_score > 0.0:
                best = max(best, album_score)
                album_scores.append(FilteredAlbum(album_id, song_scores, album_score))
        artist_score *= best
        if artist_score > 0.0:
            result.append(
                FilteredArtist(artist_id, single_scores, _by_score_desc(album_scores), artist_score)
            )
    return _by_score_desc(result)


def album_duration_text(album: Album, db: Database) -> str:
    """Total length of the album's known songs, e.g. ``  42:07`` or ``  1:02:03``."""
    seconds = sum(song.duration_millis for song in map(db.get_song, album.songs) if song) // 1000
    if seconds >= 60 * 60:
        return f"  {seconds // 3600}:{(seconds // 60) % 60:02}:{seconds % 60:02}"
    return f"  {seconds // 60}:{seconds % 60:02}"


def song_duration_text(song: Song) -> str:
    seconds = song.duration_millis // 1000
    return f"  {seconds // 60}:{seconds % 60:02}"


class LibraryBrowser:
    """Search, filter and selection state of the library view."""

    def __init__(self) -> None:
        self.selection = Selection()
        self.filter_songs = Filter()
        self.filter_albums = Filter()
        self.filter_artists = Filter()
        self.search_artist = ""
        self.search_album = ""
        self.search_song = ""
        self.artist_regex: Optional[re.Pattern[str]] = None
        self.album_regex: Optional[re.Pattern[str]] = None
        self.song_regex: Optional[re.Pattern[str]] = None
        self.case_sensitive = False
        self.prefer_start_matches = True
        self.library_sorted: list[LibraryEntry] = []
        self.library_filtered: list[FilteredArtist] = []
        self._library_updated = True
        self._search_changed = False
        self._filter_snapshot: Optional[tuple[Filter, Filter, Filter]] = None

    def _compile(self, text: str) -> Optional[re.Pattern[str]]:
        try:
            return compile_search(text, not self.case_sensitive)
        except re.error:
            return None

    def set_search(
        self,
        artist: Optional[str] = None,
        album: Optional[str] = None,
        song: Optional[str] = None,
    ) -> None:
        """Change any of the three search texts; an invalid pattern hides everything."""
        if artist is not None and artist != self.search_artist:
            self.search_artist = artist
            self.artist_regex = self._compile(artist)
            self._search_changed = True
        if album is not None and album != self.search_album:
            self.search_album = album
            self.album_regex = self._compile(album)
            self._search_changed = True
        if song is not None and song != self.search_song:
            self.search_song = song
            self.song_regex = self._compile(song)
            self._search_changed = True

    def set_case_sensitive(self, value: bool) -> None:
        if value != self.case_sensitive:
            self.case_sensitive = value
            self.artist_regex = self._compile(self.search_artist)
            self.album_regex = self._compile(self.search_album)
            self.song_regex = self._compile(self.search_song)
        self._search_changed = True

    def set_prefer_start_matches(self, value: bool) -> None:
        self.prefer_start_matches = value
        self._search_changed = True

    def library_changed(self) -> None:
        """Mark the library as changed so the next update rebuilds it."""
        self._library_updated = True

    def _current_filters(self) -> tuple[Filter, Filter, Filter]:
        return (self.filter_artists, self.filter_albums, self.filter_songs)

    def update(self, db: Database) -> bool:
        """Rebuild and refilter as needed; True if the filtered library was recomputed."""
        changed = self._search_changed
        self._search_changed = False
        if self.selection.take_changed():
            changed = True
        if self._filter_snapshot != self._current_filters():
            self._filter_snapshot = copy.deepcopy(self._current_filters())
            changed = True
        if self._library_updated:
            self._library_updated = False
            self.library_sorted = build_library(db)
            changed = True
        if not changed:
            return False

        prefer = self.prefer_start_matches
        allow_singles = not self.search_album and not self.filter_albums.filters

        def artist_score(artist: Artist) -> float:
            return score_item(
                self.filter_artists, artist.general, artist.name,
                self.artist_regex, self.search_artist, prefer,
            )

        def album_score(album: Album) -> float:
            return score_item(
                self.filter_albums, album.general, album.name,
                self.album_regex, self.search_album, prefer,
            )

        def song_score(song: Song) -> float:
            if song.album is None and not allow_singles:
                return 0.0
            return score_item(
                self.filter_songs, song.general, song.title,
                self.song_regex, self.search_song, prefer,
            )

        self.library_filtered = filter_library(
            self.library_sorted, db, artist_score, album_score, song_score
        )
        return True

    def selected_add_all(self) -> None:
        """Select every shown artist, album and song."""
        for entry in self.library_filtered:
            self.selection.insert_artist(entry.artist_id)
            for song_id, _ in entry.singles:
                self.selection.insert_song(song_id)
            for album in entry.albums:
                self.selection.insert_album(album.album_id)
                for song_id, _ in album.songs:
                    self.selection.insert_song(song_id)

    def selected_add_songs(self) -> None:
        """Select every shown song."""
        for entry in self.library_filtered:
            for song_id, _ in entry.singles:
                self.selection.insert_song(song_id)
            for album in entry.albums:
                for song_id, _ in album.songs:
                    self.selection.insert_song(song_id)

    def selected_add_albums(self) -> None:
        """Select every shown album and its shown songs."""
        for entry in self.library_filtered:
            for album in entry.albums:
                self.selection.insert_album(album.album_id)
                for song_id, _ in album.songs:
                    self.selection.insert_song(song_id)

    def selection_text(self) -> Optional[str]:
        return selection_summary(*self.selection.counts())

    def rows(self, db: Database, line_height: float) -> list[LibraryRow]:
        """The list lines for the filtered library, in display order."""
        rows: list[LibraryRow] = []
        for entry in self.library_filtered:
            rows.append(self._artist_row(entry.artist_id, db, line_height))
            rows.extend(self._song_row(song_id, db, line_height) for song_id, _ in entry.singles)
            for album in entry.albums:
                rows.append(self._album_row(album.album_id, db, line_height))
                rows.extend(self._song_row(song_id, db, line_height) for song_id, _ in album.songs)
        return rows

    def _artist_row(self, artist_id: ArtistId, db: Database, h: float) -> LibraryRow:
        artist = db.artists.get(artist_id)
        label = artist.name if artist is not None else f"[ Artist #{artist_id} ]"
        return LibraryRow(
            "artist", artist_id, label, "", h * 2.5, self.selection.contains_artist(artist_id)
        )

    def _album_row(self, album_id: AlbumId, db: Database, h: float) -> LibraryRow:
        album = db.albums.get(album_id)
        if album is not None:
            label, detail = album.name, album_duration_text(album, db)
        else:
            label, detail = f"[ Album #{album_id} ]", ""
        return LibraryRow(
            "album", album_id, label, detail, h * 1.5, self.selection.contains_album(album_id)
        )

    def _song_row(self, song_id: SongId, db: Database, h: float) -> LibraryRow:
        song = db.songs.get(song_id)
        if song is not None:
            label, detail = song.title, song_duration_text(song)
        else:
            label, detail = f"[ Song #{song_id} ]", ""
        return LibraryRow("song", song_id, label, detail, h, self.selection.contains_song(song_id))