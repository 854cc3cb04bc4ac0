# tunelib

The logic behind a music client's library browser and play queue. You
supply a music database as plain Python objects and get plain Python values
back: display rows, labels, search scores, and the server actions that user
interactions lead to.

## Modules

### `tunelib.models`

Data types, all dataclasses:

- `GeneralData` (a list of `tags`), `Song`, `Album`, `Artist`, and the
  `Database` that holds them in `songs`, `albums` and `artists` dicts keyed by
  id, along with a `queue` and a `playing` flag. `Database.get_song(id)`
  returns the song or `None`.
- The play queue: a `Queue` wraps a `SongEntry`, a `QueueFolder` or a
  `QueueLoop`. Build one with `Queue.song(song_id)`,
  `Queue.folder(name, content)` or `Queue.loop(total, inner)`. A loop with a
  total of 0 repeats forever. Iterating a `QueueFolder` yields its elements in
  play order, which is the shuffle `order` when one is set.
- `QueueDuration`: the length of a queue. It is either infinite, or a number
  of milliseconds plus a count of songs whose length is not known.
- Server actions: `QueueAdd`, `QueueInsert`, `QueueMove`, `QueueMoveInto`,
  `QueueGoto`, `QueueShuffle`, `QueueUnshuffle`.
- Things that can be dragged: `DragArtist`, `DragAlbum`, `DragSong`,
  `DragQueue` and `DragQueues`. A `DragQueue` holds either a copied `queue` or
  a `path` into the current queue, and exactly one of the two. Giving both, or
  neither, raises `ValueError`.

### `tunelib.queue_view`

- `queue_rows(queue, db, line_height, depth_inc_by=0.02)` flattens a queue
  into a list of `QueueRow`. Each row has a kind (`"song"`, `"folder"`,
  `"loop"` or `"end"`), a path, an indent depth, a height, a current-song
  flag and labels. The root folder itself is not shown. `QueueRow.goto()`
  gives the `QueueGoto` that a click on the row sends.
- Labels: `format_queue_duration` (for example `1:02:03`,
  `04:05 + 2 random songs` or `∞`), `loop_label_text`, `folder_label_text`
  and `song_subtitle`.
- Drops: `drop_on_song`, `drop_on_folder`, `drop_on_indent_end`,
  `drop_on_loop` and `drop_on_empty_space` each take something being dragged
  and return a function. Call that function with the database to get the
  list of actions to send. `dragged_add_to_queue` is the general form they
  share. `album_queue` and `artist_queue` build a folder for a whole album or
  artist.
- `folder_right_click(folder, path)` toggles shuffling.
  `loop_wheel(queue, diff)` changes a loop's repeat count in place and
  returns the loop's new label.

### `tunelib.filters`

`Filter` joins a list of filters with AND (`and_=True`) or OR. An empty
filter passes everything. The entries can be `Nested`, `Not`, `TagEq`,
`TagStartsWith` or `TagWithValueInt`. `TagWithValueInt` matches a tag that is
a prefix followed by a 32-bit integer within `[min, max]`, both ends
included. `Filter.get(path)` finds an entry inside nested filters.
`Filter.toggle_joiner(path)` switches a filter between AND and OR.

### `tunelib.search`

- `compile_search(pattern, case_insensitive)` compiles a pattern. An empty
  pattern gives `None`. A pattern that is not valid raises `re.error`.
- `match_score(text, regex, search_text, prefer_start_matches)` returns a
  score:
  - 0.0 hides the entry.
  - 1.0 means there is no search.
  - Higher scores rank better. With `prefer_start_matches`, a match of the
    whole text, of a whole word, or at the start of a word ranks above a
    match elsewhere.
- `score_item` first checks a `Filter` against the item's tags, then scores
  the item's text.

### `tunelib.selection`

`Selection` is a thread-safe set of selected artists, albums and songs, with
a change flag that `take_changed()` reads and resets.
`Selection.as_queue(library_sorted, db)` turns the selection into queue
entries, in library order. Selected artists and albums become folders.
`selection_summary(artists, albums, songs)` gives a short text such as
`"3 songs and 1 album selected"`, or `None` when nothing is selected.

### `tunelib.library`

- `build_library(db)` lists the artists sorted by name, each with its singles
  and its albums' songs.
- `filter_library(...)` scores and filters that list. An album's score is its
  own score times that of its best song. An artist's score is its own score
  times the best of its singles and albums. Each level is sorted by score,
  highest first.
- `album_duration_text` and `song_duration_text` format lengths.
- `LibraryBrowser` holds the search texts (`set_search`), the
  case-sensitivity setting (`set_case_sensitive`), the prefer-start setting
  (`set_prefer_start_matches`), the three tag filters (`filter_artists`,
  `filter_albums`, `filter_songs`) and a `selection`.
  - `update(db)` recomputes the filtered library when something has changed
    and returns whether it did.
  - `rows(db, line_height)` returns `LibraryRow` values in display order.
  - `selected_add_all`, `selected_add_songs` and `selected_add_albums` select
    what is shown.
  - `selection_text()` describes the current selection.

## Example

```python
from tunelib.library import LibraryBrowser
from tunelib.models import Album, Artist, Database, Song

db = Database(
    songs={1: Song(id=1, title="Heartbeat", artist=10, album=100, duration_millis=215000)},
    albums={100: Album(id=100, name="Pulse", artist=10, songs=[1])},
    artists={10: Artist(id=10, name="The Examples", albums=[100])},
)

browser = LibraryBrowser()
browser.set_search(song="beat")
browser.update(db)
for row in browser.rows(db, line_height=20.0):
    print(row.kind, row.label, row.detail)
```

## What it does not do

tunelib draws nothing and handles no windows or input devices. It does not
connect to a server, play audio, or load and store a music database. The
caller provides the `Database`, sends the actions the package returns, and
renders the rows. The package has no command-line program.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```