"""
The interactive planning session: a menu loop over the set library and the
track collection.
"""

import io
import logging
from pathlib import Path

from rich.console import Console

from djset_cli.core.library import SetLibrary, SetTrack
from djset_cli.core.manager import TrackCollectionManager
from djset_cli.core.recommender import SET_PREP_TIPS, recommend_next, set_prep_advice
from djset_cli.exceptions import LibraryFullError
from djset_cli.media.tags import read_track_tags
from djset_cli.models.config import AppConfig
from djset_cli.models.tracks import FileBackedTrack, MixNotes, StreamBackedTrack

from .formatters import (
    QUIT_CHOICE,
    print_banner,
    print_library_stats,
    print_menu,
    print_plain,
    print_prep_tips,
    print_recommendations,
)
from .prompts import (
    ask_energy,
    ask_float_in_range,
    ask_index,
    ask_int_in_range,
    ask_non_empty,
)

log = logging.getLogger(__name__)

MAX_PREP_HOURS = 12.0


class PlannerSession:
    """
    Runs one interactive session. The session owns a set library and a track
    collection; the collection is closed when the session ends, however it ends.
    """

    def __init__(
        self,
        config: AppConfig,
        console: Console,
        report_dir: Path | None = None,
    ):
        self.config = config
        self.console = console
        self.report_dir = report_dir or Path.cwd()
        self.library = SetLibrary(config.max_tracks)
        self.collection = TrackCollectionManager(config.initial_capacity)
        self.dj_name = ""
        self._actions = {
            1: self.add_library_track,
            2: self.show_library,
            3: self.recommend_tracks,
            4: self.save_library_report,
            5: self.add_file_track,
            6: self.add_stream_track,
            7: self.show_collection,
            8: self.remove_collection_track,
            9: self.save_collection_report,
        }

    def run(self) -> None:
        """Runs the intro and the menu loop until the user quits or input ends."""
        with self.collection:
            print_banner(self.console)
            try:
                self.intro()
                self.menu_loop()
            except EOFError:
                self.console.print("\n[yellow]Input ended.[/yellow]")
            self.console.print(
                f"\nGoodbye, {self.dj_name or 'DJ'}! Keep the crowd moving."
            )

    # --- Session flow ---

    def _ask_tempo(self, prompt: str, default: int | None = None) -> int:
        return ask_int_in_range(
            self.console,
            f"{prompt} ({self.config.bpm_min}-{self.config.bpm_max})",
            self.config.bpm_min,
            self.config.bpm_max,
            default=default,
        )

    def intro(self) -> None:
        self.dj_name = ask_non_empty(self.console, "Enter your DJ name")
        target_tempo = self._ask_tempo("Enter target BPM for your set")
        prep_hours = ask_float_in_range(
            self.console,
            f"How many hours can you prep today (0.0-{MAX_PREP_HOURS})?",
            0.0,
            MAX_PREP_HOURS,
        )
        self.console.print()
        for line in set_prep_advice(target_tempo, prep_hours):
            self.console.print(line)
        print_prep_tips(SET_PREP_TIPS, self.console)

    def menu_loop(self) -> None:
        while True:
            print_menu(self.console)
            choice = ask_int_in_range(
                self.console, "Enter choice", 1, QUIT_CHOICE
            )
            if choice == QUIT_CHOICE:
                return
            self._actions[choice]()

    # --- Set library actions ---

    def add_library_track(self) -> None:
        if self.library.is_full:
            self.console.print(
                f"[red]Library is full ({self.library.max_tracks} tracks). "
                "Cannot add more.[/red]"
            )
            return

        self.console.print(
            f"\n[bold]--- Add Track ({len(self.library) + 1}/"
            f"{self.library.max_tracks}) ---[/bold]"
        )
        track = SetTrack(
            title=ask_non_empty(self.console, "Title"),
            artist=ask_non_empty(self.console, "Artist"),
            genre=ask_non_empty(self.console, "Genre"),
            key=ask_non_empty(self.console, "Key (ex: Am, C, F#m)"),
            tempo=self._ask_tempo("BPM"),
            energy=ask_energy(self.console),
            notes=ask_non_empty(self.console, "Notes (mix notes)"),
        )
        try:
            self.library.add(track)
        except LibraryFullError as e:
            self.console.print(f"[red]{e}[/red]")
            return
        self.console.print("[green]✓ Track added![/green]")

    def show_library(self) -> None:
        if not len(self.library):
            self.console.print("No tracks saved yet.")
            return

        buffer = io.StringIO()
        self.library.print_library(buffer)
        print_plain(self.console, buffer.getvalue())

        genre = ask_non_empty(self.console, "Enter a genre to count matches")
        print_library_stats(
            len(self.library),
            self.library.average_tempo(),
            genre,
            self.library.count_genre_matches(genre),
            self.console,
        )

    def recommend_tracks(self) -> None:
        if not len(self.library) and not len(self.collection):
            self.console.print("No tracks in library. Add tracks first.")
            return

        self.console.print("\n[bold]--- Recommend Next Tracks ---[/bold]")
        current_tempo = self._ask_tempo("Current BPM you are playing")
        current_energy = ask_energy(self.console)
        candidates = [*self.library.tracks, *self.collection]
        matches = recommend_next(
            candidates, current_tempo, current_energy, self.config.bpm_range
        )
        print_recommendations(matches, self.config.bpm_range, self.console)

    def save_library_report(self) -> None:
        path = self.report_dir / self.config.library_report
        if self.library.save_report(path):
            self.console.print(f"[green]✓ Report saved to {path}[/green]")
        else:
            self.console.print(f"[red]✗ Could not open file: {path}[/red]")

    # --- Track collection actions ---

    def add_file_track(self) -> None:
        self.console.print("\n[bold]--- Add File-Backed Track ---[/bold]")
        path = ask_non_empty(self.console, "File path (ex: track.wav)")
        tags = read_track_tags(path)
        if tags:
            log.debug(f"Prefilling prompts from tags of '{path}': {tags}")

        tag_tempo = None
        if tags and tags.tempo is not None:
            if self.config.bpm_min <= tags.tempo <= self.config.bpm_max:
                tag_tempo = tags.tempo

        title = ask_non_empty(
            self.console, "Title", default=tags.title if tags else None
        )
        tempo = self._ask_tempo("BPM", default=tag_tempo)
        energy = ask_energy(self.console)
        notes = ask_non_empty(self.console, "Notes (mix notes)")

        self.collection += FileBackedTrack(title, tempo, energy, path, MixNotes(notes))
        self.console.print("[green]✓ File-backed track added.[/green]")

    def add_stream_track(self) -> None:
        self.console.print("\n[bold]--- Add Stream-Backed Track ---[/bold]")
        title = ask_non_empty(self.console, "Title")
        tempo = self._ask_tempo("BPM")
        energy = ask_energy(self.console)
        platform = ask_non_empty(self.console, "Platform (ex: Spotify)")
        notes = ask_non_empty(self.console, "Notes (mix notes)")

        self.collection += StreamBackedTrack(
            title, tempo, energy, platform, MixNotes(notes)
        )
        self.console.print("[green]✓ Stream-backed track added.[/green]")

    def show_collection(self) -> None:
        buffer = io.StringIO()
        self.collection.print_all(buffer)
        print_plain(self.console, buffer.getvalue())

    def remove_collection_track(self) -> None:
        self.console.print("\n[bold]--- Remove Collection Track ---[/bold]")
        if not len(self.collection):
            self.console.print("Nothing to remove.")
            return

        self.show_collection()
        index = ask_index(self.console, "Enter index to remove", len(self.collection))
        if self.collection.remove_at(index):
            self.console.print(f"[green]✓ Removed item {index}.[/green]")
        else:
            self.console.print("[red]✗ Remove failed.[/red]")

    def save_collection_report(self) -> None:
        path = self.report_dir / self.config.collection_report
        if self.collection.save_report(path):
            self.console.print(f"[green]✓ Report saved to {path}[/green]")
        else:
            self.console.print(f"[red]✗ Could not open file: {path}[/red]")
