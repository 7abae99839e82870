"""
Display Formatters Module
Handles formatting and displaying of suggested recordings.
"""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align
from rich import box

from ..core.config import ERROR_MESSAGES
from ..models.recording import Recording
from ..models.track import Track
from ..services.autocomplete import AutocompletePage
from ..utils.file_duration_reader import format_length
from ..utils.similarity import similar_lengths


class DisplayFormatters:
    """Formatters for displaying suggested recordings."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )
    
    def format_length(self, track_length: Optional[int], recording: Recording) -> Text:
        """Format a recording's length, green when it is close to the track's."""
        if not recording.length:
            return Text("-", style="dim")
        style = "green" if track_length and similar_lengths(track_length, recording.length) else "white"
        return Text(format_length(recording.length), style=style)
    
    def build_recordings_table(self, recordings: List[Recording], track_length: Optional[int] = None) -> Table:
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue",
            show_lines=True
        )
        
        table.add_column("#", style="bold white", width=4, justify="center")
        table.add_column("Title", style="white", width=30)
        table.add_column("Artist", style="green", width=28, no_wrap=False)
        table.add_column("Length", width=8, justify="center")
        table.add_column("Appears On", style="yellow", width=30, no_wrap=False)
        table.add_column("MBID", style="dim", width=36)
        
        for i, recording in enumerate(recordings, 1):
            title = Text(recording.get_display_name())
            if recording.video:
                title.append(" [video]", style="dim")
            
            appears_on = ""
            if recording.appears_on and recording.appears_on.results:
                names = [appearance.name for appearance in recording.appears_on.results[:3]]
                appears_on = ", ".join(names)
                extra = recording.appearance_count - len(names)
                if extra > 0:
                    appears_on += f" (+{extra} more)"
            
            table.add_row(
                str(i),
                title,
                recording.artist or "Unknown",
                self.format_length(track_length, recording),
                appears_on,
                recording.gid
            )
        
        return table
    
    def display_suggestions(self, track: Track, recordings: Optional[List[Recording]]):
        """Display a track's suggested recordings."""
        if not recordings:
            self.console.print(f"[bold red]✗[/bold red] {ERROR_MESSAGES['NO_RESULTS']}")
            return
        
        track_length = track.length.get()
        subtitle = f"{track.name.get()} ({format_length(track_length) if track_length else '?:??'})"
        self.console.print()
        self.console.print(self.create_header_panel(
            f"SUGGESTED RECORDINGS ({len(recordings)})",
            subtitle
        ))
        self.console.print()
        self.console.print(self.build_recordings_table(recordings, track_length))
        self.console.print()
    
    def display_autocomplete_page(self, track: Track, page: Optional[AutocompletePage]):
        """Display one page of autocomplete results."""
        if page is None or not page.recordings:
            self.console.print("[bold red]✗[/bold red] No recordings found.")
            return
        
        self.console.print()
        self.console.print(self.build_recordings_table(page.recordings, track.length.get()))
        self.console.print(f"[dim]Page {page.current}/{page.pages}[/dim]")
        self.console.print()
