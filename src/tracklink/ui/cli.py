"""
Tracklink CLI Module
Command-line interface for looking up suggested recordings of a track.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from ..clients.musicbrainz import MusicBrainzClient
from ..core.config import PROJECT_NAME, PROJECT_VERSION, ERROR_MESSAGES
from ..core.exceptions import TracklinkError
from ..core.logger import get_logger, setup_logging
from ..models.artist_credit import ArtistCredit, ArtistCreditName
from ..models.release import ReleaseGroup
from ..models.track import Track
from ..services.autocomplete import AutocompleteRequest
from ..services.session import ReleaseEditSession
from ..services.suggestion_coordinator import RecordingSuggestionCoordinator
from ..utils.file_duration_reader import get_file_length, get_file_title, parse_length
from ..utils.retry import RetryPolicy
from .formatters import DisplayFormatters

logger = get_logger(__name__)

# A command-line run should not retry forever
CLI_MAX_RETRY_ATTEMPTS = 3


class TracklinkCLI:
    """Main CLI class for Tracklink."""
    
    def __init__(self, client: Optional[MusicBrainzClient] = None, formatters: Optional[DisplayFormatters] = None):
        self.client = client or MusicBrainzClient()
        self.formatters = formatters or DisplayFormatters()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} - Recording suggestions v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s suggest --title "Intro" --artist-id 8bfac288-ccc5-448d-9573-c33ea2aa5c30 --length 2:05
  %(prog)s suggest --file track01.flac --artist-id 8bfac288-... --release-group 4b1b2ec8-...
  %(prog)s autocomplete --title "Intr" --artist-id 8bfac288-... --page 2
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            default='WARNING',
            help='Logging level (default: WARNING)'
        )
        
        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )
        
        suggest_parser = subparsers.add_parser(
            'suggest',
            help='Suggest recordings for a track'
        )
        self._add_track_args(suggest_parser)
        suggest_parser.add_argument(
            '--release-group', '-g',
            help='MusicBrainz release group ID to prefer recordings from'
        )
        
        autocomplete_parser = subparsers.add_parser(
            'autocomplete',
            help='Run a recording autocomplete search for a track'
        )
        self._add_track_args(autocomplete_parser)
        autocomplete_parser.add_argument(
            '--page', '-p',
            type=int,
            default=1,
            help='Result page (default: 1)'
        )
        
        return parser
    
    def _add_track_args(self, parser: argparse.ArgumentParser):
        """Add arguments describing the track."""
        parser.add_argument(
            '--title', '-t',
            help='Track title (read from --file tags if omitted)'
        )
        parser.add_argument(
            '--artist-id', '-a',
            action='append',
            required=True,
            help='MusicBrainz artist ID; repeat for multiple artists'
        )
        parser.add_argument(
            '--artist-name', '-n',
            action='append',
            help='Credited artist name, in the same order as --artist-id'
        )
        parser.add_argument(
            '--length', '-l',
            help='Track length as M:SS or milliseconds'
        )
        parser.add_argument(
            '--file', '-f',
            type=Path,
            help='Audio file to read the length (and title) from'
        )
    
    def build_track(self, parsed_args: argparse.Namespace) -> Track:
        """Build a track from parsed arguments."""
        title = parsed_args.title
        length = None
        
        if parsed_args.length:
            length = parse_length(parsed_args.length)
            if length is None:
                raise TracklinkError(ERROR_MESSAGES["INVALID_LENGTH"])
        
        if parsed_args.file:
            if length is None:
                length = get_file_length(parsed_args.file)
            if not title:
                title = get_file_title(parsed_args.file)
        
        if not title:
            raise TracklinkError(ERROR_MESSAGES["MISSING_TITLE"])
        
        names = parsed_args.artist_name or []
        artist_ids = parsed_args.artist_id
        credit = ArtistCredit(tuple(
            ArtistCreditName(
                artist_gid=gid,
                name=names[i] if i < len(names) else gid,
                join_phrase=" & " if i < len(artist_ids) - 1 else ""
            )
            for i, gid in enumerate(artist_ids)
        ))
        
        return Track(name=title, length=length, artist_credit=credit)
    
    async def suggest(self, track: Track, release_group_gid: Optional[str] = None):
        session = ReleaseEditSession(ReleaseGroup(release_group_gid) if release_group_gid else None)
        session.add_track(track)
        coordinator = RecordingSuggestionCoordinator(
            session,
            client=self.client,
            retry_policy=RetryPolicy(max_attempts=CLI_MAX_RETRY_ATTEMPTS)
        )
        try:
            recordings = await coordinator.find_recording_suggestions(track)
        finally:
            coordinator.close()
        self.formatters.display_suggestions(track, recordings)
        return recordings
    
    async def autocomplete(self, track: Track, page: int = 1):
        session = ReleaseEditSession()
        coordinator = RecordingSuggestionCoordinator(session, client=self.client)
        hook = coordinator.autocomplete_hook(track)
        try:
            request = hook(AutocompleteRequest(term=track.name.get(), page=page))
            result = await request.execute(self.client)
        finally:
            coordinator.close()
        self.formatters.display_autocomplete_page(track, result)
        return result
    
    def run(self, args: List[str] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        setup_logging(parsed_args.log_level)
        console = self.formatters.console
        
        try:
            track = self.build_track(parsed_args)
            if parsed_args.mode == 'suggest':
                asyncio.run(self.suggest(track, parsed_args.release_group))
            elif parsed_args.mode == 'autocomplete':
                asyncio.run(self.autocomplete(track, parsed_args.page))
        except KeyboardInterrupt:
            console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            sys.exit(1)
        except TracklinkError as e:
            logger.debug("Command failed", exc_info=True)
            console.print(f"[bold red]✗[/bold red] {e}")
            sys.exit(1)
        finally:
            self.client.close()
