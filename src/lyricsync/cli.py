"""Command-line interface using Click."""

import json
import sys
from pathlib import Path

import click

from . import __version__
from .core.audio import get_audio_duration
from .core.classify import classify
from .core.forced_align import ForcedAligner
from .core.lrc import to_lrc
from .core.sections import SectionTimingModel, load_section_speeds
from .core.serialization import load_transcript
from .core.sync import process_lyrics, resolve_duration
from .core.syllables import syllables as count_syllables
from .core.text_utils import clean_scraped_lyrics, extract_keywords
from .config import KEYWORD_LIMIT
from .exceptions import LyricsSyncError
from .utils.logging import setup_logging
from .utils.validation import validate_output_path


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """lyricsync - time-stamp lyrics for karaoke-style display."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.argument('lyrics_file', type=click.File('r', encoding='utf-8'))
@click.option('--duration', type=float, default=None,
              help='Audio duration in seconds (default: from --audio, else 180)')
@click.option('--audio', type=click.Path(exists=True, dir_okay=False),
              help='Audio file, used for duration and forced alignment')
@click.option('--transcript', type=click.Path(exists=True, dir_okay=False),
              help='Transcript JSON with word timings')
@click.option('--transcript-unit', type=click.Choice(['ms', 's']), default='ms',
              help='Time unit of transcript word starts')
@click.option('--forced-align', is_flag=True,
              help='Try aeneas forced alignment against --audio')
@click.option('--speeds', type=click.Path(exists=True, dir_okay=False),
              help='JSON file of section label -> speed multiplier overrides')
@click.option('--clean', is_flag=True,
              help='Strip lyric-site page noise before the first section tag')
@click.option('--format', 'output_format', type=click.Choice(['json', 'lrc']),
              default='json', help='Output format')
@click.option('-o', '--output', help='Output file (.json or .lrc)')
@click.option('--cache/--no-cache', default=False,
              help='Reuse results cached for identical inputs')
@click.pass_context
def sync(ctx, lyrics_file, duration, audio, transcript, transcript_unit,
         forced_align, speeds, clean, output_format, output, cache):
    """Time-stamp lyrics from LYRICS_FILE ('-' for stdin)."""
    logger = ctx.obj['logger']

    try:
        text = lyrics_file.read()
        if clean:
            text = clean_scraped_lyrics(text)

        if duration is None and audio:
            duration = get_audio_duration(audio)
            if duration:
                logger.info(f"Audio duration: {duration:.1f}s")

        if forced_align and not audio:
            raise click.BadParameter("--forced-align requires --audio")

        words = load_transcript(transcript, unit=transcript_unit) if transcript else None
        if words is not None:
            logger.info(f"Loaded {len(words)} transcript words")

        speed_table = load_section_speeds(speeds) if speeds else None
        timing_model = SectionTimingModel(speed_table) if speed_table else None
        strategies = [ForcedAligner(audio)] if forced_align else None

        result = None
        result_cache = None
        key = None
        if cache:
            from .utils.cache import SyncCache
            result_cache = SyncCache()
            key = SyncCache.make_key(
                text,
                resolve_duration(duration),
                words,
                speed_table,
                forced_align=audio if forced_align else "",
            )
            result = result_cache.get(key)

        if result is None:
            result = process_lyrics(
                text,
                duration=duration,
                transcript_words=words,
                strategies=strategies,
                timing_model=timing_model,
            )
            if result_cache is not None:
                result_cache.put(key, result)

        logger.info(
            f"✅ {result.lyrics_type.value}: {result.matched_lines}/{result.total_lines} lines timed"
        )

        if output:
            output_path = validate_output_path(output)
            if output_path.suffix.lower() == '.lrc':
                output_format = 'lrc'
            else:
                output_format = 'json'
        else:
            output_path = None

        if output_format == 'lrc':
            rendered = to_lrc(result.synced_lyrics)
        else:
            rendered = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

        if output_path:
            output_path.write_text(rendered + "\n", encoding='utf-8')
            logger.info(f"Wrote {output_path}")
        else:
            click.echo(rendered)

    except LyricsSyncError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)
    except click.ClickException:
        raise
    except Exception as e:
        logger.error(f"❌ Unexpected error: {e}")
        if ctx.obj.get('verbose'):
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command('classify')
@click.argument('lyrics_file', type=click.File('r', encoding='utf-8'))
def classify_command(lyrics_file):
    """Print the detected format of LYRICS_FILE."""
    click.echo(classify(lyrics_file.read()).value)


@cli.command()
@click.argument('text')
def syllables(text):
    """Print the estimated syllable count of TEXT."""
    click.echo(count_syllables(text))


@cli.command()
@click.argument('lyrics_file', type=click.File('r', encoding='utf-8'))
@click.option('--limit', type=click.IntRange(min=1), default=KEYWORD_LIMIT,
              help='Maximum number of keywords')
def keywords(lyrics_file, limit):
    """List distinct lyric words for transcription word boosting."""
    for word in extract_keywords(lyrics_file.read(), limit=limit):
        click.echo(word)


@cli.group()
def cache():
    """Result cache commands."""
    pass


@cache.command()
@click.option('--cache-dir', type=click.Path(), help='Cache directory')
def stats(cache_dir):
    """Show cache statistics."""
    from .utils.cache import SyncCache
    manager = SyncCache(Path(cache_dir) if cache_dir else None)
    info = manager.get_cache_stats()
    click.echo(f"Cache Directory: {info['cache_dir']}")
    click.echo(f"Entries: {info['entry_count']}")
    click.echo(f"Total Size: {info['total_size_kb']:.1f} KB")


@cache.command()
@click.option('--cache-dir', type=click.Path(), help='Cache directory')
@click.confirmation_option(prompt='Are you sure you want to clear the result cache?')
def clear(cache_dir):
    """Remove all cached results."""
    from .utils.cache import SyncCache
    manager = SyncCache(Path(cache_dir) if cache_dir else None)
    removed = manager.clear()
    click.echo(f"✅ Removed {removed} cached results")


if __name__ == '__main__':
    cli()
