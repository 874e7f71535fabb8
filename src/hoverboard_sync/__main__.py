import argparse
import logging
import sys
from pathlib import Path

from hoverboard_sync.config import DEFAULT_DATA_DIR, SESSIONIZE_URL, SyncConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoverboard-sync",
        description="Sync conference schedule, sessions and speakers from Sessionize into Hoverboard JSON files.",
    )
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR, help="Directory holding the JSON files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")
    sync = sub.add_parser("sync", help="Fetch upstream data and update the local files")
    sync.add_argument("--backup-dir", type=Path, default=None, help="Where dated backups go (default: data dir)")
    sync.add_argument("--url", default=SESSIONIZE_URL, help="Upstream feed URL")
    sync.add_argument("--no-backup", action="store_true", help="Do not back up files before overwriting them")
    sync.add_argument("--use-cache", action="store_true", help="Reuse sessionize.json if it already exists")
    sync.add_argument("--keep-speakers", action="store_true", help="Never modify existing speaker records")
    return parser


def config_from_args(args: argparse.Namespace) -> SyncConfig:
    if args.command != "sync":
        return SyncConfig(data_dir=args.data_dir)
    return SyncConfig(
        backup_enabled=not args.no_backup,
        force_refresh=not args.use_cache,
        update_speaker_data=not args.keep_speakers,
        data_dir=args.data_dir,
        backup_dir=args.backup_dir,
        sessionize_url=args.url,
    )


def run_sync(config: SyncConfig) -> int:
    """Run the sync from the command line."""
    from hoverboard_sync.errors import SyncError
    from hoverboard_sync.sync import SyncRunner

    print("Hoverboard Sync")
    print("=" * 40)

    try:
        SyncRunner(config, log=print).run()
    except SyncError as e:
        logging.getLogger("hoverboard_sync").error("Sync aborted: %s", e)
        return 1
    return 0


def run_app(config: SyncConfig):
    """Launch the TUI application."""
    from hoverboard_sync.app import HoverboardSyncApp
    app = HoverboardSyncApp(config)
    app.run()


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = config_from_args(args)
    if args.command == "sync":
        sys.exit(run_sync(config))
    run_app(config)


if __name__ == "__main__":
    main()
