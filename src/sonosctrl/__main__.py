"""Command line entry point for SonosCTRL."""

import argparse
import json
import logging
import sys
import time

import soco.config

from sonosctrl.api.device import DeviceCommunicationError
from sonosctrl.api.soco_device import SoCoDevice
from sonosctrl.core.config import ConfigManager
from sonosctrl.core.snapshot import capture, restore
from sonosctrl.models.metadata import TrackMetadata
from sonosctrl.models.playback import PlayState
from sonosctrl.models.source import MalformedStateError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DEVICE_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sonosctrl",
        description="SonosCTRL: snapshot and restore Sonos speakers",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="print the current state of a speaker")
    show.add_argument("speaker", help="saved speaker name or IP address")

    alert = commands.add_parser("alert", help="play a URI, then restore what was playing")
    alert.add_argument("speaker", help="saved speaker name or IP address")
    alert.add_argument("uri", help="URI the speaker can play")
    alert.add_argument("--volume", type=int, default=None, help="alert volume (0-100)")
    alert.add_argument("--duration", type=int, default=None, help="seconds before restoring")
    alert.add_argument("--title", default="Alert", help="title shown in the Sonos apps")

    profile = commands.add_parser("profile", help="manage saved speakers")
    profile_commands = profile.add_subparsers(dest="profile_command", required=True)
    add = profile_commands.add_parser("add", help="save a speaker")
    add.add_argument("name")
    add.add_argument("host")
    profile_commands.add_parser("list", help="list saved speakers")
    remove = profile_commands.add_parser("remove", help="forget a speaker")
    remove.add_argument("name")

    return parser


def resolve_host(config: ConfigManager, speaker: str) -> str:
    """Return the host of a saved speaker, or the argument itself."""
    profile = config.get_profile_by_name(speaker)
    if profile is not None:
        logger.debug("Using saved speaker %s at %s", profile.name, profile.host)
        return profile.host
    return speaker


def cmd_show(config: ConfigManager, args: argparse.Namespace) -> int:
    device = SoCoDevice.from_host(resolve_host(config, args.speaker))
    snapshot = capture(device)
    print(json.dumps(snapshot.to_dict(), indent=2))
    return EXIT_OK


def cmd_alert(config: ConfigManager, args: argparse.Namespace) -> int:
    """Play an alert URI and put the speaker back the way it was."""
    volume = args.volume if args.volume is not None else config.get_alert_volume()
    duration = args.duration if args.duration is not None else config.get_alert_duration()
    if not 0 <= volume <= 100:  # noqa: PLR2004
        logger.error("Alert volume must be between 0 and 100, got %d", volume)
        return EXIT_USAGE

    device = SoCoDevice.from_host(resolve_host(config, args.speaker))
    escape = config.get_didl_escape()

    snapshot = capture(device)

    if not snapshot.is_coordinator:
        # Group members follow their coordinator and cannot play on their own
        logger.warning("%r is not a group coordinator, not playing alert", device)
        return EXIT_OK

    try:
        if device.get_play_state() is PlayState.PLAYING:
            device.pause()
        device.set_volume(volume)
        device.set_mute(False)
        device.set_uri(args.uri, TrackMetadata(title=args.title).to_didl(escape=escape))
        device.play()
        logger.info("Playing %s on %r for %ds", args.uri, device, duration)
        time.sleep(duration)
    finally:
        restore(snapshot, device, escape=escape)
    return EXIT_OK


def cmd_profile(config: ConfigManager, args: argparse.Namespace) -> int:
    if args.profile_command == "add":
        profile = config.add_speaker_profile(args.name, args.host)
        print(f"{profile.name}\t{profile.host}")
    elif args.profile_command == "list":
        for profile in config.get_speaker_profiles():
            print(f"{profile.name}\t{profile.host}")
    elif args.profile_command == "remove":
        if not config.remove_speaker_profile(args.name):
            logger.error("No saved speaker named %s", args.name)
            return EXIT_USAGE
    config.sync()
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run the SonosCTRL command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).

    Returns:
        Exit code (0 for success).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager()
    soco.config.REQUEST_TIMEOUT = config.get_request_timeout()

    handlers = {"show": cmd_show, "alert": cmd_alert, "profile": cmd_profile}
    try:
        return handlers[args.command](config, args)
    except DeviceCommunicationError as e:
        logger.error("Speaker error: %s", e)
        return EXIT_DEVICE_ERROR
    except MalformedStateError as e:
        logger.error("Unexpected speaker state: %s", e)
        return EXIT_DEVICE_ERROR


if __name__ == "__main__":
    sys.exit(main())
