"""Command line entry point for PulseCTRL."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pulsectrl.api.errors import PulseError
from pulsectrl.api.transport import Connection, resolve_address
from pulsectrl.core.config import ConfigManager
from pulsectrl.core.entity import AudioEntity
from pulsectrl.core.registry import Core, get_core, get_device, get_stream
from pulsectrl.models.volume import VolumeControl

logger = logging.getLogger(__name__)

_FALLBACK_TARGETS = {"@sink": "get_fallback_sink", "@source": "get_fallback_source"}

_LISTINGS = {
    "sinks": "get_sinks",
    "sources": "get_sources",
    "cards": "get_cards",
    "playback": "get_playback_streams",
    "record": "get_record_streams",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pulsectrl",
        description="PulseCTRL — control PulseAudio devices and streams over D-Bus",
    )
    parser.add_argument("--address", default=None, help="PulseAudio D-Bus address")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("info", help="show server name, version and fallback devices")

    listing = sub.add_parser("list", help="list object paths")
    listing.add_argument("kind", choices=sorted(_LISTINGS))

    target_help = "object path, or @sink / @source for the fallback device"

    volume = sub.add_parser("volume", help="get or change volume in percent")
    volume.add_argument("target", help=target_help)
    volume.add_argument("action", nargs="?", default="get", choices=["get", "set", "up", "down"])
    volume.add_argument("value", nargs="*", type=int, help="percent per channel (set)")
    volume.add_argument("--step", type=int, default=None, help="step in percent")
    volume.add_argument("--max", type=int, default=None, help="ceiling in percent")
    volume.add_argument("--stream", action="store_true", help="target is a stream")

    mute = sub.add_parser("mute", help="get or change mute state")
    mute.add_argument("target", help=target_help)
    mute.add_argument("action", nargs="?", default="get", choices=["get", "on", "off", "toggle"])
    mute.add_argument("--stream", action="store_true", help="target is a stream")

    fallback = sub.add_parser("fallback", help="get or set the fallback sink/source")
    fallback.add_argument("kind", choices=["sink", "source"])
    fallback.add_argument("path", nargs="?", default=None)

    state = sub.add_parser("state", help="show device state")
    state.add_argument("target", help=target_help)

    return parser


def _resolve_target(core: Core, target: str) -> str:
    getter = _FALLBACK_TARGETS.get(target)
    if getter is None:
        return target
    path = getattr(core, getter)()
    if not path:
        raise PulseError(f"No fallback device set for {target}")
    return str(path)


def _audio_entity(
    conn: Connection, core: Core, args: argparse.Namespace, control: VolumeControl
) -> AudioEntity:
    path = _resolve_target(core, args.target)
    if args.stream:
        return get_stream(conn, path, control)
    return get_device(conn, path, control)


def _format_percent(percent: Sequence[int]) -> str:
    return " ".join(f"{p}%" for p in percent)


def _run(conn: Connection, args: argparse.Namespace, control: VolumeControl) -> None:  # noqa: PLR0912
    core = get_core(conn)

    if args.command == "info":
        print(f"name: {core.get_name()}")
        print(f"version: {core.get_version()}")
        print(f"fallback sink: {core.get_fallback_sink() or '-'}")
        print(f"fallback source: {core.get_fallback_source() or '-'}")

    elif args.command == "list":
        for path in getattr(core, _LISTINGS[args.kind])():
            print(path)

    elif args.command == "volume":
        entity = _audio_entity(conn, core, args, control)
        if args.action == "set":
            if not args.value:
                raise PulseError("volume set needs at least one percentage")
            entity.set_volume_percent(args.value)
        elif args.action == "up":
            entity.volume_up(args.step, args.max)
        elif args.action == "down":
            entity.volume_down(args.step)
        print(_format_percent(entity.get_volume_percent()))

    elif args.command == "mute":
        entity = _audio_entity(conn, core, args, control)
        if args.action == "toggle":
            muted = entity.toggle_muted()
        else:
            if args.action != "get":
                entity.set_muted(args.action == "on")
            muted = entity.is_muted()
        print("muted" if muted else "unmuted")

    elif args.command == "fallback":
        if args.path:
            if args.kind == "sink":
                core.set_fallback_sink(args.path)
            else:
                core.set_fallback_source(args.path)
        current = core.get_fallback_sink() if args.kind == "sink" else core.get_fallback_source()
        print(current or "-")

    elif args.command == "state":
        device = get_device(conn, _resolve_target(core, args.target), control)
        print(device.get_state().value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the PulseCTRL command line.

    Returns:
        Exit code (0 for success, 1 on error).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager()
    try:
        address = resolve_address(args.address, config.get_server_address())
        with Connection.open(address) as conn:
            _run(conn, args, config.get_volume_control())
    except (PulseError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"pulsectrl: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
