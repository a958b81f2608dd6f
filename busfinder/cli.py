"""Console shell around the bus finder.

Usage patterns:

1. Next buses from now on the default route:
   busfinder

2. Latest inbound buses arriving by 8:30, written to HTML as well:
   busfinder --route inbound --mode arrival --at 8:30 --html

3. Keep the countdown running until Ctrl+C:
   busfinder --watch
"""
import argparse
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence

from busfinder.config import settings
from busfinder.logging_config import setup_logging
from busfinder.models import Route, SearchType
from busfinder.rendering import render_console, render_html
from busfinder.session import TimetableSession
from busfinder.timetable import InvalidTimetableData, Schedule, load_timetable
from busfinder.timeutils import parse_hhmm


def _load_timetables() -> dict[Route, Schedule] | None:
    if not settings.timetable_overridden():
        return None
    return load_timetable(settings.timetable_file)


def _reference_time(value: str | None, now: datetime) -> datetime | None:
    if value is None:
        return None
    return datetime.combine(now.date(), parse_hhmm(value))


def build_session(
        route: Route,
        mode: SearchType,
        at: str | None = None,
        timetables: dict[Route, Schedule] | None = None,
        clock: Callable[[], datetime] = datetime.now,
) -> TimetableSession:
    session = TimetableSession(clock=clock, timetables=timetables)
    session.selected_route = route
    reference = _reference_time(at, clock())
    if reference is None and mode is SearchType.DEPARTURE:
        session.search_at_current_time()
        return session
    session.search_type = mode
    if reference is not None:
        if mode is SearchType.ARRIVAL:
            session.arrival_time = reference
        else:
            session.departure_time = reference
    session.perform_search()
    return session


def write_html(session: TimetableSession, path: Path) -> Path:
    path.write_text(render_html(session), encoding="utf-8")
    logging.info(f"HTML written to {path}")
    return path


def _hhmm(value: str) -> str:
    try:
        parse_hhmm(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Next Columbus City shuttle buses")
    p.add_argument("--route", choices=[r.value for r in Route], default=Route.OUTBOUND.value)
    p.add_argument("--mode", choices=[m.value for m in SearchType], default=SearchType.DEPARTURE.value)
    p.add_argument("--at", metavar="HH:MM", type=_hhmm, default=None,
                   help="Departure or arrival target; defaults to the current time")
    p.add_argument("--html", nargs="?", const=str(settings.output_html), default=None, metavar="PATH",
                   help=f"Also write an HTML view (default {settings.output_html})")
    p.add_argument("--no-timetable", action="store_true", help="Hide the full timetable listing")
    p.add_argument("--watch", action="store_true", help="Refresh the countdown until interrupted")
    p.add_argument("--log-level", default=settings.log_level)
    return p


def _watch(session: TimetableSession, show_timetable: bool) -> None:
    last_view = render_console(session, show_timetable)

    def _reprint(s: TimetableSession) -> None:
        nonlocal last_view
        view = render_console(s, show_timetable)
        if view != last_view:
            last_view = view
            print("\n" + view, flush=True)

    unsubscribe = session.subscribe(_reprint)
    stop_event = threading.Event()
    logging.info(f"Countdown refresh every {settings.tick_seconds}s, Ctrl+C to stop")
    try:
        session.run_forever(stop_event)
    except KeyboardInterrupt:
        stop_event.set()
    finally:
        unsubscribe()


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        timetables = _load_timetables()
    except (InvalidTimetableData, OSError):
        logging.exception("Could not load timetable")
        return 1

    session = build_session(Route(args.route), SearchType(args.mode), args.at, timetables)
    show_timetable = not args.no_timetable
    print(render_console(session, show_timetable))
    if args.html:
        try:
            write_html(session, Path(args.html))
        except OSError:
            logging.exception("Could not write HTML view")
            return 1
    if args.watch:
        _watch(session, show_timetable)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
