"""Console and HTML views of a TimetableSession; they only read the session's published state."""

from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .session import TimetableSession

NO_MATCH_MESSAGE = "No matching bus found."


def _timetable_rows(session: TimetableSession) -> list[dict[str, str | bool]]:
    recommended = {bus.id for bus in session.search_results}
    return [
        {'departure': bus.departure, 'arrival': bus.arrival, 'recommended': bus.id in recommended}
        for bus in session.current_full_timetable
    ]


def _result_rows(session: TimetableSession) -> list[dict[str, str]]:
    countdowns = session.countdown_messages
    return [
        {'departure': bus.departure, 'arrival': bus.arrival, 'countdown': countdowns.get(bus.id, '')}
        for bus in session.search_results
    ]


def render_console(session: TimetableSession, show_timetable: bool = True) -> str:
    lines = [f"Route: {session.selected_route.label}", ""]
    if session.holiday_message is not None:
        lines.append(session.holiday_message)
    else:
        lines.append(session.search_criteria_description)
        results = _result_rows(session)
        if not results:
            lines.append(NO_MATCH_MESSAGE)
        for row in results:
            lines.append(f"  Recommended: {row['departure']:>5} -> {row['arrival']:>5}   {row['countdown']}")

    if show_timetable:
        lines += ["", "Full timetable:"]
        for row in _timetable_rows(session):
            marker = '*' if row['recommended'] else ' '
            lines.append(f" {marker} {row['departure']:>5} -> {row['arrival']:>5}")
    return "\n".join(lines)


def render_html(session: TimetableSession) -> str:
    templates_dir = Path(__file__).resolve().parent / 'templates'
    env = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=select_autoescape(['html', 'xml']))
    tpl = env.get_template('timetable.html.j2')
    rendered = tpl.render(
        route_label=session.selected_route.label,
        holiday_message=session.holiday_message,
        criteria=session.search_criteria_description,
        results=_result_rows(session),
        no_match_message=NO_MATCH_MESSAGE,
        timetable=_timetable_rows(session),
        generated_at=datetime.now().strftime("%d.%m.%Y %H:%M"),
    )
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()
