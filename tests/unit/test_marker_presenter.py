"""
Unit tests for marker presentation
"""
from h2ok.config.settings import MapSettings
from h2ok.models.internal_models import Coordinates, MarkerIcon
from h2ok.services.marker_presenter import MarkerPresenter, build_marker_icon, water_summary

DIRECTIONS = "https://www.google.com/maps/dir/"


def test_descriptor_fields(make_point):
    presenter = MarkerPresenter(directions_url=DIRECTIONS)
    [marker] = presenter.present([make_point()])

    assert marker.key == "p1"
    assert marker.position == Coordinates(57.15, 65.53)
    assert marker.label == "Coffee Point"
    assert marker.is_new is False
    assert marker.directions_url == "https://www.google.com/maps/dir/?api=1&destination=57.15,65.53"
    assert marker.popup_lines() == [
        "Respubliki 1",
        "Hours: 9:00-21:00",
        "Water: cold",
        "Access: free",
    ]


def test_new_badge_in_label(make_point):
    [marker] = MarkerPresenter(directions_url=DIRECTIONS).present([make_point(is_new=True)])
    assert marker.label == "Coffee Point (new)"
    assert marker.is_new is True


def test_water_summary_combinations():
    assert water_summary(True, False) == "cold"
    assert water_summary(False, True) == "hot"
    assert water_summary(True, True) == "cold / hot"
    assert water_summary(False, False) is None


def test_point_without_water_has_no_water_line(make_point):
    [marker] = MarkerPresenter(directions_url=DIRECTIONS).present(
        [make_point(has_cold=False, has_hot=False, open_hours=None, access_type="ask_staff")]
    )
    assert marker.water is None
    assert marker.popup_lines() == ["Respubliki 1", "Access: ask staff"]


def test_present_preserves_order_and_is_idempotent(make_point):
    presenter = MarkerPresenter(directions_url=DIRECTIONS)
    records = [make_point(id="b"), make_point(id="a"), make_point(id="c", has_hot=True)]

    first = presenter.present(records)
    second = presenter.present(records)

    assert [m.key for m in first] == ["b", "a", "c"]
    assert first == second


def test_present_does_not_depend_on_list_identity(make_point):
    presenter = MarkerPresenter(directions_url=DIRECTIONS)
    assert presenter.present([make_point()]) == presenter.present(tuple([make_point()]))


def test_present_empty():
    assert MarkerPresenter(directions_url=DIRECTIONS).present([]) == []


def test_icon_built_from_settings_is_attached(make_point):
    icon = build_marker_icon(MapSettings(marker_icon_url="/i.png"))
    assert isinstance(icon, MarkerIcon)
    assert icon.icon_url == "/i.png"
    assert icon.icon_size == (25, 41)
    assert icon.popup_anchor == (1, -34)

    [marker] = MarkerPresenter(icon=icon, directions_url=DIRECTIONS).present([make_point()])
    assert marker.icon is icon
